"""Small parsers shared by the grammar: literals, identifiers and backtracking."""

from __future__ import annotations

from typing import Callable, Optional, Tuple, TypeVar

from .scanner import Scanner

T = TypeVar("T")


def parse_bool(scn: Scanner) -> Optional[bool]:
    """Parse ``true`` or ``false``."""
    trial = scn.copy()
    if trial.scan("true") is not None:
        scn.replace(trial)
        return True
    if trial.scan("false") is not None:
        scn.replace(trial)
        return False
    return None


def parse_int(scn: Scanner) -> Optional[str]:
    """Parse an optionally negative run of digits, returning its text."""
    sign = scn.scan("-") or ""
    digits = scn.scan_digits()
    if digits is None:
        return None
    return sign + digits


def parse_id(scn: Scanner) -> Optional[str]:
    """Parse an identifier: an ASCII letter followed by ASCII letters or digits."""
    first = scn.scan_alphabetic()
    if first is None:
        return None
    chars = [first]
    while (ch := scn.scan_alphanumeric()) is not None:
        chars.append(ch)
    return "".join(chars)


def parse_uint(scn: Scanner) -> Optional[str]:
    return scn.scan_digits()


def parse_two_ids(scn: Scanner) -> Optional[Tuple[str, str]]:
    """Parse ``name : type`` and return both identifiers."""
    name = parse_id(scn)
    if name is None:
        return None
    scn.skip_spaces()
    if scn.scan(":") is None:
        return None
    scn.skip_spaces()
    typ = parse_id(scn)
    if typ is None:
        return None
    return name, typ


def try_parse(scn: Scanner, parser: Callable[[Scanner], Optional[T]]) -> Optional[T]:
    """Run ``parser`` on a copy of ``scn``; advance ``scn`` only if it succeeds."""
    trial = scn.copy()
    result = parser(trial)
    if result is not None:
        scn.replace(trial)
    return result