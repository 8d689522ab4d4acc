"""Character scanner with position tracking and cheap backtracking."""

from __future__ import annotations

import string
from typing import Callable, Optional

from .ast import Cursor

_ALPHA = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALNUM = _ALPHA | _DIGITS
_SPACES = frozenset(" \t")
_WHITESPACES = frozenset(" \t\n\r")


class Scanner:
    """Walks over source text; copy() and replace() give backtracking."""

    __slots__ = ("_code", "_offset", "_column", "_line")

    def __init__(self, code: str) -> None:
        self._code = code
        self._offset = 0
        self._column = 0
        self._line = 0

    def __repr__(self) -> str:
        return f"Scanner(offset={self._offset}, line={self._line}, column={self._column})"

    def copy(self) -> "Scanner":
        """Return an independent scanner at the same position."""
        clone = Scanner(self._code)
        clone.replace(self)
        return clone

    def replace(self, other: "Scanner") -> None:
        """Move this scanner to the position of ``other``."""
        self._code = other._code
        self._offset = other._offset
        self._column = other._column
        self._line = other._line

    def current_cursor(self) -> Cursor:
        return Cursor(self._column, self._line, self._offset)

    def _advance(self, count: int) -> None:
        for ch in self._code[self._offset:self._offset + count]:
            if ch == "\n":
                self._column = 0
                self._line += 1
            else:
                self._column += 1
            self._offset += 1

    def _peek(self) -> Optional[str]:
        if self._offset < len(self._code):
            return self._code[self._offset]
        return None

    def has(self, value: str) -> bool:
        """Consume ``value`` if the text continues with it."""
        if self._code.startswith(value, self._offset):
            self._advance(len(value))
            return True
        return False

    def scan(self, value: str) -> Optional[str]:
        """Consume and return ``value`` if the text continues with it."""
        return value if self.has(value) else None

    def _step_when(self, condition: Callable[[str], bool]) -> Optional[str]:
        ch = self._peek()
        if ch is None or not condition(ch):
            return None
        self._advance(1)
        return ch

    def scan_alphabetic(self) -> Optional[str]:
        return self._step_when(_ALPHA.__contains__)

    def scan_alphanumeric(self) -> Optional[str]:
        return self._step_when(_ALNUM.__contains__)

    def scan_digit(self) -> Optional[str]:
        return self._step_when(_DIGITS.__contains__)

    def scan_digits(self) -> Optional[str]:
        """Consume and return a run of ASCII digits, or None if there is none."""
        end = self._offset
        while end < len(self._code) and self._code[end] in _DIGITS:
            end += 1
        if end == self._offset:
            return None
        digits = self._code[self._offset:end]
        self._advance(len(digits))
        return digits

    def _skip_range(self, minimum: int, maximum: int, condition: Callable[[str], bool]) -> int:
        found = 0
        for ch in self._code[self._offset:]:
            if not condition(ch):
                break
            found += 1
            if found == maximum:
                break
        if found < minimum or found > maximum:
            return 0
        self._advance(found)
        return found

    def _skip_when(self, condition: Callable[[str], bool]) -> bool:
        start = self._offset
        end = start
        while end < len(self._code) and condition(self._code[end]):
            end += 1
        self._advance(end - start)
        return end > start

    def skip_any(self, char: str) -> bool:
        """Skip every repetition of ``char``; report whether any was skipped."""
        return self._skip_when(lambda c: c == char)

    def skip_newline(self) -> bool:
        """Skip one line ending: ``\\r``, ``\\r\\n`` or ``\\n`` (but not ``\\n\\r``)."""
        if self._skip_range(0, 1, lambda c: c == "\r") == 1:
            return self._skip_range(0, 1, lambda c: c == "\n") <= 1
        return (
            self._skip_range(0, 1, lambda c: c == "\n") == 1
            and self._skip_range(0, 1, lambda c: c == "\r") == 0
        )

    def skip_spaces(self) -> bool:
        return self._skip_when(_SPACES.__contains__)

    def skip_whitespaces(self) -> bool:
        return self._skip_when(_WHITESPACES.__contains__)