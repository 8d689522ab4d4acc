"""Parsers for expressions: literals, variables, groups and arithmetic chains.

Binding, from loosest to tightest: ``-`` (subtraction), ``+``, ``/``, ``*``,
then the base terms (bool, int, struct literal, variable, optionally negated
parenthesised group).
"""

from __future__ import annotations

from typing import Callable, Optional

from .ast import (
    Add,
    BoolLit,
    Div,
    Expr,
    Group,
    IntLit,
    Mul,
    Neg,
    StructLit,
    StructLitArg,
    Sub,
    Var,
)
from .common import parse_bool, parse_id, parse_int, try_parse
from .scanner import Scanner

__all__ = [
    "parse_expr",
    "parse_bool_lit",
    "parse_int_lit",
    "parse_struct_lit",
    "parse_struct_lit_arg",
    "parse_var",
]

_Parser = Callable[[Scanner], Optional[Expr]]


def parse_expr(scn: Scanner) -> Optional[Expr]:
    """Parse a full expression."""
    return _parse_sub(scn)


def parse_bool_lit(scn: Scanner) -> Optional[BoolLit]:
    value = parse_bool(scn)
    return None if value is None else BoolLit(value)


def parse_int_lit(scn: Scanner) -> Optional[IntLit]:
    value = parse_int(scn)
    return None if value is None else IntLit(value)


def parse_struct_lit(scn: Scanner) -> Optional[StructLit]:
    """Parse ``[Name] { arg, arg: expr, ... }`` with an optional trailing comma."""
    name = parse_id(scn)
    scn.skip_spaces()
    if scn.scan("{") is None:
        return None
    scn.skip_whitespaces()

    if scn.has("}"):
        return StructLit(name, [])

    args = []
    while True:
        arg = parse_struct_lit_arg(scn)
        if arg is None:
            return None
        args.append(arg)

        scn.skip_whitespaces()

        if scn.has(","):
            scn.skip_whitespaces()
            if scn.has("}"):
                break
        elif scn.has("}"):
            break

    return StructLit(name, args)


def parse_struct_lit_arg(scn: Scanner) -> Optional[StructLitArg]:
    """Parse ``name`` or ``name : expr``."""
    name = parse_id(scn)
    if name is None:
        return None
    scn.skip_spaces()
    expr = None
    if scn.has(":"):
        scn.skip_spaces()
        expr = parse_expr(scn)
    return StructLitArg(name, expr)


def parse_var(scn: Scanner) -> Optional[Var]:
    """Parse a variable reference, recording the span it covers."""
    start = scn.current_cursor()
    name = parse_id(scn)
    if name is None:
        return None
    end = scn.current_cursor()
    return Var(name, start.span_to(end))


def _parse_chain(
    scn: Scanner, operand: _Parser, symbol: str, node: Callable[[list], Expr]
) -> Optional[Expr]:
    first = operand(scn)
    if first is None:
        return None
    ops = [first]

    while True:
        trial = scn.copy()
        trial.skip_spaces()
        if not trial.has(symbol):
            break
        scn.replace(trial)
        scn.skip_spaces()
        nxt = operand(scn)
        if nxt is None:
            return None
        ops.append(nxt)

    if len(ops) == 1:
        return ops[0]
    return node(ops)


def _parse_sub(scn: Scanner) -> Optional[Expr]:
    return _parse_chain(scn, _parse_add, "-", Sub)


def _parse_add(scn: Scanner) -> Optional[Expr]:
    return _parse_chain(scn, _parse_div, "+", Add)


def _parse_div(scn: Scanner) -> Optional[Expr]:
    return _parse_chain(scn, _parse_mul, "/", Div)


def _parse_mul(scn: Scanner) -> Optional[Expr]:
    return _parse_chain(scn, _parse_base, "*", Mul)


_BASE_PARSERS: tuple = ()


def _parse_base(scn: Scanner) -> Optional[Expr]:
    for parser in _BASE_PARSERS:
        result = try_parse(scn, parser)
        if result is not None:
            return result
    return None


def _parse_grp(scn: Scanner) -> Optional[Expr]:
    if not scn.has("("):
        return None
    expr = parse_expr(scn)
    if expr is None:
        return None
    if not scn.has(")"):
        return None
    return Group(expr)


def _parse_maybe_neg(scn: Scanner) -> Optional[Expr]:
    negated = scn.has("-")
    grp = _parse_grp(scn)
    if grp is None:
        return None
    return Neg(grp) if negated else grp


_BASE_PARSERS = (
    parse_bool_lit,
    parse_int_lit,
    parse_struct_lit,
    parse_var,
    _parse_maybe_neg,
)