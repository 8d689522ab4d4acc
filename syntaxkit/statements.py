"""Parsers for statements: blocks, if statements and variable declarations."""

from __future__ import annotations

from typing import Optional

from .ast import Block, If, IfCompare, IfExpr, IfOperand, IfOperator, Stmt, VarDecl
from .common import parse_bool, parse_id, try_parse
from .expressions import parse_expr
from .scanner import Scanner

__all__ = [
    "parse_block",
    "parse_stmt",
    "parse_if",
    "parse_if_expr",
    "parse_if_operand",
    "parse_if_operator",
    "parse_var_decl",
]

# Longer symbols come before their prefixes so that ">=" is not read as ">".
_OPERATORS = (
    IfOperator.EQ,
    IfOperator.NEQ,
    IfOperator.GE,
    IfOperator.GT,
    IfOperator.LE,
    IfOperator.LT,
)


def parse_block(scn: Scanner) -> Block:
    """Parse as many statements as possible; stops before the first that does not parse."""
    stmts = []
    while True:
        trial = scn.copy()
        stmt = _parse_block_stmt(trial)
        if stmt is None:
            break
        stmts.append(stmt)
        scn.replace(trial)
    return Block(stmts)


def _parse_block_stmt(scn: Scanner) -> Optional[Stmt]:
    scn.skip_whitespaces()
    stmt = parse_stmt(scn)
    if stmt is None:
        return None
    scn.skip_whitespaces()
    scn.skip_newline()
    return stmt


def parse_stmt(scn: Scanner) -> Optional[Stmt]:
    """Parse an if statement or, failing that, a variable declaration."""
    for parser in (parse_if, parse_var_decl):
        result = try_parse(scn, parser)
        if result is not None:
            return result
    return None


def parse_if(scn: Scanner) -> Optional[If]:
    """Parse ``if expr`` with optional ``elif`` and ``else`` branches, ended by ``.``."""
    if not scn.has("if"):
        return None

    scn.skip_spaces()
    expr = parse_if_expr(scn)
    if expr is None:
        return None
    scn.skip_spaces()
    scn.skip_newline()
    if_block = (expr, parse_block(scn))

    elif_blocks = []
    while True:
        scn.skip_spaces()
        trial = scn.copy()
        if not trial.has("elif"):
            break
        scn.replace(trial)
        scn.skip_spaces()
        elif_expr = parse_if_expr(scn)
        if elif_expr is None:
            return None
        scn.skip_spaces()
        scn.skip_newline()
        elif_blocks.append((elif_expr, parse_block(scn)))

    else_block = None
    scn.skip_spaces()
    trial = scn.copy()
    if trial.has("else"):
        scn.replace(trial)
        scn.skip_spaces()
        scn.skip_newline()
        else_block = parse_block(scn)

    scn.skip_spaces()
    if scn.scan(".") is None:
        return None

    return If(if_block, elif_blocks, else_block)


def parse_if_expr(scn: Scanner) -> Optional[IfExpr]:
    """Parse a single operand or a comparison of two operands."""
    left = parse_if_operand(scn)
    if left is None:
        return None
    scn.skip_whitespaces()

    op = parse_if_operator(scn)
    if op is None:
        return left

    scn.skip_whitespaces()
    right = parse_if_operand(scn)
    if right is None:
        return None
    return IfCompare(left, op, right)


def parse_if_operand(scn: Scanner) -> Optional[IfOperand]:
    """Parse a boolean literal (as bool) or a variable name (as str)."""
    value = try_parse(scn, parse_bool)
    if value is not None:
        return value
    return try_parse(scn, parse_id)


def parse_if_operator(scn: Scanner) -> Optional[IfOperator]:
    for op in _OPERATORS:
        if scn.has(op.value):
            return op
    return None


def parse_var_decl(scn: Scanner) -> Optional[VarDecl]:
    """Parse ``name [: type] = expr``."""
    name = parse_id(scn)
    if name is None:
        return None
    scn.skip_spaces()

    typ = None
    if scn.has(":"):
        scn.skip_spaces()
        typ = parse_id(scn)
        if typ is None:
            return None
        scn.skip_spaces()

    if scn.scan("=") is None:
        return None
    scn.skip_spaces()
    expr = parse_expr(scn)
    if expr is None:
        return None

    return VarDecl(name, typ, expr)