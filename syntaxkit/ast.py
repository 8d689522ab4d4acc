"""Syntax tree node types produced by the parsers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class Cursor:
    """A position in source text: column and line (both zero-based) and character offset."""

    column: int
    line: int
    offset: int

    def span_to(self, other: "Cursor") -> "Span":
        """Return the span starting here and ending at ``other``."""
        width = other.offset - self.offset
        if width < 0:
            raise ValueError("span end lies before its start")
        return Span(self, width)


@dataclass(frozen=True)
class Span:
    """A run of source text starting at ``cursor`` and ``width`` characters long."""

    cursor: Cursor
    width: int


@dataclass(frozen=True)
class BoolLit:
    value: bool


@dataclass(frozen=True)
class IntLit:
    """Integer literal, kept as its source digits (with optional leading minus)."""

    value: str


@dataclass(frozen=True)
class StructLitArg:
    """A ``name: expr`` argument of a struct literal; ``expr`` is None for shorthand."""

    id: str
    expr: Optional["Expr"] = None


@dataclass(frozen=True)
class StructLit:
    """A struct literal; ``id`` is None for an anonymous struct."""

    id: Optional[str] = None
    args: list = field(default_factory=list)


@dataclass(frozen=True)
class Var:
    id: str
    span: Span


@dataclass(frozen=True)
class Add:
    ops: list


@dataclass(frozen=True)
class Sub:
    ops: list


@dataclass(frozen=True)
class Mul:
    ops: list


@dataclass(frozen=True)
class Div:
    ops: list


@dataclass(frozen=True)
class Group:
    expr: "Expr"


@dataclass(frozen=True)
class Neg:
    expr: "Expr"


Expr = Union[BoolLit, IntLit, StructLit, Var, Add, Div, Group, Mul, Neg, Sub]


class IfOperator(enum.Enum):
    EQ = "=="
    NEQ = "!="
    GE = ">="
    GT = ">"
    LE = "<="
    LT = "<"


# An if-operand is a boolean literal (bool) or a variable name (str).
IfOperand = Union[bool, str]


@dataclass(frozen=True)
class IfCompare:
    left: IfOperand
    op: IfOperator
    right: IfOperand


IfExpr = Union[IfCompare, bool, str]


@dataclass(frozen=True)
class Block:
    """A sequence of statements."""

    stmts: list = field(default_factory=list)

    def __iter__(self) -> Iterator["Stmt"]:
        return iter(self.stmts)

    def __len__(self) -> int:
        return len(self.stmts)


@dataclass(frozen=True)
class If:
    """An if statement with optional elif branches and else block."""

    if_block: Tuple[IfExpr, Block]
    elif_blocks: list = field(default_factory=list)
    else_block: Optional[Block] = None


@dataclass(frozen=True)
class VarDecl:
    id: str
    typ: Optional[str]
    expr: Expr


Stmt = Union[If, VarDecl]


@dataclass(frozen=True)
class Param:
    id: str
    typ: str


Prop = Param


@dataclass(frozen=True)
class StructDecl:
    id: str
    props: list = field(default_factory=list)


@dataclass(frozen=True)
class FnDecl:
    """A function declaration, optionally inside a namespace ``ns``."""

    ns: Optional[str]
    id: str
    params: list
    ret_type: str
    block: Block = field(default_factory=Block)