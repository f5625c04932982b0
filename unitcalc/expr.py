"""Expression tree produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .tokens import Num

UNIT_VALUE = ()
"""The value of the empty expression ``()``."""

_PREFIX_UNITS = frozenset({"$", "\u00a3", "\u20ac", "US$", "AU$", "HK$", "NZ$"})


def is_prefix_unit(name: str) -> bool:
    """Whether the unit is written before its number, as in ``$5``."""
    return name in _PREFIX_UNITS


class Bop(Enum):
    """Binary operators."""

    PLUS = auto()
    IMPLICIT_PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    POW = auto()


@dataclass(frozen=True)
class Literal:
    """A literal value: a number token, a string or the unit value ``()``."""

    value: object

    @property
    def is_number(self) -> bool:
        return isinstance(self.value, Num)


@dataclass(frozen=True)
class Ident:
    name: str


@dataclass(frozen=True)
class Of:
    """Member access such as ``mass of earth``."""

    name: str
    expr: Expr


@dataclass(frozen=True)
class Parens:
    expr: Expr


@dataclass(frozen=True)
class Fn:
    """A lambda with one named parameter."""

    param: str
    body: Expr


@dataclass(frozen=True)
class Factorial:
    operand: Expr


@dataclass(frozen=True)
class UnaryMinus:
    operand: Expr


@dataclass(frozen=True)
class UnaryPlus:
    operand: Expr


@dataclass(frozen=True)
class UnaryDiv:
    operand: Expr


@dataclass(frozen=True)
class BinaryOp:
    op: Bop
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class Apply:
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class ApplyFunctionCall:
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class ApplyMul:
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class As:
    """Conversion, as in ``1 m to ft``."""

    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class Assign:
    name: str
    value: Expr


@dataclass(frozen=True)
class Statements:
    first: Expr
    second: Expr


Expr = (
    Literal
    | Ident
    | Of
    | Parens
    | Fn
    | Factorial
    | UnaryMinus
    | UnaryPlus
    | UnaryDiv
    | BinaryOp
    | Apply
    | ApplyFunctionCall
    | ApplyMul
    | As
    | Assign
    | Statements
)