"""Tokens consumed by the expression parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Symbol(Enum):
    """Operator and punctuation symbols."""

    OPEN_PARENS = "("
    CLOSE_PARENS = ")"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "mod"
    POW = "^"
    UNIT_CONVERSION = "to"
    EQUALS = "="
    FN = ":"
    BACKSLASH = "\\"
    DOT = "."
    OF = "of"
    SEMICOLON = ";"
    FACTORIAL = "!"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Num:
    """A numeric literal; ``value`` is the number it denotes."""

    value: object


@dataclass(frozen=True)
class IdentToken:
    """An identifier such as ``kg`` or ``sin``."""

    name: str


@dataclass(frozen=True)
class StringLiteral:
    """A string literal with escapes already resolved."""

    value: str


@dataclass(frozen=True)
class SymbolToken:
    """An operator or punctuation symbol."""

    symbol: Symbol


@dataclass(frozen=True)
class Whitespace:
    """A run of whitespace; significant for a few constructs."""


Token = Num | IdentToken | StringLiteral | SymbolToken | Whitespace