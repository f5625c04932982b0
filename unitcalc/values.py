"""Runtime values other than numbers: built-in functions, keywords, objects,
booleans, the unit value ``()`` and named native functions."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, NamedTuple

from .expr import ApplyFunctionCall, Expr, Ident


class ValueTypeError(TypeError):
    """Raised when a value has the wrong type for an operation."""


class _UserFunction(NamedTuple):
    """A function with one named parameter, a body and a captured scope."""

    param: str
    body: Expr
    scope: Any


class BuiltInFunction(Enum):
    """Functions built into the calculator."""

    APPROXIMATELY = "approximately"
    ABS = "abs"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    LN = "ln"
    LOG2 = "log2"
    LOG10 = "log10"
    BASE = "base"
    SAMPLE = "sample"

    def __str__(self) -> str:
        return self.value

    def invert(self) -> BuiltInFunction:
        """Return the inverse function, e.g. ``asin`` for ``sin``."""
        try:
            return _INVERSES[self]
        except KeyError:
            raise ValueTypeError(f"unable to invert function {self}") from None

    def wrap_with_expr(
        self, lazy_fn: Callable[[Expr], Expr], scope: Any
    ) -> _UserFunction:
        """Build ``\\x. lazy_fn(self x)``, deferring an operation on this function."""
        call = ApplyFunctionCall(Ident(self.value), Ident("x"))
        return _UserFunction("x", lazy_fn(call), scope)


_INVERSE_PAIRS = (
    (BuiltInFunction.SIN, BuiltInFunction.ASIN),
    (BuiltInFunction.COS, BuiltInFunction.ACOS),
    (BuiltInFunction.TAN, BuiltInFunction.ATAN),
    (BuiltInFunction.SINH, BuiltInFunction.ASINH),
    (BuiltInFunction.COSH, BuiltInFunction.ACOSH),
    (BuiltInFunction.TANH, BuiltInFunction.ATANH),
)
_INVERSES = {a: b for a, b in _INVERSE_PAIRS} | {b: a for a, b in _INVERSE_PAIRS}


class ApplyMulHandling(Enum):
    """Whether applying a number to a value may mean multiplication."""

    ONLY_APPLY = auto()
    BOTH = auto()


class Keyword(Enum):
    """Bare formatting keywords."""

    DP = "dp"
    SF = "sf"

    def __str__(self) -> str:
        return self.value


class _Dynamic:
    """Behaviour shared by the dynamically typed values."""

    type_name = "value"

    def format(self, indent: int = 0) -> str:
        raise NotImplementedError

    def as_bool(self) -> bool:
        raise ValueTypeError(f"expected a bool (found {self.type_name})")

    def get_object_member(self, key: str) -> Any:
        raise KeyError(key)

    def apply(self, arg: Any) -> Any:
        raise ValueTypeError(f"{self.format()} is not a function")

    @property
    def is_unit(self) -> bool:
        return False


@dataclass(frozen=True)
class ObjectValue:
    """An ordered collection of named values."""

    entries: tuple[tuple[str, Any], ...] = field(default_factory=tuple)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, Any]]) -> ObjectValue:
        return cls(tuple(pairs))

    def get_member(self, key: str) -> Any:
        """Return the first value stored under ``key``."""
        for name, value in self.entries:
            if name == key:
                return value
        raise KeyError(f"could not find key {key!r} in object")

    def format(self, format_value: Callable[[Any, int], str], indent: int = 0) -> str:
        """Format one entry per line, indenting nested values by four spaces."""
        inner = indent + 4
        parts = ["{"]
        for i, (name, value) in enumerate(self.entries):
            if i:
                parts.append(",")
            parts.append("\n" + " " * inner + f"{name}: ")
            parts.append(format_value(value, inner))
        parts.append("\n}")
        return "".join(parts)


@dataclass(frozen=True)
class UnitValue(_Dynamic):
    """The empty value ``()``."""

    type_name = "()"

    def format(self, indent: int = 0) -> str:
        return "()"

    @property
    def is_unit(self) -> bool:
        return True


@dataclass(frozen=True)
class BoolValue(_Dynamic):
    """A boolean."""

    value: bool
    type_name = "bool"

    def format(self, indent: int = 0) -> str:
        return "true" if self.value else "false"

    def as_bool(self) -> bool:
        return self.value


@dataclass(frozen=True)
class FuncValue(_Dynamic):
    """A named function implemented natively."""

    name: str
    func: Callable[[Any], Any] = field(compare=False)
    type_name = "function"

    def format(self, indent: int = 0) -> str:
        return self.name

    def apply(self, arg: Any) -> Any:
        return self.func(arg)

    def __repr__(self) -> str:
        return self.name


def not_value(value: Any) -> BoolValue:
    """Logical negation of a boolean value."""
    if not isinstance(value, _Dynamic):
        raise ValueTypeError("invalid type")
    return BoolValue(not value.as_bool())


NOT = FuncValue("not", not_value)