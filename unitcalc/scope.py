"""Chains of lazily evaluated variable bindings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from .expr import Expr


class IdentifierNotFoundError(LookupError):
    """Raised when no binding in a scope chain has the requested name."""

    def __init__(self, ident: str) -> None:
        super().__init__(f"unknown identifier '{ident}'")
        self.ident = ident


@dataclass(frozen=True)
class Scope:
    """One binding of ``ident`` to an unevaluated expression.

    The expression is evaluated in ``scope`` each time it is looked up;
    ``inner`` is the enclosing chain of bindings.
    """

    ident: str
    expr: Expr
    scope: Optional[Scope] = None
    inner: Optional[Scope] = None

    def with_variable(self, name: str, expr: Expr, scope: Optional[Scope]) -> Scope:
        """Return a new scope binding ``name`` in front of this one."""
        return Scope(name, expr, scope, self)

    def get(
        self, ident: str, evaluate: Callable[[Expr, Optional[Scope]], Any]
    ) -> Any:
        """Evaluate the nearest binding of ``ident`` with ``evaluate``."""
        current: Optional[Scope] = self
        while current is not None:
            if current.ident == ident:
                return evaluate(current.expr, current.scope)
            current = current.inner
        raise IdentifierNotFoundError(ident)