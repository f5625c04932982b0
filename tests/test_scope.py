import pytest

from unitcalc.expr import Ident, Literal
from unitcalc.scope import IdentifierNotFoundError, Scope


def _record(calls):
    def evaluate(expr, scope):
        calls.append((expr, scope))
        return expr

    return evaluate


def test_lookup_own_binding():
    scope = Scope("x", Literal("one"))
    assert scope.get("x", lambda expr, s: expr) == Literal("one")


def test_lookup_falls_through_to_inner():
    outer = Scope("x", Literal("outer"))
    inner = outer.with_variable("y", Literal("inner"), None)
    assert inner.get("x", lambda expr, s: expr) == Literal("outer")
    assert inner.get("y", lambda expr, s: expr) == Literal("inner")


def test_shadowing_prefers_newest():
    base = Scope("x", Literal("old"))
    shadowed = base.with_variable("x", Literal("new"), None)
    assert shadowed.get("x", lambda expr, s: expr) == Literal("new")
    assert base.get("x", lambda expr, s: expr) == Literal("old")


def test_evaluated_in_captured_scope():
    captured = Scope("z", Literal("captured"))
    scope = Scope("x", Ident("z"), captured)
    calls = []
    scope.get("x", _record(calls))
    assert calls == [(Ident("z"), captured)]


def test_lazy_evaluation_each_lookup():
    scope = Scope("x", Literal("v"))
    calls = []
    evaluate = _record(calls)
    first = scope.get("x", evaluate)
    second = scope.get("x", evaluate)
    assert first == Literal("v")
    assert second == Literal("v")
    assert calls == [(Literal("v"), None), (Literal("v"), None)]


def test_missing_identifier():
    scope = Scope("x", Literal("v")).with_variable("y", Literal("w"), None)
    with pytest.raises(IdentifierNotFoundError) as info:
        scope.get("a'", lambda expr, s: expr)
    assert str(info.value) == "unknown identifier 'a''"
    assert info.value.ident == "a'"


def test_with_variable_links_inner():
    base = Scope("x", Literal("v"))
    extended = base.with_variable("y", Literal("w"), base)
    assert extended.inner is base
    assert extended.scope is base
    assert extended.ident == "y"