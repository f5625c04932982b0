import pytest

from unitcalc.expr import (
    UNIT_VALUE,
    BinaryOp,
    Bop,
    Fn,
    Ident,
    Literal,
    UnaryMinus,
    is_prefix_unit,
)
from unitcalc.tokens import Num


@pytest.mark.parametrize("name", ["$", "\u00a3"])
def test_currency_symbols_are_prefix_units(name):
    assert is_prefix_unit(name) is True


@pytest.mark.parametrize("name", ["kg", "dollar", "m", ""])
def test_ordinary_units_are_not_prefix_units(name):
    assert is_prefix_unit(name) is False


def test_literal_number_detection():
    assert Literal(Num(5)).is_number is True
    assert Literal("hi").is_number is False
    assert Literal(UNIT_VALUE).is_number is False


def test_structural_equality_of_nested_trees():
    a = BinaryOp(Bop.MUL, Literal(Num(2)), UnaryMinus(Ident("x")))
    b = BinaryOp(Bop.MUL, Literal(Num(2)), UnaryMinus(Ident("x")))
    c = BinaryOp(Bop.DIV, Literal(Num(2)), UnaryMinus(Ident("x")))
    assert a == b
    assert a != c


def test_trees_are_hashable():
    tree = Fn("x", BinaryOp(Bop.PLUS, Ident("x"), Literal(Num(1))))
    same = Fn("x", BinaryOp(Bop.PLUS, Ident("x"), Literal(Num(1))))
    assert len({tree, same}) == 1