import dataclasses

import pytest

from unitcalc.tokens import (
    IdentToken,
    Num,
    StringLiteral,
    Symbol,
    SymbolToken,
    Whitespace,
)


@pytest.mark.parametrize("symbol", list(Symbol))
def test_symbol_round_trips_through_its_text(symbol):
    assert Symbol(str(symbol)) is symbol


def test_symbol_texts_are_distinct():
    texts = [str(symbol) for symbol in Symbol]
    parsed = [Symbol(text) for text in texts]
    assert parsed == list(Symbol)
    assert len(set(parsed)) == len(texts)


def test_tokens_compare_by_value():
    assert SymbolToken(Symbol.ADD) == SymbolToken(Symbol.ADD)
    assert SymbolToken(Symbol.ADD) != SymbolToken(Symbol.SUB)
    assert IdentToken("kg") == IdentToken("kg")
    assert Num(2) == Num(2)
    assert Whitespace() == Whitespace()


def test_tokens_are_hashable():
    members = {Num(1), Num(1), IdentToken("m"), StringLiteral("hi"), Whitespace()}
    assert len(members) == 4


def test_tokens_are_immutable():
    ident = IdentToken("kg")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ident.name = "g"
    assert ident.name == "kg"