import pytest

from unitcalc.expr import (
    UNIT_VALUE,
    Apply,
    ApplyFunctionCall,
    ApplyMul,
    As,
    Assign,
    BinaryOp,
    Bop,
    Factorial,
    Fn,
    Ident,
    Literal,
    Of,
    Parens,
    Statements,
    UnaryMinus,
)
from unitcalc.parser import ParseError, parse_expression, parse_tokens
from unitcalc.tokens import IdentToken, Num, StringLiteral, Symbol, SymbolToken, Whitespace

WS = Whitespace()


def n(value):
    return Num(value)


def i(name):
    return IdentToken(name)


def s(symbol):
    return SymbolToken(symbol)


def lit(value):
    return Literal(Num(value))


def test_empty_input_is_unit_value():
    assert parse_tokens([]) == Literal(UNIT_VALUE)


def test_only_semicolons_is_unit_value():
    assert parse_tokens([s(Symbol.SEMICOLON), s(Symbol.SEMICOLON)]) == Literal(UNIT_VALUE)


def test_addition():
    expr = parse_tokens([n(2), s(Symbol.ADD), n(2)])
    assert expr == BinaryOp(Bop.PLUS, lit(2), lit(2))


def test_multiplication_binds_tighter_than_addition():
    expr = parse_tokens([n(2), s(Symbol.ADD), n(2), s(Symbol.MUL), n(3)])
    assert expr == BinaryOp(Bop.PLUS, lit(2), BinaryOp(Bop.MUL, lit(2), lit(3)))


def test_power_is_right_associative():
    expr = parse_tokens([n(2), s(Symbol.POW), n(3), s(Symbol.POW), n(2)])
    assert expr == BinaryOp(Bop.POW, lit(2), BinaryOp(Bop.POW, lit(3), lit(2)))


def test_unary_minus():
    assert parse_tokens([s(Symbol.SUB), n(2)]) == UnaryMinus(lit(2))


def test_number_times_identifier():
    assert parse_tokens([n(2), WS, i("pi")]) == ApplyMul(lit(2), Ident("pi"))


def test_function_call_on_number():
    assert parse_tokens([i("sin"), WS, n(1)]) == ApplyFunctionCall(Ident("sin"), lit(1))


def test_prefix_currency_unit():
    assert parse_tokens([i("$"), n(5)]) == Apply(Ident("$"), lit(5))


def test_adjacent_numbers_are_rejected():
    with pytest.raises(ParseError, match="unexpected input found"):
        parse_tokens([n(1), WS, n(2)])


def test_adjacent_numbers_before_unit_are_rejected():
    with pytest.raises(ParseError):
        parse_tokens([n(1), WS, n(2), WS, i("m")])


def test_mixed_fraction():
    expr = parse_tokens([n(1), WS, n(2), s(Symbol.DIV), n(3)])
    assert expr == BinaryOp(Bop.PLUS, lit(1), BinaryOp(Bop.DIV, lit(2), lit(3)))


def test_negative_mixed_fraction():
    expr = parse_tokens([s(Symbol.SUB), n(8), WS, n(1), s(Symbol.DIV), n(2)])
    assert expr == BinaryOp(
        Bop.MINUS, UnaryMinus(lit(8)), BinaryOp(Bop.DIV, lit(1), lit(2))
    )


def test_mixed_fraction_after_product():
    tokens = [n(2), s(Symbol.MUL), n(1), WS, n(1), s(Symbol.DIV), n(2)]
    expected = BinaryOp(
        Bop.MUL,
        lit(2),
        BinaryOp(Bop.PLUS, lit(1), BinaryOp(Bop.DIV, lit(1), lit(2))),
    )
    assert parse_tokens(tokens) == expected


def test_implicit_addition_of_quantities():
    tokens = [n(1), WS, i("m"), WS, n(2), WS, i("cm")]
    expected = BinaryOp(
        Bop.IMPLICIT_PLUS,
        ApplyMul(lit(1), Ident("m")),
        ApplyMul(lit(2), Ident("cm")),
    )
    assert parse_tokens(tokens) == expected


def test_conversion():
    tokens = [n(1), WS, s(Symbol.UNIT_CONVERSION), WS, i("kg")]
    assert parse_tokens(tokens) == As(lit(1), Ident("kg"))


def test_factorial_chain():
    tokens = [n(5), s(Symbol.FACTORIAL), s(Symbol.FACTORIAL)]
    assert parse_tokens(tokens) == Factorial(Factorial(lit(5)))


def test_of_expression():
    tokens = [i("mass"), WS, s(Symbol.OF), WS, i("earth")]
    assert parse_tokens(tokens) == Of("mass", Ident("earth"))


def test_empty_parens_is_unit_value():
    tokens = [s(Symbol.OPEN_PARENS), s(Symbol.CLOSE_PARENS)]
    assert parse_tokens(tokens) == Literal(UNIT_VALUE)


def test_unclosed_parens_at_end_are_allowed():
    tokens = [s(Symbol.OPEN_PARENS), n(1), s(Symbol.ADD), n(2)]
    assert parse_tokens(tokens) == Parens(BinaryOp(Bop.PLUS, lit(1), lit(2)))


def test_colon_lambda():
    tokens = [i("x"), s(Symbol.FN), WS, i("x")]
    assert parse_tokens(tokens) == Fn("x", Ident("x"))


def test_backslash_lambda():
    tokens = [s(Symbol.BACKSLASH), i("x"), s(Symbol.DOT), i("x")]
    assert parse_tokens(tokens) == Fn("x", Ident("x"))


def test_backslash_lambda_missing_dot():
    with pytest.raises(ParseError, match="missing '.' in lambda"):
        parse_tokens([s(Symbol.BACKSLASH), i("x"), WS, i("x")])


def test_chained_assignment():
    tokens = [i("a"), s(Symbol.EQUALS), i("b"), s(Symbol.EQUALS), n(2)]
    assert parse_tokens(tokens) == Assign("a", Assign("b", lit(2)))


def test_assignment_to_number_fails():
    with pytest.raises(ParseError, match="expected an identifier"):
        parse_tokens([n(2), s(Symbol.EQUALS), n(3)])


def test_statements_and_trailing_semicolons():
    tokens = [n(2), s(Symbol.SEMICOLON), WS, n(4), s(Symbol.SEMICOLON), s(Symbol.SEMICOLON)]
    assert parse_tokens(tokens) == Statements(lit(2), lit(4))


def test_string_literal():
    assert parse_tokens([StringLiteral("hi")]) == Literal("hi")


def test_lone_operator_needs_a_token():
    with pytest.raises(ParseError, match="expected a token"):
        parse_tokens([s(Symbol.ADD)])


def test_unexpected_symbol_message():
    with pytest.raises(ParseError, match="expected a value, instead found"):
        parse_tokens([s(Symbol.CLOSE_PARENS)])


def test_parse_expression_returns_remaining_tokens():
    tokens = [n(1), s(Symbol.CLOSE_PARENS), n(2)]
    expr, remaining = parse_expression(tokens)
    assert expr == lit(1)
    assert remaining == tuple(tokens[1:])