"""Recursive-descent parser turning tokens into an expression tree."""

from __future__ import annotations

from collections.abc import Sequence

from .expr import (
    UNIT_VALUE,
    Apply,
    ApplyFunctionCall,
    ApplyMul,
    As,
    Assign,
    BinaryOp,
    Bop,
    Expr,
    Factorial,
    Fn,
    Ident,
    Literal,
    Of,
    Parens,
    Statements,
    UnaryDiv,
    UnaryMinus,
    UnaryPlus,
    is_prefix_unit,
)
from .tokens import (
    IdentToken,
    Num,
    StringLiteral,
    Symbol,
    SymbolToken,
    Token,
    Whitespace,
)


class ParseError(ValueError):
    """Raised when the tokens do not form a valid expression."""


_INVALID_APPLY = "error"
_INVALID_MIXED_FRACTION = "invalid mixed fraction"
_EXPECTED_IDENTIFIER = "expected an identifier"


def _is_num(expr: Expr) -> bool:
    return isinstance(expr, Literal) and expr.is_number


class _Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tuple(tokens)
        self.end = len(self.tokens)

    def token(self, pos: int) -> tuple[Token, int]:
        while pos < self.end and isinstance(self.tokens[pos], Whitespace):
            pos += 1
        if pos >= self.end:
            raise ParseError("expected a token")
        return self.tokens[pos], pos + 1

    def symbol(self, pos: int, symbol: Symbol) -> int:
        token, nxt = self.token(pos)
        if not isinstance(token, SymbolToken):
            raise ParseError(f"found an invalid token while expecting '{symbol}'")
        if token.symbol is not symbol:
            raise ParseError(f"found '{token.symbol}' while expecting '{symbol}'")
        return nxt

    def try_symbol(self, pos: int, symbol: Symbol) -> int | None:
        try:
            return self.symbol(pos, symbol)
        except ParseError:
            return None

    def number(self, pos: int) -> tuple[Expr, int]:
        token, nxt = self.token(pos)
        if not isinstance(token, Num):
            raise ParseError("expected a number")
        return Literal(token), nxt

    def ident(self, pos: int) -> tuple[Expr, int]:
        token, nxt = self.token(pos)
        if not isinstance(token, IdentToken):
            raise ParseError(_EXPECTED_IDENTIFIER)
        after_of = self.try_symbol(nxt, Symbol.OF)
        if after_of is not None:
            inner, after = self.parens_or_literal(after_of)
            return Of(token.name, inner), after
        return Ident(token.name), nxt

    def parens(self, pos: int) -> tuple[Expr, int]:
        pos = self.symbol(pos, Symbol.OPEN_PARENS)
        closed = self.try_symbol(pos, Symbol.CLOSE_PARENS)
        if closed is not None:
            return Literal(UNIT_VALUE), closed
        inner, pos = self.expression(pos)
        # a closing parenthesis may be omitted at the end of input
        if pos < self.end:
            pos = self.symbol(pos, Symbol.CLOSE_PARENS)
        return Parens(inner), pos

    def backslash_lambda(self, pos: int) -> tuple[Expr, int]:
        pos = self.symbol(pos, Symbol.BACKSLASH)
        param, pos = self.ident(pos)
        if not isinstance(param, Ident):
            raise ParseError(_EXPECTED_IDENTIFIER)
        try:
            pos = self.symbol(pos, Symbol.DOT)
        except ParseError as exc:
            raise ParseError("missing '.' in lambda (expected e.g. \\x.x)") from exc
        body, pos = self.function(pos)
        return Fn(param.name, body), pos

    def parens_or_literal(self, pos: int) -> tuple[Expr, int]:
        token, nxt = self.token(pos)
        match token:
            case Num():
                return self.number(pos)
            case IdentToken():
                return self.ident(pos)
            case StringLiteral(value=value):
                return Literal(value), nxt
            case SymbolToken(symbol=Symbol.OPEN_PARENS):
                return self.parens(pos)
            case SymbolToken(symbol=Symbol.BACKSLASH):
                return self.backslash_lambda(pos)
            case SymbolToken(symbol=symbol):
                raise ParseError(f"expected a value, instead found '{symbol}'")
            case _:
                raise ParseError("unexpected whitespace")

    def factorial(self, pos: int) -> tuple[Expr, int]:
        result, pos = self.parens_or_literal(pos)
        while (nxt := self.try_symbol(pos, Symbol.FACTORIAL)) is not None:
            result = Factorial(result)
            pos = nxt
        return result, pos

    def power(self, pos: int, allow_unary: bool) -> tuple[Expr, int]:
        if allow_unary:
            # /a^b == (1/a)^b, so the precedence of unary division is moot
            for symbol, node in (
                (Symbol.SUB, UnaryMinus),
                (Symbol.ADD, UnaryPlus),
                (Symbol.DIV, UnaryDiv),
            ):
                nxt = self.try_symbol(pos, symbol)
                if nxt is not None:
                    operand, nxt = self.power(nxt, True)
                    return node(operand), nxt
        result, pos = self.factorial(pos)
        nxt = self.try_symbol(pos, Symbol.POW)
        if nxt is not None:
            rhs, pos = self.power(nxt, True)
            result = BinaryOp(Bop.POW, result, rhs)
        return result, pos

    def apply_cont(self, pos: int, lhs: Expr) -> tuple[Expr, int]:
        rhs, pos = self.power(pos, False)
        numeric_lhs = _is_num(lhs) or isinstance(lhs, (UnaryMinus, ApplyMul))
        if numeric_lhs and _is_num(rhs):
            # may later be a mixed fraction (1 2/3) or an implicit sum
            raise ParseError(_INVALID_APPLY)
        if numeric_lhs and isinstance(rhs, BinaryOp) and rhs.op is Bop.POW:
            if _is_num(rhs.lhs):
                raise ParseError(_INVALID_APPLY)
            return Apply(lhs, rhs), pos
        if isinstance(lhs, Ident) and is_prefix_unit(lhs.name) and _is_num(rhs):
            return Apply(lhs, rhs), pos
        if _is_num(rhs):
            return ApplyFunctionCall(lhs, rhs), pos
        if _is_num(lhs) or isinstance(lhs, ApplyMul):
            return ApplyMul(lhs, rhs), pos
        return Apply(lhs, rhs), pos

    @staticmethod
    def _mixed_fraction_parts(lhs: Expr) -> tuple[bool, Expr, Expr | None]:
        if _is_num(lhs):
            return True, lhs, None
        if isinstance(lhs, UnaryMinus):
            if _is_num(lhs.operand):
                return False, lhs, None
            raise ParseError(_INVALID_MIXED_FRACTION)
        if isinstance(lhs, BinaryOp) and lhs.op is Bop.MUL:
            whole = lhs.rhs
            if _is_num(whole):
                return True, whole, lhs.lhs
            if isinstance(whole, UnaryMinus) and _is_num(whole.operand):
                return False, whole, lhs.lhs
        raise ParseError(_INVALID_MIXED_FRACTION)

    def mixed_fraction(self, pos: int, lhs: Expr) -> tuple[Expr, int]:
        positive, whole, other_factor = self._mixed_fraction_parts(lhs)
        top, pos = self.power(pos, False)
        if not _is_num(top):
            raise ParseError(_INVALID_MIXED_FRACTION)
        pos = self.symbol(pos, Symbol.DIV)
        bottom, pos = self.power(pos, False)
        if not _is_num(bottom):
            raise ParseError(_INVALID_MIXED_FRACTION)
        fraction = BinaryOp(Bop.DIV, top, bottom)
        op = Bop.PLUS if positive else Bop.MINUS
        result: Expr = BinaryOp(op, whole, fraction)
        if other_factor is not None:
            result = BinaryOp(Bop.MUL, other_factor, result)
        return result, pos

    def _multiplicative_step(self, pos: int, res: Expr) -> tuple[Expr, int] | None:
        for symbol, op in (
            (Symbol.MUL, Bop.MUL),
            (Symbol.DIV, Bop.DIV),
            (Symbol.MOD, Bop.MOD),
        ):
            nxt = self.try_symbol(pos, symbol)
            if nxt is None:
                continue
            try:
                term, after = self.power(nxt, True)
            except ParseError:
                continue
            return BinaryOp(op, res, term), after
        for step in (self.mixed_fraction, self.apply_cont):
            try:
                return step(pos, res)
            except ParseError:
                pass
        return None

    def multiplicative(self, pos: int) -> tuple[Expr, int]:
        res, pos = self.power(pos, True)
        while (step := self._multiplicative_step(pos, res)) is not None:
            res, pos = step
        return res, pos

    def implicit_addition(self, pos: int) -> tuple[Expr, int]:
        res, pos = self.multiplicative(pos)
        try:
            rhs, remaining = self.implicit_addition(pos)
        except ParseError:
            return res, pos
        # n i n i, n i i n i i, etc. (n: number literal, i: identifier)
        rhs_fits = isinstance(rhs, (ApplyMul, Literal)) or (
            isinstance(rhs, BinaryOp) and rhs.op is Bop.IMPLICIT_PLUS
        )
        if isinstance(res, ApplyMul) and rhs_fits:
            return BinaryOp(Bop.IMPLICIT_PLUS, res, rhs), remaining
        return res, pos

    def additive(self, pos: int) -> tuple[Expr, int]:
        res, pos = self.implicit_addition(pos)
        while True:
            for symbol in (Symbol.ADD, Symbol.SUB, Symbol.UNIT_CONVERSION):
                nxt = self.try_symbol(pos, symbol)
                if nxt is None:
                    continue
                try:
                    term, after = self.implicit_addition(nxt)
                except ParseError:
                    continue
                if symbol is Symbol.ADD:
                    res = BinaryOp(Bop.PLUS, res, term)
                elif symbol is Symbol.SUB:
                    res = BinaryOp(Bop.MINUS, res, term)
                else:
                    res = As(res, term)
                pos = after
                break
            else:
                return res, pos

    def function(self, pos: int) -> tuple[Expr, int]:
        lhs, pos = self.additive(pos)
        nxt = self.try_symbol(pos, Symbol.FN)
        if nxt is None:
            return lhs, pos
        if not isinstance(lhs, Ident):
            raise ParseError(_EXPECTED_IDENTIFIER)
        body, nxt = self.function(nxt)
        return Fn(lhs.name, body), nxt

    def assignment(self, pos: int) -> tuple[Expr, int]:
        lhs, pos = self.function(pos)
        nxt = self.try_symbol(pos, Symbol.EQUALS)
        if nxt is None:
            return lhs, pos
        if not isinstance(lhs, Ident):
            raise ParseError(_EXPECTED_IDENTIFIER)
        value, nxt = self.assignment(nxt)
        return Assign(lhs.name, value), nxt

    def expression(self, pos: int) -> tuple[Expr, int]:
        semicolon = SymbolToken(Symbol.SEMICOLON)
        while (nxt := self.try_symbol(pos, Symbol.SEMICOLON)) is not None:
            pos = nxt
        if pos == self.end:
            return Literal(UNIT_VALUE), self.end
        result, pos = self.assignment(pos)
        while (nxt := self.try_symbol(pos, Symbol.SEMICOLON)) is not None:
            if nxt == self.end or self.tokens[nxt] == semicolon:
                pos = nxt
                continue
            rhs, pos = self.assignment(nxt)
            result = Statements(result, rhs)
        return result, pos


def parse_expression(tokens: Sequence[Token]) -> tuple[Expr, tuple[Token, ...]]:
    """Parse as much as possible; return the tree and the unparsed tokens."""
    parser = _Parser(tokens)
    expr, pos = parser.expression(0)
    return expr, parser.tokens[pos:]


def parse_tokens(tokens: Sequence[Token]) -> Expr:
    """Parse all of ``tokens`` into one expression."""
    expr, remaining = parse_expression(tokens)
    if remaining:
        raise ParseError("unexpected input found")
    return expr