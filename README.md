# unitcalc

Building blocks for a calculator that understands physical units. The package
has the unit tables and unit name resolution, a parser from tokens to an
expression tree, and the non-numeric value types and variable scopes that an
evaluator works with.

## Modules

- `unitcalc.unit_tables`: the built-in unit tables as `UnitEntry` rows
  (`singular`, `plural`, `definition`, `description`). It covers SI base and
  derived units, temperature scales, bits and bytes, long and binary prefixes,
  number words, constants, angles, time, ratios, imperial, liquid, weight and
  nautical units, and currencies with fixed exchange rates.
  `all_unit_groups()` returns the groups in lookup order.
  `short_prefixes()` returns the `(name, definition)` pairs for `k`, `M`,
  `Ki` and the rest.
- `unitcalc.builtin_units`: `all_unit_entries()` returns every entry in one
  flat tuple. `query_unit(ident, short_prefixes, case_sensitive)` returns
  `(singular, plural, definition)` or `None`. When there is no exact match, a
  case-insensitive (ASCII) match counts only if exactly one unit matches.
- `unitcalc.units`:
  - `parse_definition(singular, plural, definition)` reads the prefix-rule
    markers `l@`, `lp@`, `s@` and `sp@`, the alias marker `=` and the
    base-unit marker `!`, and returns a `UnitDefinition` with a `PrefixRule`.
  - `lookup_unit(ident, short_prefixes, case_sensitive, fc_mode)` finds one
    unit or prefix, or raises `UnitNotFoundError`. `FCMode` chooses whether
    `C` and `F` mean °C and °F or coulomb and farad.
  - `resolve_unit(ident, fc_mode)` tries a case-sensitive match first and a
    case-insensitive one second. It splits names such as `km` or `kilometer`
    into a prefix and a unit, and accepts the split only when their prefix
    rules fit together. It returns a `ResolvedUnit`. A quoted name such as
    `'tests'` becomes a new base unit.
  - `get_completions_for_prefix(prefix)` returns sorted `Completion` items
    for unit singular names that extend `prefix`.
- `unitcalc.tokens`: the parser's input tokens. These are `Num`,
  `IdentToken`, `StringLiteral`, `SymbolToken` (holding a `Symbol`) and
  `Whitespace`.
- `unitcalc.expr`: the expression tree. It has `Literal`, `Ident`, `Of`,
  `Parens`, `Fn`, `Factorial`, the unary nodes, `BinaryOp` with `Bop`, the
  three apply forms, `As`, `Assign` and `Statements`. It also has
  `is_prefix_unit(name)`, which is true for currency symbols written before
  the number, such as `$` and `£`.
- `unitcalc.parser`: `parse_tokens(tokens)` parses a whole token sequence.
  `parse_expression(tokens)` returns the tree together with the tokens it did
  not parse. The grammar covers:
  - implicit multiplication (`2 pi`) and mixed fractions (`1 2/3`)
  - implicit sums (`5 feet 2 inches`)
  - powers, factorials and unary `+`, `-` and `/`
  - `of`
  - lambdas (`x: x`, `\x.x`)
  - `to` conversions, `=` assignments and `;`-separated statements

  A closing parenthesis may be left out at the end of the input. Bad input
  raises `ParseError`.
- `unitcalc.values`:
  - `BuiltInFunction`, with `invert()` (`sin` ↔ `asin` and so on) and
    `wrap_with_expr(lazy_fn, scope)`
  - `Keyword` (`dp`, `sf`) and `ApplyMulHandling`
  - `ObjectValue`, with `get_member(key)` and an indented `format`
  - `UnitValue`, `BoolValue` and `FuncValue`
  - `not_value(value)` and the `NOT` function
  - `ValueTypeError` for type mismatches
- `unitcalc.scope`: `Scope` is a chain of lazily evaluated bindings.
  `with_variable(name, expr, scope)` adds a binding in front of the chain.
  `get(ident, evaluate)` evaluates the nearest binding with the callable you
  pass in, or raises `IdentifierNotFoundError`.

## What it does not do

- There is no lexer. `parse_tokens` takes tokens that you build yourself.
- There is no evaluator and no number type. Unit definitions stay as text,
  and `Num` tokens carry whatever value you give them. Nothing here does
  arithmetic, converts between units or formats numbers.
- There is no command-line program or interactive prompt.

## Install

```
pip install .
```

## Example

```python
from unitcalc.builtin_units import query_unit
from unitcalc.parser import parse_tokens
from unitcalc.tokens import IdentToken, Num, Whitespace
from unitcalc.units import resolve_unit

print(query_unit("feet", False, True))    # ('foot', 'feet', 'l@12 inch')

km = resolve_unit("km")
print(km.prefix.singular, km.unit.singular, km.singular_name)   # k m km

print(parse_tokens([Num(2), Whitespace(), IdentToken("pi")]))
# ApplyMul(lhs=Literal(value=Num(value=2)), rhs=Ident(name='pi'))
```

## Tests

```
pip install .[test]
pytest
```