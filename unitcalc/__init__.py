"""Unit tables and unit name resolution, a token-to-expression parser, and value and scope types for a unit-aware calculator."""

__version__ = "0.1.0"

__all__ = [
    "builtin_units",
    "expr",
    "parser",
    "scope",
    "tokens",
    "unit_tables",
    "units",
    "values",
]