"""Lookup of built-in unit definitions by name."""

from __future__ import annotations

from itertools import chain

from .unit_tables import UnitEntry, all_unit_groups, short_prefixes

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def all_unit_entries() -> tuple[UnitEntry, ...]:
    """Return every built-in unit entry, flattened, in lookup order."""
    return tuple(chain.from_iterable(all_unit_groups()))


def query_unit(
    ident: str, short_prefixes: bool, case_sensitive: bool
) -> tuple[str, str, str] | None:
    """Find a built-in unit by singular or plural name.

    Returns ``(singular, plural, definition)`` with the plural filled in,
    or ``None`` if no unit matches. When ``short_prefixes`` is set, the
    short prefixes (``k``, ``M``, ...) are searched first. A case-insensitive
    match (ASCII only) is returned only if it is unique.
    """
    if short_prefixes:
        for name, definition in _short_prefix_table():
            if name == ident:
                return name, name, definition

    lowered = _ascii_lower(ident)
    candidates: list[tuple[str, str, str]] = []
    for entry in all_unit_entries():
        singular = entry.singular
        plural = entry.plural or entry.singular
        if ident in (singular, plural):
            return singular, plural, entry.definition
        if not case_sensitive and lowered in (
            _ascii_lower(singular),
            _ascii_lower(plural),
        ):
            candidates.append((singular, plural, entry.definition))
    if len(candidates) == 1:
        return candidates[0]
    return None


def _short_prefix_table() -> tuple[tuple[str, str], ...]:
    return short_prefixes()