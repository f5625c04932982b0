"""Resolution of unit names, including prefixed units and custom units."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .builtin_units import all_unit_entries, query_unit


class PrefixRule(Enum):
    """How a unit combines with prefixes."""

    NO_PREFIXES_ALLOWED = auto()
    LONG_PREFIX_ALLOWED = auto()
    LONG_PREFIX = auto()
    SHORT_PREFIX_ALLOWED = auto()
    SHORT_PREFIX = auto()


class FCMode(Enum):
    """Whether ``C`` and ``F`` mean Celsius/Fahrenheit or coulomb/farad."""

    CELSIUS_FAHRENHEIT = auto()
    COULOMB_FARAD = auto()


class UnitNotFoundError(LookupError):
    """Raised when an identifier does not name a unit."""

    def __init__(self, ident: str) -> None:
        super().__init__(f"unknown identifier '{ident}'")
        self.ident = ident


@dataclass(frozen=True)
class UnitDefinition:
    """A parsed unit definition.

    ``expression`` is the text that gives the unit's value; it is empty for
    a base unit. An alias's value is used as-is, while other non-prefix
    definitions become a new named unit with that value.
    """

    singular: str
    plural: str
    prefix_rule: PrefixRule
    expression: str
    is_alias: bool = False
    is_base_unit: bool = False

    @property
    def creates_unit(self) -> bool:
        """Whether the value is wrapped as a unit named after this definition."""
        return (
            not self.is_base_unit
            and not self.is_alias
            and self.prefix_rule is not PrefixRule.LONG_PREFIX
        )


@dataclass(frozen=True)
class ResolvedUnit:
    """A unit found by name, optionally with a prefix in front of it."""

    unit: UnitDefinition
    prefix: UnitDefinition | None = None

    @property
    def singular_name(self) -> str:
        prefix = self.prefix.singular if self.prefix else ""
        return prefix + self.unit.singular

    @property
    def plural_name(self) -> str:
        prefix = self.prefix.singular if self.prefix else ""
        return prefix + self.unit.plural


@dataclass(frozen=True, order=True)
class Completion:
    """An autocompletion: the full name and the text still to be typed."""

    display: str
    insert: str


_RULE_MARKERS = (
    ("l@", PrefixRule.LONG_PREFIX_ALLOWED),
    ("lp@", PrefixRule.LONG_PREFIX),
    ("s@", PrefixRule.SHORT_PREFIX_ALLOWED),
    ("sp@", PrefixRule.SHORT_PREFIX),
)


def parse_definition(singular: str, plural: str, definition: str) -> UnitDefinition:
    """Parse a definition string from the unit tables."""
    text = definition.strip()
    rule = PrefixRule.NO_PREFIXES_ALLOWED
    for marker, marker_rule in _RULE_MARKERS:
        if text.startswith(marker):
            text = text[len(marker):]
            rule = marker_rule
    if text == "!":
        return UnitDefinition(singular, plural, rule, "", is_base_unit=True)
    is_alias = text.startswith("=")
    if is_alias:
        text = text[1:]
    return UnitDefinition(singular, plural, rule, text, is_alias=is_alias)


def lookup_unit(
    ident: str,
    short_prefixes: bool,
    case_sensitive: bool,
    fc_mode: FCMode = FCMode.CELSIUS_FAHRENHEIT,
) -> UnitDefinition:
    """Look up a single unit or prefix by exact name."""
    if ident == "C":
        if fc_mode is FCMode.CELSIUS_FAHRENHEIT:
            return parse_definition("C", "C", "=\u00b0C")
        return parse_definition("C", "C", "s@coulomb")
    if ident == "F":
        if fc_mode is FCMode.CELSIUS_FAHRENHEIT:
            return parse_definition("F", "F", "=\u00b0F")
        return parse_definition("F", "F", "s@farad")
    found = query_unit(ident, short_prefixes, case_sensitive)
    if found is None:
        raise UnitNotFoundError(ident)
    return parse_definition(*found)


def resolve_unit(
    ident: str, fc_mode: FCMode = FCMode.CELSIUS_FAHRENHEIT
) -> ResolvedUnit:
    """Resolve a unit name, trying case-sensitive matches first.

    A name in single quotes, such as ``'tests'``, defines a new base unit.
    """
    if len(ident) >= 3 and ident.startswith("'") and ident.endswith("'"):
        name = ident[1:-1]
        return ResolvedUnit(
            UnitDefinition(
                name, name, PrefixRule.NO_PREFIXES_ALLOWED, "", is_base_unit=True
            )
        )
    try:
        return _resolve(ident, True, fc_mode)
    except UnitNotFoundError:
        pass
    return _resolve(ident, False, fc_mode)


_COMPATIBLE_RULES = {
    (PrefixRule.LONG_PREFIX, PrefixRule.LONG_PREFIX_ALLOWED),
    (PrefixRule.SHORT_PREFIX, PrefixRule.SHORT_PREFIX_ALLOWED),
}


def _resolve(ident: str, case_sensitive: bool, fc_mode: FCMode) -> ResolvedUnit:
    try:
        # lone short prefixes are not returned here
        return ResolvedUnit(lookup_unit(ident, False, case_sensitive, fc_mode))
    except UnitNotFoundError:
        pass
    for split in range(1, len(ident)):
        prefix_name, rest = ident[:split], ident[split:]
        try:
            prefix = lookup_unit(prefix_name, True, case_sensitive, fc_mode)
            unit = lookup_unit(rest, False, case_sensitive, fc_mode)
        except UnitNotFoundError:
            continue
        if (prefix.prefix_rule, unit.prefix_rule) in _COMPATIBLE_RULES:
            return ResolvedUnit(unit, prefix)
        raise UnitNotFoundError(ident)
    raise UnitNotFoundError(ident)


def get_completions_for_prefix(prefix: str) -> list[Completion]:
    """Return completions for unit singular names that extend ``prefix``."""
    completions = [
        Completion(entry.singular, entry.singular[len(prefix):])
        for entry in all_unit_entries()
        if entry.singular.startswith(prefix) and entry.singular != prefix
    ]
    completions.sort(key=lambda completion: completion.display)
    return completions