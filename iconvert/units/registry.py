"""
Unit registry: the static table of categories and unit definitions.

Every category has a base unit and each unit carries an explicit scale
factor relative to it. The factors are written out as constants so results
do not depend on whichever definitions a pint release ships; pint is used
to check them for dimensional correctness at import time.

The tables are built once and exposed as read-only mappings. There is no
runtime registration.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

import pint

# Shared pint registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# International avoirdupois pound (1959 agreement), exact
POUND_IN_KG = 0.45359237


class UnitConversionError(ValueError):
    """Base class for rejected category/unit arguments."""

    code = "UnitConversionError"


class UnknownCategoryError(UnitConversionError):
    """Raised when a category name is not in the registry."""

    code = "UnknownCategory"

    def __init__(self, category: str, known: tuple[str, ...] = ()):
        self.category = category
        self.known = tuple(known)
        msg = f"Unknown category {category!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)


class UnknownUnitError(UnitConversionError):
    """Raised when a unit symbol is not defined in the given category."""

    code = "UnknownUnit"

    def __init__(self, category: Optional[str], unit: str, known: tuple[str, ...] = ()):
        self.category = category
        self.unit = unit
        self.known = tuple(known)
        msg = f"Unknown unit {unit!r}"
        if category:
            msg += f" for category {category!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)


@dataclass(frozen=True)
class UnitDefinition:
    """A unit with a fixed multiplicative relationship to its category base."""
    symbol: str       # Short key shown in pickers, e.g. "km"
    name: str         # Singular name, e.g. "kilometer"
    pint_unit: str    # Equivalent pint unit expression
    to_base: float    # Multiply by this to get the base unit

    @property
    def is_base(self) -> bool:
        return self.to_base == 1.0


@dataclass(frozen=True)
class DefaultPairing:
    """Units selected when a category is switched to."""
    input: str
    output: str


@dataclass(frozen=True)
class Category:
    """A dimension of measurement whose units are mutually convertible."""
    name: str
    base_unit: str
    dimensionality: str
    units: Mapping[str, UnitDefinition]

    def symbols(self) -> list[str]:
        """Unit symbols in declaration order."""
        return list(self.units)

    def get(self, symbol: str) -> UnitDefinition:
        """Look up a unit, raising UnknownUnitError if it is not defined here."""
        try:
            return self.units[symbol]
        except (KeyError, TypeError):
            raise UnknownUnitError(self.name, symbol, tuple(self.units)) from None

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.units


def _category(name: str, base_unit: str, dimensionality: str, *units: UnitDefinition) -> Category:
    return Category(
        name=name,
        base_unit=base_unit,
        dimensionality=dimensionality,
        units=MappingProxyType({u.symbol: u for u in units}),
    )


DISTANCE = _category(
    "Distance", "m", "[length]",
    UnitDefinition("cm", "centimeter", "centimeter", 0.01),
    UnitDefinition("m", "meter", "meter", 1.0),
    UnitDefinition("dm", "decimeter", "decimeter", 0.1),
    UnitDefinition("km", "kilometer", "kilometer", 1000.0),
)

MASS = _category(
    "Mass", "kg", "[mass]",
    UnitDefinition("g", "gram", "gram", 0.001),
    UnitDefinition("kg", "kilogram", "kilogram", 1.0),
    UnitDefinition("lb", "pound", "pound", POUND_IN_KG),
)

CATEGORIES: Mapping[str, Category] = MappingProxyType({
    DISTANCE.name: DISTANCE,
    MASS.name: MASS,
})

DEFAULT_UNITS: Mapping[str, DefaultPairing] = MappingProxyType({
    "Distance": DefaultPairing(input="km", output="m"),
    "Mass": DefaultPairing(input="kg", output="lb"),
})


def get_category(name: str) -> Category:
    """Return the category called ``name`` or raise UnknownCategoryError."""
    try:
        return CATEGORIES[name]
    except (KeyError, TypeError):
        raise UnknownCategoryError(name, tuple(CATEGORIES)) from None


def get_unit(category: str, symbol: str) -> UnitDefinition:
    """Return the definition of ``symbol`` within ``category``."""
    return get_category(category).get(symbol)


def list_categories() -> list[str]:
    """Category names in declaration order."""
    return list(CATEGORIES)


def list_units(category: str) -> list[str]:
    """Unit symbols of a category in declaration order."""
    return get_category(category).symbols()


def default_units(category: str) -> DefaultPairing:
    """Default (input, output) units for a category."""
    get_category(category)
    return DEFAULT_UNITS[category]


def find_categories(*symbols: str) -> list[str]:
    """Names of the categories that define every one of ``symbols``."""
    return [
        name for name, cat in CATEGORIES.items()
        if all(s in cat for s in symbols)
    ]


def infer_category(from_unit: str, to_unit: str) -> str:
    """
    Find the category both symbols belong to.

    Raises:
        UnknownUnitError: if no category defines ``from_unit``, or the
            category that does has no ``to_unit``
    """
    matches = find_categories(from_unit)
    if not matches:
        known = tuple(s for cat in CATEGORIES.values() for s in cat.units)
        raise UnknownUnitError(None, from_unit, known)
    category = get_category(matches[0])
    category.get(to_unit)
    return category.name


def validate_registry(
    categories: Mapping[str, Category] = CATEGORIES,
    defaults: Mapping[str, DefaultPairing] = DEFAULT_UNITS,
    rel_tol: float = 1e-12,
) -> None:
    """
    Check the static tables for internal consistency.

    Raises:
        RuntimeError: describing every violation found
    """
    problems: list[str] = []
    owners: dict[str, str] = {}

    for key, cat in categories.items():
        # Symbols are unique across categories so one can be inferred from units
        for symbol in cat.units:
            if symbol in owners:
                problems.append(f"{key}: symbol {symbol!r} already defined in {owners[symbol]}")
            owners.setdefault(symbol, key)

        if key != cat.name:
            problems.append(f"category key {key!r} does not match name {cat.name!r}")
        if key not in defaults:
            problems.append(f"{key}: no default pairing")

        base = cat.units.get(cat.base_unit)
        if base is None:
            problems.append(f"{key}: base unit {cat.base_unit!r} is not defined")
        elif base.to_base != 1.0:
            problems.append(f"{key}: base unit {cat.base_unit!r} has factor {base.to_base}")

        for symbol, unit in cat.units.items():
            if symbol != unit.symbol:
                problems.append(f"{key}: key {symbol!r} does not match symbol {unit.symbol!r}")
            if not (math.isfinite(unit.to_base) and unit.to_base > 0):
                problems.append(f"{key}/{symbol}: factor must be positive and finite")
                continue
            if base is None:
                continue

            one = Q_(1.0, unit.pint_unit)
            if not one.check(cat.dimensionality):
                problems.append(
                    f"{key}/{symbol}: {unit.pint_unit} is not {cat.dimensionality}"
                )
                continue
            expected = one.to(base.pint_unit).magnitude
            if not math.isclose(unit.to_base, expected, rel_tol=rel_tol):
                problems.append(
                    f"{key}/{symbol}: factor {unit.to_base} disagrees with pint ({expected})"
                )

    for key, pairing in defaults.items():
        cat = categories.get(key)
        if cat is None:
            problems.append(f"default pairing for unknown category {key!r}")
            continue
        for symbol in (pairing.input, pairing.output):
            if symbol not in cat:
                problems.append(f"{key}: default unit {symbol!r} is not defined")

    if problems:
        raise RuntimeError("Invalid unit registry: " + "; ".join(problems))


validate_registry()
