"""
Conversion between units of the same category.

ASSUMPTIONS:
- All units are pure scale factors of their category base (no offsets)
- Arithmetic is native double precision, no rounding is applied
- Arguments are validated before any arithmetic takes place
"""

import logging

import pint

from iconvert.units.registry import Q_, UnknownUnitError, get_category, get_unit

logger = logging.getLogger(__name__)


def convert(value: float, category: str, from_unit: str, to_unit: str) -> float:
    """
    Express ``value`` given in ``from_unit`` in ``to_unit``.

    Args:
        value: Magnitude in the source unit
        category: Category name, e.g. "Distance"
        from_unit: Source unit symbol, e.g. "km"
        to_unit: Target unit symbol, e.g. "m"

    Returns:
        Magnitude in the target unit

    Raises:
        UnknownCategoryError: if the category is not registered
        UnknownUnitError: if either symbol is not defined in the category

    Equation:
        result = value * factor(from -> base) / factor(to -> base)
    """
    source = get_unit(category, from_unit)
    target = get_unit(category, to_unit)

    if source.symbol == target.symbol:
        # Exact identity, v * f / f is not always v in floating point
        return float(value)

    result = value * source.to_base / target.to_base
    logger.debug("%s: %r %s -> %r %s", category, value, from_unit, result, to_unit)
    return result


def to_quantity(value: float, category: str, symbol: str) -> pint.Quantity:
    """Build a pint quantity for ``value`` expressed in a registry unit."""
    unit = get_unit(category, symbol)
    return Q_(value, unit.pint_unit)


def symbol_for(quantity: pint.Quantity, category: str) -> str:
    """Map a quantity's pint unit back to a symbol of ``category``."""
    cat = get_category(category)
    for symbol, unit in cat.units.items():
        if quantity.units == Q_(1, unit.pint_unit).units:
            return symbol
    raise UnknownUnitError(cat.name, str(quantity.units), tuple(cat.units))


def convert_quantity(quantity: pint.Quantity, category: str, to_unit: str) -> pint.Quantity:
    """
    Convert a pint quantity to another registry unit.

    The conversion goes through the registry's explicit factors rather than
    pint's own definitions so results match ``convert``.
    """
    from_unit = symbol_for(quantity, category)
    result = convert(quantity.magnitude, category, from_unit, to_unit)
    return to_quantity(result, category, to_unit)
