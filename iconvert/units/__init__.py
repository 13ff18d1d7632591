"""
Unit registry and converter for distance and mass.

This module provides:
- The static category/unit tables and their default unit pairings
- Typed errors for unknown categories and units
- A pure conversion function plus pint quantity helpers

Factors are explicit constants; pint checks them at import time.
"""

from iconvert.units.registry import (
    ureg,
    Q_,
    POUND_IN_KG,
    UnitConversionError,
    UnknownCategoryError,
    UnknownUnitError,
    UnitDefinition,
    DefaultPairing,
    Category,
    CATEGORIES,
    DEFAULT_UNITS,
    get_category,
    get_unit,
    list_categories,
    list_units,
    default_units,
    find_categories,
    infer_category,
    validate_registry,
)
from iconvert.units.converter import (
    convert,
    to_quantity,
    symbol_for,
    convert_quantity,
)

__all__ = [
    # Pint
    "ureg",
    "Q_",
    "POUND_IN_KG",
    # Errors
    "UnitConversionError",
    "UnknownCategoryError",
    "UnknownUnitError",
    # Registry
    "UnitDefinition",
    "DefaultPairing",
    "Category",
    "CATEGORIES",
    "DEFAULT_UNITS",
    "get_category",
    "get_unit",
    "list_categories",
    "list_units",
    "default_units",
    "find_categories",
    "infer_category",
    "validate_registry",
    # Conversion
    "convert",
    "to_quantity",
    "symbol_for",
    "convert_quantity",
]
