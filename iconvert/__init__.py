"""
iConvert (iconvert)

Converts values between units of distance (cm, dm, m, km) and mass
(g, kg, lb). The unit tables are static; conversions are pure functions
that reject unknown categories and units with typed errors.

Usage:
    python -m iconvert convert 1 km m
    python -m iconvert units
    python -m iconvert form --category Mass --value 2
    python -m iconvert batch --input example_requests.json
"""

__version__ = "0.1.0"
__author__ = "iConvert Project"

from iconvert.units import (
    convert,
    UnitConversionError,
    UnknownCategoryError,
    UnknownUnitError,
    CATEGORIES,
    DEFAULT_UNITS,
)
from iconvert.models import ConversionRequest, ConversionResult, BatchResult
from iconvert.form import ConversionForm

__all__ = [
    "convert",
    "UnitConversionError",
    "UnknownCategoryError",
    "UnknownUnitError",
    "CATEGORIES",
    "DEFAULT_UNITS",
    "ConversionRequest",
    "ConversionResult",
    "BatchResult",
    "ConversionForm",
]
