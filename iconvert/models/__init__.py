"""
Pydantic models for conversion requests and results.
"""

from iconvert.models.inputs import ConversionRequest
from iconvert.models.outputs import (
    ErrorCode,
    ConversionErrorInfo,
    ConversionResult,
    BatchResult,
    UnitInfo,
    CategoryInfo,
)

__all__ = [
    "ConversionRequest",
    "ErrorCode",
    "ConversionErrorInfo",
    "ConversionResult",
    "BatchResult",
    "UnitInfo",
    "CategoryInfo",
]
