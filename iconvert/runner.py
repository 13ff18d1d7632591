"""
Run conversion requests and describe the registry as data.

Conversions never raise for unknown categories or units: the error is
returned inside the result so the caller decides whether to ignore, log
or surface it.
"""

import logging
from typing import Iterable, Optional

from iconvert.models.inputs import ConversionRequest
from iconvert.models.outputs import (
    BatchResult,
    CategoryInfo,
    ConversionErrorInfo,
    ConversionResult,
)
from iconvert.units.converter import convert
from iconvert.units.registry import CATEGORIES, UnitConversionError, get_category

logger = logging.getLogger(__name__)


def run_conversion(request: ConversionRequest) -> ConversionResult:
    """Convert one request, capturing registry errors as a typed result."""
    category = request.category
    try:
        category = request.resolved_category()
        result = convert(request.value, category, request.from_unit, request.to_unit)
    except UnitConversionError as e:
        logger.info("Rejected conversion %s -> %s: %s", request.from_unit, request.to_unit, e)
        return ConversionResult(
            value=request.value,
            category=category,
            from_unit=request.from_unit,
            to_unit=request.to_unit,
            error=ConversionErrorInfo.from_exception(e),
        )

    return ConversionResult(
        value=request.value,
        category=category,
        from_unit=request.from_unit,
        to_unit=request.to_unit,
        result=result,
    )


def run_batch(requests: Iterable[ConversionRequest]) -> BatchResult:
    """Convert every request in order."""
    batch = BatchResult(results=[run_conversion(r) for r in requests])
    logger.debug("Batch of %d: %d succeeded, %d failed",
                 len(batch.results), batch.succeeded, batch.failed)
    return batch


def describe_registry(category: Optional[str] = None) -> list[CategoryInfo]:
    """
    Registry contents as serialisable models.

    Args:
        category: Restrict the listing to one category

    Raises:
        UnknownCategoryError: if ``category`` is given and not registered
    """
    if category is not None:
        return [CategoryInfo.from_category(get_category(category))]
    return [CategoryInfo.from_category(c) for c in CATEGORIES.values()]
