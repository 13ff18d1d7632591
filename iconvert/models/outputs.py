"""
Output models for conversions and registry listings.

A failed conversion is reported as a result carrying a typed error rather
than an exception, so JSON consumers can decide what to do with it.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from iconvert.units.registry import Category, UnitConversionError, DEFAULT_UNITS


class ErrorCode(str, Enum):
    """Kinds of rejected conversion arguments."""
    UNKNOWN_CATEGORY = "UnknownCategory"
    UNKNOWN_UNIT = "UnknownUnit"


class ConversionErrorInfo(BaseModel):
    """Serialisable description of a rejected conversion."""
    code: ErrorCode = Field(..., description="Error kind")
    message: str = Field(..., description="Human-readable explanation")

    @classmethod
    def from_exception(cls, exc: UnitConversionError) -> "ConversionErrorInfo":
        return cls(code=ErrorCode(exc.code), message=str(exc))


class ConversionResult(BaseModel):
    """Outcome of one conversion request."""
    value: float = Field(..., description="Magnitude in the source unit")
    category: Optional[str] = Field(
        default=None,
        description="Category used (None if it could not be determined)"
    )
    from_unit: str
    to_unit: str
    result: Optional[float] = Field(
        default=None,
        description="Magnitude in the target unit, None on error"
    )
    error: Optional[ConversionErrorInfo] = Field(default=None)

    @property
    def ok(self) -> bool:
        """True when the conversion succeeded."""
        return self.error is None


class BatchResult(BaseModel):
    """Results of a list of conversion requests, in request order."""
    results: list[ConversionResult] = Field(default_factory=list)

    @computed_field
    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @computed_field
    @property
    def failed(self) -> int:
        return len(self.results) - self.succeeded


class UnitInfo(BaseModel):
    """One unit as shown in a listing."""
    symbol: str
    name: str
    to_base: float = Field(..., gt=0, description="Factor relative to the category base unit")
    is_base: bool = False


class CategoryInfo(BaseModel):
    """A category with its units and default pairing."""
    name: str
    base_unit: str
    dimensionality: str
    units: list[UnitInfo]
    default_input: str
    default_output: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryInfo":
        pairing = DEFAULT_UNITS[category.name]
        return cls(
            name=category.name,
            base_unit=category.base_unit,
            dimensionality=category.dimensionality,
            units=[
                UnitInfo(symbol=u.symbol, name=u.name, to_base=u.to_base, is_base=u.is_base)
                for u in category.units.values()
            ],
            default_input=pairing.input,
            default_output=pairing.output,
        )
