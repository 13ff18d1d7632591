"""
Input models for conversion requests.

A request names a value and two unit symbols. The category is optional:
when omitted it is inferred from the symbols, which are unique across
categories.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from iconvert.units.registry import get_category, infer_category


class ConversionRequest(BaseModel):
    """
    A single conversion to perform.

    Registry membership is not checked at construction time so that a
    batch can report unknown units per request instead of failing as a
    whole. Use ``resolved_category`` to validate.
    """

    value: float = Field(..., allow_inf_nan=False, description="Magnitude in the source unit")
    category: Optional[str] = Field(
        default=None,
        description="Category name (Distance, Mass). Inferred from the units if omitted."
    )
    from_unit: str = Field(..., min_length=1, description="Source unit symbol, e.g. km")
    to_unit: str = Field(..., min_length=1, description="Target unit symbol, e.g. m")

    @field_validator("category", "from_unit", "to_unit")
    @classmethod
    def strip_whitespace(cls, v: Optional[str]) -> Optional[str]:
        """Trim surrounding whitespace from names and symbols."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    def resolved_category(self) -> str:
        """
        Category this request converts within.

        Raises:
            UnknownCategoryError: if an explicit category is not registered
            UnknownUnitError: if the units cannot be placed in one category
        """
        if self.category is not None:
            return get_category(self.category).name
        return infer_category(self.from_unit, self.to_unit)

    model_config = {
        "json_schema_extra": {
            "example": {
                "value": 1.0,
                "category": "Distance",
                "from_unit": "km",
                "to_unit": "m",
            }
        }
    }
