"""
Headless model of the single-screen conversion form.

The form has an input field, an output field, a unit picker for each and a
category picker. Editing either field or either picker recomputes the
dependent field; switching to another category resets both pickers to that
category's default pairing.

Setters do not call each other, so updating one field never cascades back
into the field that triggered it.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from iconvert.units.converter import convert
from iconvert.units.registry import (
    UnitConversionError,
    default_units,
    get_category,
    list_categories,
    list_units,
)

logger = logging.getLogger(__name__)


class ConversionForm(BaseModel):
    """
    State of the conversion form.

    The setters raise ``UnknownCategoryError`` / ``UnknownUnitError`` for
    invalid categories or units and leave the state untouched. Construction
    and direct field assignment are validated by pydantic and raise
    ``ValidationError`` instead.
    """

    category: str = Field(default="Distance", description="Selected category")
    input_value: float = Field(default=0.0, description="Value typed into the input field")
    input_units: str = Field(default="km", description="Unit picked for the input field")
    output_value: float = Field(default=0.0, description="Converted value")
    output_units: str = Field(default="m", description="Unit picked for the output field")

    model_config = {"validate_assignment": True}

    @model_validator(mode="after")
    def check_units(self) -> "ConversionForm":
        """Both pickers must hold units of the selected category."""
        cat = get_category(self.category)
        cat.get(self.input_units)
        cat.get(self.output_units)
        return self

    @classmethod
    def for_category(cls, category: str, input_value: float = 0.0) -> "ConversionForm":
        """Form showing ``category`` with its default unit pairing."""
        pairing = default_units(category)
        return cls(
            category=category,
            input_value=input_value,
            input_units=pairing.input,
            output_value=convert(input_value, category, pairing.input, pairing.output),
            output_units=pairing.output,
        )

    @property
    def available_categories(self) -> list[str]:
        return list_categories()

    @property
    def available_units(self) -> list[str]:
        """Contents of both unit pickers."""
        return list_units(self.category)

    def _convert(self, value: float, from_unit: str, to_unit: str, category: Optional[str] = None) -> float:
        category = category or self.category
        try:
            return convert(value, category, from_unit, to_unit)
        except UnitConversionError as e:
            logger.warning("Form rejected %s -> %s in %s: %s", from_unit, to_unit, category, e)
            raise

    def set_input_value(self, value: float) -> float:
        """Edit the input field; returns the recomputed output value."""
        value = float(value)
        self.output_value = self._convert(value, self.input_units, self.output_units)
        self.input_value = value
        return self.output_value

    def set_output_value(self, value: float) -> float:
        """Edit the output field; returns the recomputed input value."""
        value = float(value)
        self.input_value = self._convert(value, self.output_units, self.input_units)
        self.output_value = value
        return self.input_value

    def set_input_units(self, symbol: str) -> float:
        """Pick a new input unit; returns the recomputed output value."""
        self.output_value = self._convert(self.input_value, symbol, self.output_units)
        self.input_units = symbol
        return self.output_value

    def set_output_units(self, symbol: str) -> float:
        """Pick a new output unit; returns the recomputed output value."""
        self.output_value = self._convert(self.input_value, self.input_units, symbol)
        self.output_units = symbol
        return self.output_value

    def set_category(self, category: str) -> float:
        """
        Switch category.

        Both pickers are reset to the category's default pairing and the
        output is recomputed from the current input value. Picking the
        category that is already selected keeps the current pickers.
        """
        try:
            pairing = default_units(category)
        except UnitConversionError as e:
            logger.warning("Form rejected category %r: %s", category, e)
            raise
        if category == self.category:
            return self.output_value

        output_value = self._convert(
            self.input_value, pairing.input, pairing.output, category=category
        )
        # Category and pickers change together; one at a time would fail validation
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "input_units", pairing.input)
        object.__setattr__(self, "output_units", pairing.output)
        self.output_value = output_value
        return self.output_value

    def swap(self) -> float:
        """Exchange the two unit pickers; returns the recomputed output value."""
        self.input_units, self.output_units = self.output_units, self.input_units
        self.output_value = self._convert(self.input_value, self.input_units, self.output_units)
        return self.output_value
