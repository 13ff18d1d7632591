"""
Helpers to turn conversion results and registry listings into compact,
human-readable console text.
"""

from __future__ import annotations

from iconvert.form import ConversionForm
from iconvert.models.outputs import CategoryInfo, ConversionResult


def fmt_value(value: float | None, precision: int = 6, zero_default: str = "n/a") -> str:
    """Format a magnitude with ``precision`` significant digits and separators."""
    if value is None:
        return zero_default
    return f"{value:,.{max(precision, 1)}g}"


def format_result(result: ConversionResult, precision: int = 6) -> str:
    """One line such as ``1 km = 1,000 m`` or an error line."""
    if not result.ok:
        return f"error [{result.error.code.value}]: {result.error.message}"
    return (
        f"{fmt_value(result.value, precision)} {result.from_unit} = "
        f"{fmt_value(result.result, precision)} {result.to_unit}"
    )


def format_categories(categories: list[CategoryInfo]) -> str:
    """Table of categories, units and their factors."""
    lines: list[str] = []
    for cat in categories:
        lines.append(
            f"{cat.name} {cat.dimensionality} base={cat.base_unit} "
            f"default={cat.default_input}->{cat.default_output}"
        )
        for unit in cat.units:
            marker = " (base)" if unit.is_base else ""
            lines.append(
                f"  {unit.symbol:<4} {unit.name:<12} 1 {unit.symbol} = "
                f"{unit.to_base:.12g} {cat.base_unit}{marker}"
            )
    return "\n".join(lines)


def format_form(form: ConversionForm, precision: int = 6) -> str:
    """Render the form the way the screen lays it out."""
    units = " | ".join(form.available_units)
    return "\n".join([
        f"Category:        {form.category}  ({' | '.join(form.available_categories)})",
        f"Input value:     {fmt_value(form.input_value, precision)} {form.input_units}",
        f"Converted value: {fmt_value(form.output_value, precision)} {form.output_units}",
        f"Units:           {units}",
    ])
