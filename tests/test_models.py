"""
Tests for request/result models and the conversion runner.
"""

import pytest
from pydantic import ValidationError

from iconvert.models.inputs import ConversionRequest
from iconvert.models.outputs import (
    BatchResult,
    CategoryInfo,
    ConversionErrorInfo,
    ConversionResult,
    ErrorCode,
)
from iconvert.runner import describe_registry, run_batch, run_conversion
from iconvert.units.registry import UnknownCategoryError, UnknownUnitError, get_category


class TestConversionRequest:
    """Tests for ConversionRequest validation."""

    def test_valid_request(self, km_to_m_request):
        """Test that a complete request is accepted."""
        assert km_to_m_request.value == 1.0
        assert km_to_m_request.category == "Distance"

    def test_category_optional(self):
        """Test that the category may be omitted."""
        request = ConversionRequest(value=2, from_unit="kg", to_unit="g")
        assert request.category is None
        assert request.resolved_category() == "Mass"

    def test_missing_required_fields(self):
        """Test that value and units are required."""
        with pytest.raises(ValidationError):
            ConversionRequest(value=1.0)
        with pytest.raises(ValidationError):
            ConversionRequest(from_unit="km", to_unit="m")

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_value_rejected(self, value):
        """Test that infinities and NaN are rejected."""
        with pytest.raises(ValidationError):
            ConversionRequest(value=value, from_unit="km", to_unit="m")

    def test_blank_unit_rejected(self):
        """Test that empty or whitespace-only symbols are rejected."""
        with pytest.raises(ValidationError):
            ConversionRequest(value=1.0, from_unit="", to_unit="m")
        with pytest.raises(ValidationError):
            ConversionRequest(value=1.0, from_unit="km", to_unit="   ")

    def test_whitespace_stripped(self):
        """Test that surrounding whitespace is removed."""
        request = ConversionRequest(value=1.0, category=" Mass ", from_unit=" kg", to_unit="lb ")
        assert request.category == "Mass"
        assert request.from_unit == "kg"
        assert request.to_unit == "lb"

    def test_unknown_category_accepted_until_resolved(self):
        """Test that registry membership is checked by resolved_category."""
        request = ConversionRequest(value=1.0, category="Volume", from_unit="l", to_unit="ml")
        with pytest.raises(UnknownCategoryError):
            request.resolved_category()

    def test_resolve_mismatched_units(self):
        """Test that units from different categories cannot be resolved."""
        request = ConversionRequest(value=1.0, from_unit="km", to_unit="kg")
        with pytest.raises(UnknownUnitError):
            request.resolved_category()

    def test_json_round_trip(self, km_to_m_request):
        """Test serialisation to and from JSON."""
        data = km_to_m_request.model_dump_json()
        assert ConversionRequest.model_validate_json(data) == km_to_m_request


class TestRunConversion:
    """Tests for run_conversion."""

    def test_success(self, km_to_m_request):
        """Test a successful conversion result."""
        result = run_conversion(km_to_m_request)

        assert result.ok
        assert result.result == 1000.0
        assert result.error is None
        assert result.category == "Distance"

    def test_inferred_category_reported(self):
        """Test that the inferred category is filled in."""
        result = run_conversion(ConversionRequest(value=1, from_unit="g", to_unit="kg"))
        assert result.category == "Mass"
        assert result.result == 0.001

    def test_unknown_unit_is_typed_error(self):
        """Test that an unknown unit yields an error result, not an exception."""
        result = run_conversion(
            ConversionRequest(value=1, category="Distance", from_unit="km", to_unit="lb")
        )

        assert not result.ok
        assert result.result is None
        assert result.error.code == ErrorCode.UNKNOWN_UNIT
        assert "lb" in result.error.message

    def test_unknown_category_is_typed_error(self):
        """Test that an unknown category yields an error result."""
        result = run_conversion(
            ConversionRequest(value=1, category="Volume", from_unit="l", to_unit="ml")
        )

        assert not result.ok
        assert result.category == "Volume"
        assert result.error.code == ErrorCode.UNKNOWN_CATEGORY

    def test_uninferable_category(self):
        """Test that an unplaceable unit leaves the category empty."""
        result = run_conversion(ConversionRequest(value=1, from_unit="mile", to_unit="km"))

        assert result.category is None
        assert result.error.code == ErrorCode.UNKNOWN_UNIT

    def test_error_serialises_code_string(self):
        """Test that the error code appears as its string value in JSON."""
        result = run_conversion(ConversionRequest(value=1, from_unit="km", to_unit="kg"))
        data = result.model_dump(mode="json")
        assert data["error"]["code"] == "UnknownUnit"


class TestBatch:
    """Tests for run_batch and BatchResult."""

    def test_batch_keeps_order_and_counts(self):
        """Test result order and success/failure counts."""
        requests = [
            ConversionRequest(value=1, from_unit="km", to_unit="m"),
            ConversionRequest(value=1, from_unit="km", to_unit="kg"),
            ConversionRequest(value=1, from_unit="kg", to_unit="lb"),
        ]
        batch = run_batch(requests)

        assert [r.from_unit for r in batch.results] == ["km", "km", "kg"]
        assert batch.succeeded == 2
        assert batch.failed == 1

    def test_counts_are_serialised(self):
        """Test that counts are included in the JSON output."""
        batch = run_batch([ConversionRequest(value=1, from_unit="g", to_unit="kg")])
        data = batch.model_dump()
        assert data["succeeded"] == 1
        assert data["failed"] == 0

    def test_empty_batch(self):
        """Test that an empty batch is valid."""
        batch = run_batch([])
        assert batch.results == []
        assert batch.succeeded == 0
        assert batch.failed == 0

    def test_result_ok_property(self):
        """Test ConversionResult.ok directly."""
        ok = ConversionResult(value=1, from_unit="m", to_unit="m", result=1.0)
        bad = ConversionResult(
            value=1, from_unit="m", to_unit="x",
            error=ConversionErrorInfo(code=ErrorCode.UNKNOWN_UNIT, message="nope"),
        )
        assert ok.ok
        assert not bad.ok
        assert BatchResult(results=[ok, bad]).failed == 1


class TestDescribeRegistry:
    """Tests for registry listings."""

    def test_all_categories(self):
        """Test listing every category."""
        infos = describe_registry()
        assert [c.name for c in infos] == ["Distance", "Mass"]

    def test_single_category(self):
        """Test listing one category with its defaults."""
        (mass,) = describe_registry("Mass")

        assert mass.base_unit == "kg"
        assert mass.default_input == "kg"
        assert mass.default_output == "lb"
        assert [u.symbol for u in mass.units] == ["g", "kg", "lb"]
        assert [u.symbol for u in mass.units if u.is_base] == ["kg"]

    def test_unknown_category(self):
        """Test that listing an unknown category raises."""
        with pytest.raises(UnknownCategoryError):
            describe_registry("Volume")

    def test_category_info_from_category(self):
        """Test building CategoryInfo directly."""
        info = CategoryInfo.from_category(get_category("Distance"))
        assert info.dimensionality == "[length]"
        assert {u.symbol: u.to_base for u in info.units}["km"] == 1000.0
