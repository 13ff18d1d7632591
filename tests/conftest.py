"""
Pytest configuration and shared fixtures.
"""

import pytest

from iconvert.form import ConversionForm
from iconvert.models.inputs import ConversionRequest


@pytest.fixture
def distance_form() -> ConversionForm:
    """Form as it appears at launch."""
    return ConversionForm()


@pytest.fixture
def mass_form() -> ConversionForm:
    """Form switched to mass with its default pairing."""
    return ConversionForm.for_category("Mass")


@pytest.fixture
def km_to_m_request() -> ConversionRequest:
    """A valid distance request."""
    return ConversionRequest(value=1.0, category="Distance", from_unit="km", to_unit="m")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove iconvert variables from the environment."""
    for var in ("ICONVERT_LOG_LEVEL", "ICONVERT_DEFAULT_CATEGORY", "ICONVERT_PRECISION"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
