"""
Tests for environment-based configuration.
"""

import pytest

from iconvert.config import Settings, load_settings


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self):
        """Test defaults when no variables are set."""
        settings = load_settings({})
        assert settings == Settings(log_level="WARNING", default_category="Distance", precision=6)

    def test_reads_os_environ(self, clean_env):
        """Test that os.environ is used when no mapping is passed."""
        clean_env.setenv("ICONVERT_PRECISION", "3")
        assert load_settings().precision == 3

    def test_overrides(self):
        """Test that every variable is honoured."""
        settings = load_settings({
            "ICONVERT_LOG_LEVEL": "debug",
            "ICONVERT_DEFAULT_CATEGORY": " Mass ",
            "ICONVERT_PRECISION": "10",
        })
        assert settings.log_level == "DEBUG"
        assert settings.default_category == "Mass"
        assert settings.precision == 10

    @pytest.mark.parametrize("env,name", [
        ({"ICONVERT_LOG_LEVEL": "chatty"}, "ICONVERT_LOG_LEVEL"),
        ({"ICONVERT_DEFAULT_CATEGORY": "Volume"}, "ICONVERT_DEFAULT_CATEGORY"),
        ({"ICONVERT_PRECISION": "many"}, "ICONVERT_PRECISION"),
        ({"ICONVERT_PRECISION": "-1"}, "ICONVERT_PRECISION"),
        ({"ICONVERT_PRECISION": "16"}, "ICONVERT_PRECISION"),
    ])
    def test_invalid_values(self, env, name):
        """Test that invalid values raise ValueError naming the variable."""
        with pytest.raises(ValueError, match=name):
            load_settings(env)

    def test_settings_frozen(self):
        """Test that settings cannot be modified."""
        settings = load_settings({})
        with pytest.raises(AttributeError):
            settings.precision = 2
