"""
Unit tests for Valuekit models and configuration.

Uses pytest for testing the Pydantic models and settings.
"""

import logging

import pytest
from pydantic import ValidationError

from valuekit.config import configure_logging
from valuekit.config.logging_config import LOG_FORMAT
from valuekit.config.settings import Settings, get_settings
from valuekit.models.schemas import Keys, Predicate, PrimitiveKind, PrimitiveWrapper


# =============================================================================
# Primitive Wrapper Tests
# =============================================================================


class TestPrimitiveWrapper:
    """Tests for the PrimitiveWrapper model."""

    def test_wrapper_value_of(self):
        """Test unboxing the wrapped value."""
        assert PrimitiveWrapper(value="abc").value_of() == "abc"

    def test_wrapper_keeps_types(self):
        """Test that strict validation does not coerce values."""
        assert PrimitiveWrapper(value=True).value_of() is True
        assert type(PrimitiveWrapper(value=1).value_of()) is int
        assert type(PrimitiveWrapper(value=1.5).value_of()) is float
        assert PrimitiveWrapper(value="1").value_of() == "1"

    def test_wrapper_kind(self):
        """Test the kind property."""
        assert PrimitiveWrapper(value=False).kind == PrimitiveKind.BOOLEAN
        assert PrimitiveWrapper(value=2).kind == PrimitiveKind.NUMBER
        assert PrimitiveWrapper(value="2").kind == PrimitiveKind.STRING

    def test_wrapper_rejects_non_primitives(self):
        """Test that non-primitive values are rejected."""
        with pytest.raises(ValidationError):
            PrimitiveWrapper(value=[1])
        with pytest.raises(ValidationError):
            PrimitiveWrapper(value=None)
        with pytest.raises(ValidationError):
            PrimitiveWrapper()

    def test_wrapper_is_frozen(self):
        """Test that a wrapper cannot be mutated."""
        wrapper = PrimitiveWrapper(value=1)
        with pytest.raises(ValidationError):
            wrapper.value = 2

    def test_wrapper_repr(self):
        """Test the wrapper representation."""
        assert repr(PrimitiveWrapper(value="x")) == "PrimitiveWrapper('x')"


class TestPrimitiveKind:
    """Tests for the PrimitiveKind enumeration."""

    def test_bool_before_number(self):
        """Test that bools are not classified as numbers."""
        assert PrimitiveKind.of(True) == PrimitiveKind.BOOLEAN
        assert PrimitiveKind.of(1) == PrimitiveKind.NUMBER

    def test_kind_values(self):
        """Test the string values of the enum."""
        assert PrimitiveKind.NUMBER.value == "number"

    def test_of_rejects_other_types(self):
        """Test that non-primitives raise TypeError."""
        with pytest.raises(TypeError, match="dict"):
            PrimitiveKind.of({})


# =============================================================================
# Selector Model Tests
# =============================================================================


class TestSelectors:
    """Tests for the Keys and Predicate selector models."""

    def test_keys_of(self):
        """Test building Keys from positional keys."""
        assert Keys.of("a", ("b", 1)).keys == ("a", ("b", 1))

    def test_keys_default_empty(self):
        """Test that Keys defaults to no keys."""
        assert Keys().keys == ()

    def test_keys_from_list(self):
        """Test that a list of keys is stored as a tuple."""
        assert Keys(keys=["a", "b"]).keys == ("a", "b")

    def test_predicate_holds_callable(self):
        """Test that Predicate stores its function."""

        def is_empty(value):
            return not value

        assert Predicate(fn=is_empty).fn is is_empty

    def test_predicate_requires_callable(self):
        """Test that Predicate rejects non-callables."""
        with pytest.raises(ValidationError):
            Predicate(fn="not callable")


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch):
        """Test default settings values."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert list(Settings.model_fields) == ["log_level"]

    def test_from_environment(self, monkeypatch):
        """Test loading settings from environment variables."""
        monkeypatch.setenv("log_level", "DEBUG")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"

    def test_invalid_level(self, monkeypatch):
        """Test that unknown log levels are rejected."""
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_singleton(self):
        """Test that get_settings returns a cached instance."""
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_uses_settings_level(self, monkeypatch):
        """Test that the configured level and format are applied."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        configure_logging(Settings(_env_file=None))

        assert calls == [{"level": logging.WARNING, "format": LOG_FORMAT}]


# =============================================================================
# Run Tests
# =============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
