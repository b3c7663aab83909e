"""Tests for loader settings."""

import pytest
from pydantic import ValidationError

from config_file.codecs import CODECS, available_formats
from config_file.formats import ConfigFormat
from config_file.settings import LoaderSettings


class TestLoaderSettings:
    """Test cases for LoaderSettings class."""

    def test_defaults(self):
        """Test default settings enable every installed format."""
        settings = LoaderSettings()
        assert settings.formats == available_formats()
        assert settings.strict is False

    def test_toml_always_enabled(self):
        """Test TOML is added to any format selection."""
        settings = LoaderSettings(formats={ConfigFormat.JSON})
        assert settings.formats == {ConfigFormat.JSON, ConfigFormat.TOML}

    def test_empty_formats_still_has_toml(self):
        """Test an empty selection keeps TOML."""
        assert LoaderSettings(formats=set()).formats == {ConfigFormat.TOML}

    def test_formats_from_strings(self):
        """Test formats given by their string values."""
        settings = LoaderSettings(formats=["yaml", "xml"])
        assert settings.formats == {ConfigFormat.YAML, ConfigFormat.XML, ConfigFormat.TOML}

    def test_unknown_format_rejected(self):
        """Test an unknown format name is rejected."""
        with pytest.raises(ValidationError):
            LoaderSettings(formats=["ini"])

    def test_unavailable_format_rejected(self, monkeypatch):
        """Test a format without its library names the extra to install."""
        monkeypatch.setattr(CODECS[ConfigFormat.XML], "requires", "no_such_decoder_module")

        with pytest.raises(ValidationError, match=r"config-file\[xml\]"):
            LoaderSettings(formats=[ConfigFormat.XML])

    def test_extra_fields_forbidden(self):
        """Test unknown settings are rejected."""
        with pytest.raises(ValidationError):
            LoaderSettings(encoding="latin-1")

    def test_settings_are_frozen(self):
        """Test that settings cannot be modified."""
        settings = LoaderSettings()
        with pytest.raises(ValidationError):
            settings.strict = True
