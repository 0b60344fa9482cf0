"""Unit tests for the config module."""

import pytest
from pydantic import ValidationError

from config.settings import TextFormatterSettings
from textformatter.colors import ColorScheme


class TestTextFormatterSettings:
    def test_default_values(self) -> None:
        settings = TextFormatterSettings()
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.force_formatting is False
        assert settings.prefix_field_width == 0
        assert settings.color_scheme is None

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTFMT_FORCE_FORMATTING", "true")
        monkeypatch.setenv("TEXTFMT_PREFIX_FIELD_WIDTH", "12")
        monkeypatch.setenv("TEXTFMT_TAG_FIELD_NAME", "op")
        settings = TextFormatterSettings()
        assert settings.force_formatting is True
        assert settings.prefix_field_width == 12
        assert settings.tag_field_name == "op"

    def test_invalid_width(self) -> None:
        with pytest.raises(ValidationError):
            TextFormatterSettings(tag_field_width=-3)

    def test_to_options(self) -> None:
        settings = TextFormatterSettings(
            full_timestamp=True,
            quote_character="'",
            color_scheme=ColorScheme(tag="blue"),
            environment="production",
        )
        options = settings.to_options()
        assert options.full_timestamp is True
        assert options.quote_character == "'"
        assert options.color_scheme == ColorScheme(tag="blue")

    def test_to_options_leaves_defaults_unset(self) -> None:
        options = TextFormatterSettings().to_options()
        assert options.prefix_field_name == ""
        assert options.finalized().prefix_field_name == "__p"
