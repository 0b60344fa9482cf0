"""Formatter settings loaded from environment variables and .env files.

Uses pydantic-settings for type-safe configuration. All environment variables
are prefixed with TEXTFMT_ to avoid collisions. Color scheme slots are nested:
TEXTFMT_COLOR_SCHEME__INFO=green.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from textformatter.colors import ColorScheme
from textformatter.formatter import TextFormatterOptions


class TextFormatterSettings(BaseSettings):
    """Formatter and logging settings loaded from environment variables and .env files."""

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Layout
    force_colors: bool = False
    disable_colors: bool = False
    force_formatting: bool = False
    disable_timestamp: bool = False
    lowercase_levels: bool = False
    full_timestamp: bool = False
    timestamp_format: str = ""
    quote_character: str = Field(default="", max_length=1)

    # Reserved fields
    prefix_field_name: str = ""
    prefix_field_width: int = Field(default=0, ge=0)
    func_field_name: str = ""
    tag_field_name: str = ""
    tag_field_width: int = Field(default=0, ge=0)

    # Colors
    color_scheme: ColorScheme | None = None

    model_config = SettingsConfigDict(
        env_prefix="TEXTFMT_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    def to_options(self) -> TextFormatterOptions:
        """Return the formatter options described by these settings."""
        return TextFormatterOptions(
            **self.model_dump(
                include=set(TextFormatterOptions.model_fields),
                exclude={"color_scheme"},
            ),
            color_scheme=self.color_scheme,
        )
