"""Messaging configuration.

Centralizes the markers and defaults shared by the formatting pipeline and
the fan-out helpers, and reads overrides from the environment.
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .markup.colors import ALL_CODES, DEFAULT_CLICK_DELIMITER, DEFAULT_COLOR_CHAR

# Environment variables read by load_config()
ENV_COLOR_CHAR = "CHATFMT_COLOR_CHAR"
ENV_CLICK_DELIMITER = "CHATFMT_CLICK_DELIMITER"
ENV_USE_COLORS = "CHATFMT_USE_COLORS"


class MessagingConfig(BaseModel):
    """Markers and defaults used when formatting messages."""

    model_config = ConfigDict(frozen=True)

    color_char: str = Field(
        default=DEFAULT_COLOR_CHAR,
        min_length=1,
        max_length=1,
        description="Marker that precedes a color code"
    )
    click_delimiter: str = Field(
        default=DEFAULT_CLICK_DELIMITER,
        min_length=1,
        description="Marker that bounds the clickable region"
    )
    use_colors_by_default: bool = Field(
        default=True,
        description="Translate color codes unless a call disables it"
    )

    @field_validator("color_char")
    @classmethod
    def validate_color_char(cls, v: str) -> str:
        """A code character cannot also be the marker."""
        if v in ALL_CODES:
            raise ValueError(f"color_char {v!r} is itself a color code")
        return v


def load_config(environ: Mapping[str, str] | None = None) -> MessagingConfig:
    """Build a config from environment overrides.

    Args:
        environ: Variables to read; defaults to ``os.environ``

    Returns:
        MessagingConfig with defaults for unset variables

    Raises:
        ConfigError: If a variable holds an invalid value
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    if ENV_COLOR_CHAR in env:
        values["color_char"] = env[ENV_COLOR_CHAR]
    if ENV_CLICK_DELIMITER in env:
        values["click_delimiter"] = env[ENV_CLICK_DELIMITER]
    if ENV_USE_COLORS in env:
        values["use_colors_by_default"] = env[ENV_USE_COLORS]

    try:
        return MessagingConfig(**values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
