"""Data models for styled chat text.

These models describe what a chat client displays, independent of the
markup they were parsed from and of the transport that delivers them.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .colors import ChatColor, is_hex_color

# Format flags in the order they appear in serialized components
FORMAT_FLAGS = ("bold", "italic", "underlined", "strikethrough", "obfuscated")


class ClickActionKind(str, Enum):
    """What a chat client does when a fragment is clicked."""

    RUN_COMMAND = "run_command"  # Client sends the value as a command


class ClickAction(BaseModel):
    """Action attached to a clickable fragment."""

    model_config = ConfigDict(frozen=True)

    action: ClickActionKind = Field(default=ClickActionKind.RUN_COMMAND)
    value: str = Field(description="Payload interpreted by the command host")


class TextStyle(BaseModel):
    """Color and formatting shared by a run of text."""

    model_config = ConfigDict(frozen=True)

    color: str | None = Field(
        default=None,
        description="Legacy color name (e.g. 'gold') or '#rrggbb'; None for the client default"
    )
    bold: bool = False
    italic: bool = False
    underlined: bool = False
    strikethrough: bool = False
    obfuscated: bool = False

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        """Accept only legacy color names and hex colors."""
        if v is None:
            return v
        if is_hex_color(v):
            return v.upper()
        color = ChatColor.from_name(v)
        if color is None or not color.is_color:
            raise ValueError(f"Unknown color: {v!r}")
        return color.color_name

    @property
    def is_plain(self) -> bool:
        """True when nothing about this style differs from the default."""
        return self == TextStyle()


class StyledFragment(BaseModel):
    """A contiguous run of text with one style and at most one click action."""

    model_config = ConfigDict(frozen=True)

    text: str
    style: TextStyle = Field(default_factory=TextStyle)
    click_action: ClickAction | None = None

    @property
    def is_clickable(self) -> bool:
        return self.click_action is not None

    def with_click_action(self, command: str) -> "StyledFragment":
        """Return a copy that runs ``command`` when clicked."""
        return self.model_copy(update={"click_action": ClickAction(value=command)})

    def to_component(self) -> dict[str, Any]:
        """Convert to a chat component dictionary.

        Only set properties are emitted, so an unstyled fragment becomes
        ``{"text": ...}``.
        """
        component: dict[str, Any] = {"text": self.text}
        if self.style.color is not None:
            component["color"] = self.style.color
        for flag in FORMAT_FLAGS:
            if getattr(self.style, flag):
                component[flag] = True
        if self.click_action is not None:
            component["clickEvent"] = {
                "action": self.click_action.action.value,
                "value": self.click_action.value,
            }
        return component


def fragments_to_components(fragments: list[StyledFragment]) -> list[dict[str, Any]]:
    """Serialize a fragment sequence, preserving order."""
    return [fragment.to_component() for fragment in fragments]
