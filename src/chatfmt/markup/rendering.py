"""Fragment rendering for terminals and plain text.

Hides how fragment styles map onto Rich styles.
"""

from collections.abc import Sequence

from rich.style import Style
from rich.text import Text

from .colors import ChatColor
from .models import StyledFragment, TextStyle

# Meta key Textual uses for click handlers
CLICK_META_KEY = "@click"


def _rich_color(color: str | None) -> str | None:
    if color is None or color.startswith("#"):
        return color
    chat_color = ChatColor.from_name(color)
    return chat_color.rgb if chat_color else None


def to_rich_style(style: TextStyle, command: str | None = None) -> Style:
    """Convert a fragment style to a Rich style.

    Obfuscated text has no terminal equivalent and is shown blinking.
    """
    meta = {CLICK_META_KEY: command} if command is not None else None
    return Style(
        color=_rich_color(style.color),
        bold=style.bold or None,
        italic=style.italic or None,
        underline=style.underlined or None,
        strike=style.strikethrough or None,
        blink=style.obfuscated or None,
        meta=meta,
    )


def to_rich_text(fragments: Sequence[StyledFragment]) -> Text:
    """Render fragments as a single Rich text with one span per fragment."""
    text = Text(overflow="fold")
    for fragment in fragments:
        command = fragment.click_action.value if fragment.click_action else None
        text.append(fragment.text, style=to_rich_style(fragment.style, command))
    return text


def to_plain_text(fragments: Sequence[StyledFragment]) -> str:
    """What a reader sees, without styling."""
    return "".join(fragment.text for fragment in fragments)
