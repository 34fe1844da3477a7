"""Legacy markup translation.

Hides the details of the "&a" alternate-code convention:
- which marker/code pairs are recognized
- how codes become the canonical "§" escapes
- how "§" escaped text is split into styled fragments
- how codes are stripped to recover plain text

Every function is a single left-to-right pass and never raises on string
input; unknown codes are kept as literal text.
"""

import re
from functools import lru_cache

from .colors import (
    ALL_CODES,
    DEFAULT_COLOR_CHAR,
    HEX_CODE,
    HEX_DIGITS,
    SECTION_SIGN,
    ChatColor,
)
from .models import StyledFragment, TextStyle

# Length of "§x§r§r§g§g§b§b"
_HEX_SEQUENCE_LENGTH = 14

# Explicit ranges; re.IGNORECASE would also match the Kelvin sign for "k"
_CODE_CLASS = "[0-9A-Fa-fK-Ok-oRrXx]"


def translate_colors(text: str, color_char: str = DEFAULT_COLOR_CHAR) -> str:
    """Replace ``color_char`` + code pairs with canonical escapes.

    "&aHello &lworld" becomes "§aHello §lworld". A marker followed by an
    unknown character, or at the end of the text, is left untouched.

    Args:
        text: Message written with the alternate marker
        color_char: Marker character, "&" by default

    Returns:
        Legacy text using "§" escapes
    """
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == color_char and chars[i + 1] in ALL_CODES:
            chars[i] = SECTION_SIGN
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)


@lru_cache(maxsize=32)
def _strip_pattern(color_char: str) -> re.Pattern[str]:
    markers = re.escape(SECTION_SIGN + color_char)
    return re.compile(f"[{markers}]{_CODE_CLASS}")


def strip_colors(text: str, color_char: str = DEFAULT_COLOR_CHAR) -> str:
    """Remove every recognized code pair, in "§" or ``color_char`` form.

    Stripping the translated text gives the same result as stripping the
    source, so ``strip_colors(translate_colors(s)) == strip_colors(s)``.
    """
    return _strip_pattern(color_char).sub("", text)


def _read_hex_color(legacy: str, start: int) -> str | None:
    """Read the "§r§r§g§g§b§b" pairs that follow a "§x" at ``start``."""
    digits = []
    for offset in range(2, _HEX_SEQUENCE_LENGTH, 2):
        pos = start + offset
        if pos + 1 >= len(legacy) or legacy[pos] != SECTION_SIGN:
            return None
        digit = legacy[pos + 1]
        if digit not in HEX_DIGITS:
            return None
        digits.append(digit)
    return "#" + "".join(digits)


def _append(fragments: list[StyledFragment], text: str, style: TextStyle) -> None:
    """Append text, merging into the previous fragment when the style matches."""
    if not text:
        return
    if fragments and fragments[-1].style == style:
        last = fragments.pop()
        text = last.text + text
    fragments.append(StyledFragment(text=text, style=style))


def _apply_code(style: TextStyle, color: ChatColor) -> TextStyle:
    if color is ChatColor.RESET:
        return TextStyle()
    if color.is_format:
        return style.model_copy(update={color.format_field: True})
    # A color code clears any formatting set before it
    return TextStyle(color=color.color_name)


def from_legacy_text(legacy: str) -> list[StyledFragment]:
    """Expand "§" escaped text into an ordered fragment sequence.

    - A color code starts a new run in that color with formats cleared
    - A format code turns its flag on for the text that follows
    - A reset code returns to the default style
    - "§x" plus six "§<hex>" pairs selects a hex color; an incomplete
      sequence leaves the style unchanged
    - "§" before an unknown character, or at the end, is literal text

    Adjacent runs with the same style are merged and empty runs are
    dropped, so empty input gives an empty list.
    """
    fragments: list[StyledFragment] = []
    style = TextStyle()
    buffer: list[str] = []
    i = 0
    length = len(legacy)

    while i < length:
        char = legacy[i]
        if char != SECTION_SIGN or i + 1 >= length:
            buffer.append(char)
            i += 1
            continue

        code = legacy[i + 1]
        if code.lower() == HEX_CODE and code in ALL_CODES:
            _append(fragments, "".join(buffer), style)
            buffer = []
            hex_color = _read_hex_color(legacy, i)
            if hex_color is None:
                i += 2
            else:
                style = TextStyle(color=hex_color)
                i += _HEX_SEQUENCE_LENGTH
            continue

        color = ChatColor.from_code(code)
        if color is None:
            buffer.append(char)
            i += 1
            continue

        _append(fragments, "".join(buffer), style)
        buffer = []
        style = _apply_code(style, color)
        i += 2

    _append(fragments, "".join(buffer), style)
    return fragments


def translate_to_fragments(text: str, color_char: str = DEFAULT_COLOR_CHAR) -> list[StyledFragment]:
    """Translate alternate codes and expand the result into fragments."""
    return from_legacy_text(translate_colors(text, color_char))
