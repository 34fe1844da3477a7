"""Legacy color and format codes.

Hides the code table: which characters are recognized after a marker,
what color or format each one selects, and the RGB value used when a
named color has to be rendered outside a chat client.
"""

from enum import Enum

# Canonical escape character of legacy text
SECTION_SIGN = "§"

# Marker used in hand-written messages ("&aHello")
DEFAULT_COLOR_CHAR = "&"

# Marker pair that bounds the clickable region ("Click @here@")
DEFAULT_CLICK_DELIMITER = "@"

# Every character accepted after a marker, both cases
ALL_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"

# Code that introduces a "§x§r§r§g§g§b§b" hex color sequence
HEX_CODE = "x"

HEX_DIGITS = "0123456789abcdefABCDEF"


class ChatColor(str, Enum):
    """A single legacy code, keyed by its code character."""

    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"

    OBFUSCATED = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def code(self) -> str:
        """The code character ("a" for GREEN)."""
        return self.value

    @property
    def color_name(self) -> str:
        """Lowercase name used in chat components ("dark_blue")."""
        return self.name.lower()

    @property
    def is_color(self) -> bool:
        return self in _RGB

    @property
    def is_format(self) -> bool:
        return self in _FORMAT_FIELDS

    @property
    def rgb(self) -> str | None:
        """Hex RGB value for colors, None for formats and reset."""
        return _RGB.get(self)

    @property
    def format_field(self) -> str | None:
        """Name of the TextStyle flag toggled by a format code."""
        return _FORMAT_FIELDS.get(self)

    def __str__(self) -> str:
        return SECTION_SIGN + self.value

    @classmethod
    def from_code(cls, char: str) -> "ChatColor | None":
        """Look up a code character, ignoring case. Returns None if unknown."""
        if len(char) != 1 or char not in ALL_CODES or char in "xX":
            return None
        return cls(char.lower())

    @classmethod
    def from_name(cls, name: str) -> "ChatColor | None":
        """Look up a color by its component name ("gold")."""
        return _BY_NAME.get(name.lower())


_RGB = {
    ChatColor.BLACK: "#000000",
    ChatColor.DARK_BLUE: "#0000AA",
    ChatColor.DARK_GREEN: "#00AA00",
    ChatColor.DARK_AQUA: "#00AAAA",
    ChatColor.DARK_RED: "#AA0000",
    ChatColor.DARK_PURPLE: "#AA00AA",
    ChatColor.GOLD: "#FFAA00",
    ChatColor.GRAY: "#AAAAAA",
    ChatColor.DARK_GRAY: "#555555",
    ChatColor.BLUE: "#5555FF",
    ChatColor.GREEN: "#55FF55",
    ChatColor.AQUA: "#55FFFF",
    ChatColor.RED: "#FF5555",
    ChatColor.LIGHT_PURPLE: "#FF55FF",
    ChatColor.YELLOW: "#FFFF55",
    ChatColor.WHITE: "#FFFFFF",
}

_FORMAT_FIELDS = {
    ChatColor.OBFUSCATED: "obfuscated",
    ChatColor.BOLD: "bold",
    ChatColor.STRIKETHROUGH: "strikethrough",
    ChatColor.UNDERLINE: "underlined",
    ChatColor.ITALIC: "italic",
}

_BY_NAME = {color.color_name: color for color in _RGB}


def is_hex_color(value: str) -> bool:
    """Check for a "#rrggbb" color string."""
    return (
        len(value) == 7
        and value.startswith("#")
        and all(c in HEX_DIGITS for c in value[1:])
    )
