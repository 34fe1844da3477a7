"""Chat markup module for chatfmt.

Module structure (each module hides one design decision):
- colors.py: Code table (which codes exist and what they select)
- models.py: Fragment representation and component serialization
- translator.py: Alternate-code translation, fragment expansion, stripping
- composer.py: Locating the clickable region and reassembling the message
- rendering.py: Terminal and plain-text rendering
"""

from .colors import (
    DEFAULT_CLICK_DELIMITER,
    DEFAULT_COLOR_CHAR,
    SECTION_SIGN,
    ChatColor,
)
from .composer import ClickRegion, find_click_region, insert_command_in_message
from .models import (
    ClickAction,
    ClickActionKind,
    StyledFragment,
    TextStyle,
    fragments_to_components,
)
from .rendering import to_plain_text, to_rich_style, to_rich_text
from .translator import (
    from_legacy_text,
    strip_colors,
    translate_colors,
    translate_to_fragments,
)

__all__ = [
    "DEFAULT_CLICK_DELIMITER",
    "DEFAULT_COLOR_CHAR",
    "SECTION_SIGN",
    "ChatColor",
    "ClickAction",
    "ClickActionKind",
    "ClickRegion",
    "StyledFragment",
    "TextStyle",
    "find_click_region",
    "fragments_to_components",
    "from_legacy_text",
    "insert_command_in_message",
    "strip_colors",
    "to_plain_text",
    "to_rich_style",
    "to_rich_text",
    "translate_colors",
    "translate_to_fragments",
]
