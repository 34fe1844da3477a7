"""
chatfmt: legacy color-code chat formatting with clickable command segments.

Each module hides a specific design decision: the markup package hides the
code table and parsing, the delivery package hides how formatted messages
reach recipients.
"""

__version__ = "0.1.0"

from .config import MessagingConfig, load_config
from .delivery import (
    BroadcastSet,
    DeliveryReport,
    InMemoryBroadcastSet,
    InMemoryRecipient,
    MessageSender,
    Recipient,
    create_recipient,
)
from .errors import (
    BroadcastDeliveryError,
    BroadcasterNotConfiguredError,
    ChatFormatError,
    ConfigError,
    UnknownRecipientBackendError,
)
from .markup import (
    ChatColor,
    ClickAction,
    ClickActionKind,
    StyledFragment,
    TextStyle,
    from_legacy_text,
    insert_command_in_message,
    strip_colors,
    translate_colors,
    translate_to_fragments,
)

__all__ = [
    "BroadcastDeliveryError",
    "BroadcastSet",
    "BroadcasterNotConfiguredError",
    "ChatColor",
    "ChatFormatError",
    "ClickAction",
    "ClickActionKind",
    "ConfigError",
    "DeliveryReport",
    "InMemoryBroadcastSet",
    "InMemoryRecipient",
    "MessageSender",
    "MessagingConfig",
    "Recipient",
    "StyledFragment",
    "TextStyle",
    "UnknownRecipientBackendError",
    "create_recipient",
    "from_legacy_text",
    "insert_command_in_message",
    "load_config",
    "strip_colors",
    "translate_colors",
    "translate_to_fragments",
]
