"""Delivery module for chatfmt.

Provides recipient interfaces and the fan-out helpers built on them.
"""

from .base import BroadcastSet, Recipient
from .console import ConsoleRecipient
from .factory import create_recipient
from .in_memory import InMemoryBroadcastSet, InMemoryRecipient
from .models import DeliveryFailure, DeliveryReport
from .sender import MessageSender

__all__ = [
    "BroadcastSet",
    "ConsoleRecipient",
    "DeliveryFailure",
    "DeliveryReport",
    "InMemoryBroadcastSet",
    "InMemoryRecipient",
    "MessageSender",
    "Recipient",
    "create_recipient",
]
