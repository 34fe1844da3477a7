"""Abstract delivery endpoints.

This module defines the interfaces the fan-out helpers deliver to.
The abstraction hides:
- Transport (chat connection, terminal, in-memory buffer)
- Who is currently connected
- How a client renders the fragments
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..markup.models import StyledFragment


class Recipient(ABC):
    """A single endpoint that can display formatted messages."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier used in logs and delivery reports."""

    @abstractmethod
    def display(self, fragments: Sequence[StyledFragment]) -> None:
        """Display one message, given as an ordered fragment sequence."""


class BroadcastSet(ABC):
    """Every currently connected recipient, reached through one call."""

    @abstractmethod
    def broadcast(self, fragments: Sequence[StyledFragment]) -> None:
        """Deliver one message to every connected recipient."""
