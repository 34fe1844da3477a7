"""In-memory delivery endpoints.

Record what they receive instead of sending it anywhere.
Suitable for testing and for capturing output.
"""

import logging
from collections.abc import Sequence

from ..errors import BroadcastDeliveryError
from ..markup.models import StyledFragment
from ..markup.rendering import to_plain_text
from .base import BroadcastSet, Recipient

logger = logging.getLogger(__name__)


class InMemoryRecipient(Recipient):
    """Recipient that keeps every message it is shown."""

    def __init__(self, name: str = "memory"):
        self._name = name
        self.received: list[list[StyledFragment]] = []

    @property
    def name(self) -> str:
        return self._name

    def display(self, fragments: Sequence[StyledFragment]) -> None:
        """Record the message."""
        self.received.append(list(fragments))

    @property
    def messages(self) -> list[str]:
        """Plain text of each received message, oldest first."""
        return [to_plain_text(fragments) for fragments in self.received]

    def clear(self) -> None:
        self.received.clear()

    def __repr__(self) -> str:
        return f"InMemoryRecipient(name={self._name!r}, received={len(self.received)})"


class InMemoryBroadcastSet(BroadcastSet):
    """Broadcaster over a fixed list of recipients.

    Every broadcast is recorded and forwarded to each recipient in order.
    A recipient that raises does not stop the ones after it.
    """

    def __init__(self, recipients: Sequence[Recipient] | None = None):
        self._recipients = list(recipients or [])
        self.broadcasts: list[list[StyledFragment]] = []

    @property
    def recipients(self) -> list[Recipient]:
        return list(self._recipients)

    def broadcast(self, fragments: Sequence[StyledFragment]) -> None:
        """Record the message and show it to every recipient.

        Raises:
            BroadcastDeliveryError: After the loop, if any recipient raised
        """
        message = list(fragments)
        self.broadcasts.append(message)
        failures: list[tuple[str, Exception]] = []
        for recipient in self._recipients:
            try:
                recipient.display(message)
            except Exception as e:
                logger.exception("Broadcast to %s failed", recipient.name)
                failures.append((recipient.name, e))
        if failures:
            raise BroadcastDeliveryError(failures)
