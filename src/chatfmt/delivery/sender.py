"""Fan-out message delivery.

Formats messages once and hands the fragments to one recipient, a list of
recipients, or an injected broadcaster. Deliveries are sequential and
independent: a recipient that raises is logged and reported, and the
remaining recipients still receive the message.
"""

import logging
from collections.abc import Iterable, Sequence

from ..config import MessagingConfig
from ..errors import BroadcastDeliveryError, BroadcasterNotConfiguredError
from ..markup.composer import insert_command_in_message
from ..markup.models import StyledFragment
from ..markup.translator import from_legacy_text, translate_to_fragments
from .base import BroadcastSet, Recipient
from .models import DeliveryReport

logger = logging.getLogger(__name__)

# Recipient name recorded when a broadcast fails as a whole
BROADCAST_TARGET = "*"


def _as_batch(messages: str | Iterable[str]) -> list[str]:
    if isinstance(messages, str):
        return [messages]
    return list(messages)


class MessageSender:
    """Formats messages and delivers them to recipients.

    Hidden design decisions:
    - Markup is translated once per message, not once per recipient
    - A failing delivery never aborts the rest of a fan-out
    - The broadcaster is injected rather than looked up globally
    """

    def __init__(
        self,
        broadcaster: BroadcastSet | None = None,
        config: MessagingConfig | None = None
    ):
        """Initialize the sender.

        Args:
            broadcaster: Target for broadcast(); optional if never broadcasting
            config: Markers and defaults; MessagingConfig() if omitted
        """
        self._broadcaster = broadcaster
        self._config = config or MessagingConfig()

    @property
    def config(self) -> MessagingConfig:
        return self._config

    def format_message(self, message: str, use_colors: bool | None = None) -> list[StyledFragment]:
        """Format a message the way the send methods do.

        With colors disabled the alternate codes stay literal and only
        canonical "§" escapes take effect.
        """
        if use_colors is None:
            use_colors = self._config.use_colors_by_default
        if use_colors:
            return translate_to_fragments(message, self._config.color_char)
        return from_legacy_text(message)

    def send_message(
        self,
        recipient: Recipient,
        message: str,
        use_colors: bool | None = None
    ) -> DeliveryReport:
        """Send one message to one recipient."""
        return self.send_to_recipients([recipient], message, use_colors)

    def send_messages(
        self,
        recipient: Recipient,
        messages: Iterable[str],
        use_colors: bool | None = None
    ) -> DeliveryReport:
        """Send a batch of messages to one recipient, in order."""
        return self.send_to_recipients([recipient], messages, use_colors)

    def send_to_recipients(
        self,
        recipients: Iterable[Recipient],
        messages: str | Iterable[str],
        use_colors: bool | None = None
    ) -> DeliveryReport:
        """Send one message or a batch to every recipient in a list.

        Each message is delivered to every recipient before the next
        message is formatted.
        """
        targets = list(recipients)
        report = DeliveryReport()
        for message in _as_batch(messages):
            fragments = self.format_message(message, use_colors)
            for recipient in targets:
                self._deliver(recipient, message, fragments, report)
        return report

    def broadcast(
        self,
        messages: str | Iterable[str],
        use_colors: bool | None = None
    ) -> DeliveryReport:
        """Broadcast one message or a batch to every connected recipient.

        Raises:
            BroadcasterNotConfiguredError: If no broadcaster was injected
        """
        if self._broadcaster is None:
            raise BroadcasterNotConfiguredError()

        report = DeliveryReport()
        for message in _as_batch(messages):
            fragments = self.format_message(message, use_colors)
            try:
                self._broadcaster.broadcast(fragments)
            except BroadcastDeliveryError as e:
                logger.warning("%s (message %r)", e, message)
                for name, error in e.failures:
                    report.record_failure(name, message, error)
            except Exception as e:
                logger.exception("Broadcast failed for message %r", message)
                report.record_failure(BROADCAST_TARGET, message, e)
            else:
                report.record_success()
        return report

    def send_command_message(
        self,
        recipient: Recipient,
        message: str,
        command: str
    ) -> DeliveryReport:
        """Send a message whose "@text@" region runs ``command`` when clicked."""
        fragments = insert_command_in_message(
            message,
            command,
            color_char=self._config.color_char,
            delimiter=self._config.click_delimiter,
        )
        report = DeliveryReport()
        self._deliver(recipient, message, fragments, report)
        return report

    def _deliver(
        self,
        recipient: Recipient,
        message: str,
        fragments: Sequence[StyledFragment],
        report: DeliveryReport
    ) -> None:
        try:
            recipient.display(fragments)
        except Exception as e:
            logger.exception("Delivery to %s failed", recipient.name)
            report.record_failure(recipient.name, message, e)
        else:
            report.record_success()
