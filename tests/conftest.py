"""Pytest configuration and shared fixtures."""
import pytest

from chatfmt.config import MessagingConfig
from chatfmt.delivery import (
    InMemoryBroadcastSet,
    InMemoryRecipient,
    MessageSender,
    Recipient,
)


class FailingRecipient(Recipient):
    """Recipient whose display always raises."""

    def __init__(self, name: str = "broken"):
        self._name = name
        self.attempts = 0

    @property
    def name(self) -> str:
        return self._name

    def display(self, fragments):
        self.attempts += 1
        raise ConnectionError("connection reset")


@pytest.fixture
def config():
    """Return the default messaging config."""
    return MessagingConfig()


@pytest.fixture
def recipients():
    """Return three in-memory recipients."""
    return [InMemoryRecipient(name) for name in ("alice", "bob", "carol")]


@pytest.fixture
def failing_recipient():
    return FailingRecipient()


@pytest.fixture
def broadcaster(recipients):
    """Return a broadcaster over the shared recipients."""
    return InMemoryBroadcastSet(recipients)


@pytest.fixture
def sender(broadcaster, config):
    """Return a sender wired to the in-memory broadcaster."""
    return MessageSender(broadcaster=broadcaster, config=config)
