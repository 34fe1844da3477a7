"""Factory for creating recipients."""

from typing import Any

from ..errors import UnknownRecipientBackendError
from .base import Recipient

SUPPORTED_BACKENDS = ("memory", "console")


def create_recipient(
    backend: str = "memory",
    **kwargs: Any
) -> Recipient:
    """Create a recipient.

    Args:
        backend: Backend type ("memory" or "console")
        **kwargs: Backend-specific configuration
            - name: str, identifier used in delivery reports
            - console: rich Console ("console" backend only)

    Returns:
        Recipient instance

    Raises:
        UnknownRecipientBackendError: If backend type is not supported
    """
    if backend == "memory":
        from .in_memory import InMemoryRecipient
        return InMemoryRecipient(**kwargs)

    elif backend == "console":
        from .console import ConsoleRecipient
        return ConsoleRecipient(**kwargs)

    raise UnknownRecipientBackendError(backend, SUPPORTED_BACKENDS)
