"""Exceptions raised by chatfmt.

Formatting itself never raises; these cover configuration and delivery
wiring mistakes.
"""


class ChatFormatError(Exception):
    """Base class for chatfmt errors."""


class ConfigError(ChatFormatError):
    """Invalid messaging configuration."""

    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}")


class BroadcasterNotConfiguredError(ChatFormatError):
    """A broadcast was requested but no broadcaster was injected."""

    def __init__(self):
        super().__init__("No broadcaster configured; pass one to MessageSender")


class UnknownRecipientBackendError(ChatFormatError, ValueError):
    """Recipient factory was asked for a backend it does not know."""

    def __init__(self, backend: str, supported: tuple[str, ...]):
        super().__init__(
            f"Unsupported recipient backend: {backend}. "
            f"Supported backends: {', '.join(supported)}"
        )
        self.backend = backend


class BroadcastDeliveryError(ChatFormatError):
    """Some recipients of a broadcast raised; the rest were still reached."""

    def __init__(self, failures: list[tuple[str, Exception]]):
        names = ", ".join(name for name, _ in failures)
        super().__init__(f"Broadcast failed for {len(failures)} recipient(s): {names}")
        self.failures = failures
