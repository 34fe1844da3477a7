"""Terminal recipient backed by a Rich console."""

from collections.abc import Sequence

from rich.console import Console

from ..markup.models import StyledFragment
from ..markup.rendering import to_rich_text
from .base import Recipient


class ConsoleRecipient(Recipient):
    """Prints each message as one line of styled terminal text."""

    def __init__(self, console: Console | None = None, name: str = "console"):
        self._console = console or Console()
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def console(self) -> Console:
        return self._console

    def display(self, fragments: Sequence[StyledFragment]) -> None:
        self._console.print(to_rich_text(fragments))
