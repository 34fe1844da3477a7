"""Main CLI application using Typer."""
import json
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..config import MessagingConfig, load_config
from ..delivery import ConsoleRecipient, MessageSender
from ..errors import ConfigError
from ..markup import (
    fragments_to_components,
    insert_command_in_message,
    strip_colors,
)

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="chatfmt",
    help="Preview legacy color-coded chat messages and their clickable segments",
    no_args_is_help=True,
    add_completion=False,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs"
    )
):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _config() -> MessagingConfig:
    try:
        return load_config()
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command()
def preview(
    message: str = typer.Argument(..., help="Message with &-codes and an optional @clickable@ region"),
    command: str | None = typer.Option(
        None,
        "--command",
        "-c",
        help="Command bound to the @clickable@ region"
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Do not translate &-codes"
    )
):
    """Render a message in the terminal."""
    if raw and command is not None:
        raise typer.BadParameter("--raw cannot be used with --command")
    config = _config()
    sender = MessageSender(config=config)
    recipient = ConsoleRecipient(console)

    if command is not None:
        report = sender.send_command_message(recipient, message, command)
    else:
        report = sender.send_message(recipient, message, use_colors=not raw)

    if not report.ok:
        for failure in report.failures:
            console.print(f"[red]Error: {escape(failure.error)}[/red]")
        raise typer.Exit(code=1)

    if command is not None:
        console.print(f"[dim]click runs: {escape(command)}[/dim]", highlight=False)


@app.command()
def strip(
    message: str = typer.Argument(..., help="Message to strip")
):
    """Print a message without its color codes."""
    config = _config()
    console.print(strip_colors(message, config.color_char), markup=False, highlight=False, soft_wrap=True)


@app.command()
def components(
    message: str = typer.Argument(..., help="Message to convert"),
    command: str | None = typer.Option(
        None,
        "--command",
        "-c",
        help="Command bound to the @clickable@ region"
    )
):
    """Print the chat components of a message as JSON."""
    config = _config()
    if command is None:
        fragments = MessageSender(config=config).format_message(message)
    else:
        fragments = insert_command_in_message(
            message,
            command,
            color_char=config.color_char,
            delimiter=config.click_delimiter,
        )
    typer.echo(json.dumps(fragments_to_components(fragments), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
