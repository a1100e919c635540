"""Command line entry point."""
from typing import Optional

import typer
from rich.console import Console

from .config import DEFAULT_ESC_DELAY, DEFAULT_MAX_DELAY, INCOMING_MESSAGE, ChatConfig
from .errors import SessionError
from .log import LOG_LEVELS, get_logger, setup_logging
from .loop import run

app = typer.Typer(
    name="termchat",
    help="Three-pane terminal chat harness: type messages, receive fake ones.",
    add_completion=False,
)

# stderr, so nothing lands on the alternate screen
console = Console(stderr=True)
logger = get_logger(__name__)


@app.command()
def main(
    max_delay: float = typer.Option(
        DEFAULT_MAX_DELAY, "--max-delay", help="Upper bound (seconds) of the random wait between incoming messages"
    ),
    incoming: str = typer.Option(INCOMING_MESSAGE, "--incoming", help="Text of each incoming message"),
    esc_delay: float = typer.Option(
        DEFAULT_ESC_DELAY, "--esc-delay", help="Seconds to wait before treating ESC as a key of its own"
    ),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to this file"),
    log_level: str = typer.Option("INFO", "--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"),
):
    """Start a chat session. Enter sends, Ctrl-J starts a new line, Esc quits."""
    try:
        config = ChatConfig(max_delay=max_delay, incoming=incoming, esc_delay=esc_delay)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"unknown log level {log_level!r}, expected one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )

    setup_logging(log_level, log_file)
    try:
        state = run(config)
    except SessionError as e:
        logger.error("terminal setup failed: %s", e)
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    except OSError as e:
        logger.exception("I/O error during the session")
        console.print(f"[red]I/O error: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[dim]sent {state.sent}, received {state.received}[/dim]")
