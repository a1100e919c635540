import contextlib
import sys
from typing import Optional

from rich.console import Console

from .errors import SessionError
from .log import get_logger

logger = get_logger(__name__)


class TerminalSession:
    '''
    Raw input + alternate screen for the length of a chat session.

        with TerminalSession(term):
            loop.run()

    `exit` always runs, whatever way the block is left, and never raises.
    '''
    def __init__(self, term, stdin=None, console: Optional[Console] = None):
        self.term = term
        self.stdin = stdin or sys.stdin
        self.console = console or Console(stderr=True)
        self._modes: Optional[contextlib.ExitStack] = None

    @property
    def active(self) -> bool:
        return self._modes is not None

    def enter(self) -> None:
        if self._modes is not None:
            raise SessionError("terminal session already entered")
        if not self.stdin.isatty():
            raise SessionError("stdin is not a terminal")

        modes = contextlib.ExitStack()
        try:
            modes.enter_context(self.term.raw())
            modes.enter_context(self.term.fullscreen())
            # the input box draws its own cursor
            modes.enter_context(self.term.hidden_cursor())
        except Exception as exc:
            modes.close()
            raise SessionError(f"couldn't set up the terminal: {exc}") from exc
        self._modes = modes
        logger.info("entered raw mode and alternate screen")

    def exit(self) -> bool:
        modes, self._modes = self._modes, None
        if modes is None:
            return True
        try:
            modes.close()
        except Exception as exc:
            logger.exception("failed to restore the terminal")
            self.console.print(f"[red]Failed to restore the terminal: {exc}[/red]")
            return False
        logger.info("terminal restored")
        return True

    def __enter__(self) -> 'TerminalSession':
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.exit()
