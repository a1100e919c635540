"""Terminal chat harness: a status line, a message log and an input box."""

from .config import ChatConfig
from .errors import LayoutError, SessionError, TermchatError
from .loop import EventLoop, run
from .session import TerminalSession
from .state import ChatState
from .textarea import InputWidget, TextArea, make_input

__version__ = "0.1.0"

__all__ = [
    "ChatConfig",
    "ChatState",
    "EventLoop",
    "InputWidget",
    "LayoutError",
    "SessionError",
    "TermchatError",
    "TerminalSession",
    "TextArea",
    "make_input",
    "run",
]
