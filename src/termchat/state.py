from dataclasses import dataclass, field
from typing import List

from .textarea import InputWidget, make_input


def format_status(sent: int, received: int) -> str:
    return f"Messages sent: {sent:4}  Messages received: {received:4}"


@dataclass
class ChatState:
    status: str = ""
    messages: List[str] = field(default_factory=list)
    input: InputWidget = field(default_factory=make_input)
    sent: int = 0
    received: int = 0

    def refresh_status(self) -> str:
        self.status = format_status(self.sent, self.received)
        return self.status

    def submit(self) -> str:
        """Move the input box contents into the log and start a fresh input box."""
        msg = "\n".join(self.input.current_lines())
        self.messages.append(msg)
        self.input = self.input.reset()
        self.sent += 1
        return msg

    def receive(self, msg: str) -> None:
        self.messages.append(msg)
        self.received += 1
