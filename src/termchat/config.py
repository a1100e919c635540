from dataclasses import dataclass

# layout (cells)
STATUS_HEIGHT = 3  # one line of status text + top/bottom border
LOG_MIN_HEIGHT = 12  # at least 10 lines of chat + top/bottom border
INPUT_HEIGHT = 1  # one line, no border
MIN_WIDTH = 3  # a border on each side and one cell of content

# synthetic incoming messages
DEFAULT_MAX_DELAY = 4.0  # seconds
INCOMING_MESSAGE = "hello!"

# how long a bare ESC waits for the rest of an escape sequence (seconds)
DEFAULT_ESC_DELAY = 0.05


@dataclass
class ChatConfig:
    max_delay: float = DEFAULT_MAX_DELAY
    incoming: str = INCOMING_MESSAGE
    esc_delay: float = DEFAULT_ESC_DELAY
    tab_length: int = 0

    def __post_init__(self):
        if not self.max_delay > 0:
            raise ValueError(f"max_delay must be positive, got {self.max_delay}")
        if self.esc_delay < 0:
            raise ValueError(f"esc_delay can't be negative, got {self.esc_delay}")
        if self.tab_length < 0:
            raise ValueError(f"tab_length can't be negative, got {self.tab_length}")
