"""Multi-line text input.

The event loop and renderer only rely on the `InputWidget` protocol;
`TextArea` is the implementation the app ships with.
"""

from typing import List, Optional, Protocol, Tuple

from blessed.keyboard import Keystroke

from .config import ChatConfig
from .screen import Rect, ScreenBuffer


class InputWidget(Protocol):
    def apply(self, key: Keystroke) -> None: ...
    def current_lines(self) -> List[str]: ...
    def reset(self) -> 'InputWidget': ...
    def draw(self, buf: ScreenBuffer, r: Rect) -> None: ...


# raw sequences that blessed doesn't name the way we want
KEY_ALIASES = {'\x17': 'KEY_CTRL_BACKSPACE', '\x1bd': 'KEY_CTRL_DELETE'}


def key_name(key: Keystroke):
    return KEY_ALIASES.get(str(key), key.name)


def prev_word(text, i):
    while i > 0 and not text[i-1].isalnum(): i -= 1
    while i > 0 and text[i-1].isalnum(): i -= 1
    return i


def next_word(text, i):
    while i < len(text) and text[i].isalnum(): i += 1
    while i < len(text) and not text[i].isalnum(): i += 1
    return i


class TextArea:
    def __init__(self, tab_length: int = 0, cursor_line_style=None):
        self.tab_length = tab_length
        self.cursor_line_style = cursor_line_style
        self.lines: List[str] = [""]
        self.row, self.col = 0, 0

    @property
    def cursor(self) -> Tuple[int, int]:
        return self.row, self.col

    def is_empty(self) -> bool:
        return self.lines == [""]

    def current_lines(self) -> List[str]:
        return list(self.lines)

    def reset(self) -> 'TextArea':
        return TextArea(self.tab_length, self.cursor_line_style)

    def apply(self, key: Keystroke) -> None:
        name = key_name(key)
        if name is None and not key.is_sequence and str(key).isprintable():
            self._insert(str(key))
            return

        handler = self._KEYMAP.get(name)
        if handler is not None:
            handler(self)

    # --- editing ---

    def _insert(self, text: str):
        line = self.lines[self.row]
        self.lines[self.row] = line[:self.col] + text + line[self.col:]
        self.col += len(text)

    def _tab(self):
        if self.tab_length:
            self._insert(' ' * self.tab_length)

    def _newline(self):
        line = self.lines[self.row]
        self.lines[self.row] = line[:self.col]
        self.lines.insert(self.row + 1, line[self.col:])
        self.row, self.col = self.row + 1, 0

    def _backspace(self):
        line = self.lines[self.row]
        if self.col > 0:
            self.lines[self.row] = line[:self.col-1] + line[self.col:]
            self.col -= 1
        elif self.row > 0:
            prev = self.lines.pop(self.row - 1)
            self.row -= 1
            self.lines[self.row] = prev + line
            self.col = len(prev)

    def _delete(self):
        line = self.lines[self.row]
        if self.col < len(line):
            self.lines[self.row] = line[:self.col] + line[self.col+1:]
        elif self.row < len(self.lines) - 1:
            self.lines[self.row] = line + self.lines.pop(self.row + 1)

    def _delete_word_back(self):
        if self.col == 0:
            self._backspace()
            return
        line = self.lines[self.row]
        new_col = prev_word(line, self.col)
        self.lines[self.row] = line[:new_col] + line[self.col:]
        self.col = new_col

    def _delete_word_forward(self):
        line = self.lines[self.row]
        if self.col == len(line):
            self._delete()
            return
        self.lines[self.row] = line[:self.col] + line[next_word(line, self.col):]

    # --- navigation ---

    def _left(self):
        if self.col > 0:
            self.col -= 1
        elif self.row > 0:
            self.row -= 1
            self.col = len(self.lines[self.row])

    def _right(self):
        if self.col < len(self.lines[self.row]):
            self.col += 1
        elif self.row < len(self.lines) - 1:
            self.row, self.col = self.row + 1, 0

    def _up(self):
        if self.row > 0:
            self.row -= 1
            self.col = min(self.col, len(self.lines[self.row]))

    def _down(self):
        if self.row < len(self.lines) - 1:
            self.row += 1
            self.col = min(self.col, len(self.lines[self.row]))

    def _home(self):
        self.col = 0

    def _end(self):
        self.col = len(self.lines[self.row])

    def _word_left(self):
        self.col = prev_word(self.lines[self.row], self.col)

    def _word_right(self):
        self.col = next_word(self.lines[self.row], self.col)

    _KEYMAP = {
        'KEY_ENTER': _newline,
        'KEY_TAB': _tab,
        'KEY_BACKSPACE': _backspace,
        'KEY_DELETE': _delete,
        'KEY_CTRL_BACKSPACE': _delete_word_back,
        'KEY_CTRL_DELETE': _delete_word_forward,
        'KEY_LEFT': _left,
        'KEY_RIGHT': _right,
        'KEY_UP': _up,
        'KEY_DOWN': _down,
        'KEY_HOME': _home,
        'KEY_END': _end,
        'KEY_CTRL_LEFT': _word_left,
        'KEY_CTRL_RIGHT': _word_right,
    }

    def draw(self, buf: ScreenBuffer, r: Rect) -> None:
        x, y, w, h = r
        if w <= 0 or h <= 0: return
        # scroll so the cursor cell stays inside the region
        top = max(0, self.row - h + 1)
        left = max(0, self.col - w + 1)
        for i, line in enumerate(self.lines[top:top + h]):
            style = self.cursor_line_style if top + i == self.row else None
            buf.puts(x, y + i, line[left:left + w], style)
        under = self.lines[self.row][self.col:self.col + 1] or ' '
        buf.put(x + self.col - left, y + self.row - top, under, 'reverse')


def make_input(config: Optional[ChatConfig] = None) -> TextArea:
    config = config or ChatConfig()
    return TextArea(tab_length=config.tab_length)
