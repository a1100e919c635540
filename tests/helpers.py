"""Fake terminal, clock and keystrokes for driving the chat loop without a tty."""
import contextlib
from collections import deque

from blessed.keyboard import Keystroke, get_keyboard_codes

KEYCODES = {name: code for code, name in get_keyboard_codes().items()}

# what a terminal actually sends for each key
SEQUENCES = {
    'KEY_ENTER': '\r',
    'KEY_ESCAPE': '\x1b',
    'KEY_TAB': '\t',
    'KEY_BACKSPACE': '\x7f',
    'KEY_DELETE': '\x1b[3~',
    'KEY_LEFT': '\x1b[D',
    'KEY_RIGHT': '\x1b[C',
    'KEY_UP': '\x1b[A',
    'KEY_DOWN': '\x1b[B',
    'KEY_HOME': '\x1b[H',
    'KEY_END': '\x1b[F',
    'KEY_CTRL_LEFT': '\x1b[1;5D',
    'KEY_CTRL_RIGHT': '\x1b[1;5C',
}


def press(name: str) -> Keystroke:
    return Keystroke(SEQUENCES[name], code=KEYCODES.get(name), name=name)


def typed(text: str) -> list:
    return [Keystroke(c) for c in text]


# ctrl-j: blessed decodes a bare line feed as KEY_ENTER as well
LINE_FEED = Keystroke('\n', code=KEYCODES['KEY_ENTER'], name='KEY_ENTER')
CTRL_W = Keystroke('\x17')


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float):
        self.now += dt


class FixedRandom:
    """rng whose random() always returns the same value."""
    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class FakeTerminal:
    """
    Stands in for blessed.Terminal.

    `script` holds what inkey() returns, in order. A `None` entry means
    nothing was typed, so the whole timeout passes on the clock.
    """
    def __init__(self, width=80, height=24, clock=None):
        self.width, self.height = width, height
        self.clock = clock or FakeClock()
        self.script = deque()
        self.timeouts = []
        self.modes = []

    def feed(self, *events):
        for ev in events:
            if isinstance(ev, list):
                self.script.extend(ev)
            else:
                self.script.append(ev)

    def inkey(self, timeout=None, esc_delay=0.35):
        self.timeouts.append(timeout)
        if not self.script:
            raise RuntimeError("keyboard script exhausted")
        ev = self.script.popleft()
        if ev is None:
            self.clock.advance(timeout)
            return Keystroke('')
        return ev

    def move_yx(self, y, x):
        return ''

    def _mode(self, name):
        @contextlib.contextmanager
        def cm():
            self.modes.append(f"enter {name}")
            try:
                yield
            finally:
                self.modes.append(f"exit {name}")
        return cm()

    def raw(self):
        return self._mode("raw")

    def fullscreen(self):
        return self._mode("fullscreen")

    def hidden_cursor(self):
        return self._mode("hidden_cursor")


class TtyStdin:
    def isatty(self):
        return True


def overlaps(a, b) -> bool:
    """Whether two (x, y, w, h) areas share a cell."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah
