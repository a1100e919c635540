"""Main loop: keyboard and the incoming-message timer, raced against each other."""

import random
import time
from typing import Optional

from blessed import Terminal
from blessed.keyboard import Keystroke

from .config import ChatConfig
from .log import get_logger
from .render import render
from .screen import ScreenBuffer
from .session import TerminalSession
from .state import ChatState
from .textarea import make_input
from .timer import Clock, IncomingTimer

logger = get_logger(__name__)

TIMER = object()  # stands in for "the deadline passed"


def is_key_press(key: Keystroke) -> bool:
    if not key:
        return False
    name = key.name or ""
    # mouse, focus, paste and resize reports arrive through inkey() too
    return not name.startswith(("MOUSE_", "FOCUS_", "BRACKETED_PASTE", "RESIZE_EVENT", "CPR_"))


def is_quit(key: Keystroke) -> bool:
    return key.name == 'KEY_ESCAPE'


def is_submit(key: Keystroke) -> bool:
    # a bare line feed (ctrl-j) also decodes as KEY_ENTER; that one inserts a newline
    return key.name == 'KEY_ENTER' and str(key) != '\n'


class EventLoop:
    def __init__(self, term, config: Optional[ChatConfig] = None,
                 clock: Clock = time.monotonic, rng: Optional[random.Random] = None):
        self.term = term
        self.config = config or ChatConfig()
        self.clock = clock
        self.rng = rng or random
        self.pending: Optional[Keystroke] = None
        self.state = ChatState(input=make_input(self.config))
        self.timer = IncomingTimer(self.config.max_delay, clock, rng)
        self.buf = ScreenBuffer(term.width, term.height)

    def draw(self):
        if self.buf.w != self.term.width or self.buf.h != self.term.height:
            self.buf = ScreenBuffer(self.term.width, self.term.height)
        if not render(self.state, self.buf):
            logger.debug("terminal too small (%dx%d), drew diagnostic panel", self.buf.w, self.buf.h)
        self.buf.flush(self.term)

    def wait(self):
        '''
        Block until a key arrives or the timer is due, whichever comes first.

        When the timer is already overdue the keyboard is still polled. If a
        key is waiting too, a coin flip picks the winner; a losing key is held
        back and returned by the next call, ahead of anything else.
        '''
        if self.pending is not None:
            key, self.pending = self.pending, None
            return key
        if self.timer.expired():
            key = self.term.inkey(timeout=0, esc_delay=self.config.esc_delay)
            if not key:
                return TIMER
            if self.rng.random() < 0.5:
                self.pending = key
                return TIMER
            return key
        key = self.term.inkey(timeout=self.timer.remaining(), esc_delay=self.config.esc_delay)
        if key:
            return key
        return TIMER if self.timer.expired() else None

    def handle_key(self, key: Keystroke) -> bool:
        """Apply one key. Returns False when the loop should stop."""
        if not is_key_press(key):
            return True
        if is_quit(key):
            logger.info("quit key pressed")
            return False
        if is_submit(key):
            msg = self.state.submit()
            logger.debug("sent message #%d (%d chars)", self.state.sent, len(msg))
            return True
        self.state.input.apply(key)
        return True

    def handle_timer(self):
        self.state.receive(self.config.incoming)
        deadline = self.timer.rearm()
        logger.debug("received message #%d, next in %.2fs", self.state.received, deadline - self.clock())

    def step(self) -> bool:
        self.state.refresh_status()
        self.draw()

        event = self.wait()
        if event is TIMER:
            self.handle_timer()
            return True
        if event is None:
            return True
        return self.handle_key(event)

    def run(self) -> ChatState:
        logger.info("chat loop started (%dx%d)", self.term.width, self.term.height)
        while self.step():
            pass
        logger.info("chat loop finished: sent=%d received=%d", self.state.sent, self.state.received)
        return self.state


def run(config: Optional[ChatConfig] = None, term=None) -> ChatState:
    term = term or Terminal()
    with TerminalSession(term):
        return EventLoop(term, config).run()
