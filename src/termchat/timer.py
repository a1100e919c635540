import random
import time
from typing import Callable, Optional

Clock = Callable[[], float]


def random_delay(max_delay: float, rng: Optional[random.Random] = None) -> float:
    """Uniform in [0, max_delay)."""
    return max_delay * (rng or random).random()


class IncomingTimer:
    """
    Deadline for the next synthetic incoming message.

    There is only ever one deadline; `rearm` replaces it, so a deadline that
    has fired can't fire again.
    """
    def __init__(self, max_delay: float, clock: Clock = time.monotonic,
                 rng: Optional[random.Random] = None):
        self.max_delay = max_delay
        self.clock = clock
        self.rng = rng
        self.deadline = 0.0
        self.rearm()

    def rearm(self) -> float:
        self.deadline = self.clock() + random_delay(self.max_delay, self.rng)
        return self.deadline

    def remaining(self) -> float:
        return max(0.0, self.deadline - self.clock())

    def expired(self) -> bool:
        return self.clock() >= self.deadline
