from dataclasses import dataclass
from typing import Union, List, Optional


@dataclass(frozen=True)
class Length:
    """Exactly `size` cells."""
    size: int


@dataclass(frozen=True)
class Min:
    """At least `size` cells; takes whatever height is left over."""
    size: int


Constraint = Union[Length, Min]


class Region(tuple):
    """
    A (x,y,w,h) area on the screen.
    Used for laying out ui.
    """
    def __new__(cls, x: int = 0, y: int = 0, w: int = 0, h: int = 0):
        return super().__new__(cls, (int(x), int(y), max(0, int(w)), max(0, int(h))))

    def __repr__(self):
        return f"Region{super().__repr__()}"

    @property
    def bottom(self) -> int:
        return self[1] + self[3]

    def split_vertical(self, *constraints: Constraint) -> List['Region']:
        '''
        Stack regions top to bottom.

        `Length` regions get exactly their size, the first `Min` region absorbs
        the spare height. When the minimums don't fit, only the leading
        regions that do fit are returned, so callers can compare the length
        of the result against the number of constraints.
        '''
        need = sum(c.size for c in constraints)
        spare = self[3] - need
        regions = []
        accum_y = self[1]
        for c in constraints:
            h = c.size
            if spare > 0 and isinstance(c, Min):
                h += spare
                spare = 0
            if accum_y + h > self.bottom:
                break
            regions.append(Region(self[0], accum_y, self[2], h))
            accum_y += h
        return regions

    def shrink(self, left: int, top: Optional[int] = None, right: Optional[int] = None, bottom: Optional[int] = None) -> 'Region':
        top = top if top is not None else left
        right = right if right is not None else left
        bottom = bottom if bottom is not None else top
        return Region(
            self[0] + left,
            self[1] + top,
            self[2] - left - right,
            self[3] - top - bottom
        )
