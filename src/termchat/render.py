from typing import List, Tuple

from .config import INPUT_HEIGHT, LOG_MIN_HEIGHT, MIN_WIDTH, STATUS_HEIGHT
from .errors import LayoutError
from .region import Length, Min, Region
from .screen import ScreenBuffer
from .state import ChatState

UI_CONSTRAINTS = (
    Length(STATUS_HEIGHT),  # status area: 1 line (+ border top/bottom)
    Min(LOG_MIN_HEIGHT),  # chat area: at least 10 lines (+ border top/bottom)
    Length(INPUT_HEIGHT),  # input area: just one line
)


def layout(area: Region) -> List[Region]:
    if area[2] < MIN_WIDTH:
        return []
    return area.split_vertical(*UI_CONSTRAINTS)


def split_sections(area: Region) -> Tuple[Region, Region, Region]:
    sections = layout(area)
    if len(sections) != len(UI_CONSTRAINTS):
        raise LayoutError(len(sections), len(UI_CONSTRAINTS))
    status_r, chat_r, input_r = sections
    return status_r, chat_r, input_r


def panel(buf: ScreenBuffer, r: Region, title: str, text: str):
    buf.rect_line(r)
    buf.title(r, title, 'bold')
    # clipped, not wrapped: overflow falls off the right and bottom edges
    buf.text_contained(text, r.shrink(1), wrap=False)


def render(state: ChatState, buf: ScreenBuffer) -> bool:
    '''
    Draw one frame of `state` into `buf`.
    Only reads `state`. Returns False when the diagnostic panel was drawn instead.
    '''
    buf.clear()
    try:
        status_r, chat_r, input_r = split_sections(Region(0, 0, buf.w, buf.h))
    except LayoutError as err:
        render_err(buf, str(err))
        return False

    panel(buf, status_r, "status", state.status)
    panel(buf, chat_r, "chat", "\n".join(state.messages))
    state.input.draw(buf, input_r)
    return True


def render_err(buf: ScreenBuffer, msg: str):
    r = Region(0, 0, buf.w, buf.h)
    buf.puts(0, 0, "UI Error"[:buf.w], 'bold')
    buf.text_contained(msg, r.shrink(0, 1, 0, 0))
