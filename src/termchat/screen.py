from typing import List, Optional, Tuple

Rect = Tuple[int, int, int, int]  # (x, y, w, h)


class ScreenBuffer:
    """
    Off-screen grid of cells. Frames are drawn here, then written to the
    terminal in one go with `flush`.
    """
    def __init__(self, w, h):
        self.w, self.h = w, h
        self.chars = [[' '] * w for _ in range(h)]
        self.styles: List[List[Optional[str]]] = [[None] * w for _ in range(h)]

    def put(self, x, y, char, style=None):
        if 0 <= x < self.w and 0 <= y < self.h:
            self.chars[y][x] = char
            self.styles[y][x] = style

    def puts(self, x, y, text, style=None):
        for i, c in enumerate(text):
            self.put(x + i, y, c, style)

    def clear(self):
        for row in self.chars: row[:] = [' '] * self.w
        for row in self.styles: row[:] = [None] * self.w

    def lines(self) -> List[str]:
        return [''.join(row) for row in self.chars]

    def flush(self, term):
        out = []
        for y in range(self.h):
            out.append(term.move_yx(y, 0))
            for x in range(self.w):
                c, s = self.chars[y][x], self.styles[y][x]
                styled = getattr(term, s, None) if s else None
                out.append(styled(c) if styled else c)
        print(''.join(out), end='', flush=True)

    def rect_line(self, r: Rect, style=None):
        x, y, w, h = r
        if w < 2 or h < 2: return
        for col in range(x + 1, x + w - 1):
            self.put(col, y, '─', style)
            self.put(col, y + h - 1, '─', style)
        for row in range(y + 1, y + h - 1):
            self.put(x, row, '│', style)
            self.put(x + w - 1, row, '│', style)
        self.put(x, y, '┌', style)
        self.put(x + w - 1, y, '┐', style)
        self.put(x, y + h - 1, '└', style)
        self.put(x + w - 1, y + h - 1, '┘', style)

    def title(self, r: Rect, text: str, style=None):
        # written over the top edge, after the corner
        x, y, w, _ = r
        inset = 1 if w > 2 else 0
        self.puts(x + inset, y, text[:max(0, w - 2 * inset)], style)

    def text_contained(self, txt: str, r: Rect, style=None, wrap=True):
        x, y, w, h = r
        txt = txt.replace('\r\n', '\n').replace('\r', '\n')
        row, col = 0, 0
        for c in txt:
            if c == '\n': row += 1; col = 0; continue
            if wrap and col >= w: row += 1; col = 0
            if row >= h or (not wrap and col >= w): continue
            self.put(x + col, y + row, c, style)
            col += 1
