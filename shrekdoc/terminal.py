"""Display devices for rendered documents.

A device is a character grid with a cursor, a current text/background
color and a ``blit`` primitive that writes one run of cells with a color
code per cell. Colors are single-character palette codes (see
:data:`shrekdoc.model.PALETTE`). Cursor coordinates are 0-based.
"""

import math
from typing import List, Optional, Protocol, Tuple

import blessed

from .constants import DocConstants
from .errors import FormatError
from .model import PALETTE, BlitRow


class Device(Protocol):
    def get_background_color(self) -> str: ...
    def get_text_color(self) -> str: ...
    def set_background_color(self, color: str) -> None: ...
    def set_text_color(self, color: str) -> None: ...
    def set_cursor_pos(self, x: int, y: int) -> None: ...
    def get_size(self) -> Tuple[int, int]: ...
    def write(self, text: str) -> None: ...
    def blit(self, text: str, fg: str, bg: str) -> None: ...
    def clear(self) -> None: ...


def check_blit(text: str, fg: str, bg: str) -> None:
    if len(text) != len(fg) or len(text) != len(bg):
        raise FormatError("Text, foreground, and background must be the same length.")


class MemoryDevice:
    """Device backed by an in-memory grid of (char, fg, bg) cells."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.text_color = DocConstants.NEUTRAL_COLOR
        self.background_color = DocConstants.BASE_COLOR
        self.cursor_x = 0
        self.cursor_y = 0
        self.cells: List[List[Tuple[str, str, str]]] = []
        self.clear()

    def get_background_color(self) -> str:
        return self.background_color

    def get_text_color(self) -> str:
        return self.text_color

    def set_background_color(self, color: str) -> None:
        self.background_color = color

    def set_text_color(self, color: str) -> None:
        self.text_color = color

    def set_cursor_pos(self, x: int, y: int) -> None:
        self.cursor_x = x
        self.cursor_y = y

    def get_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def _put(self, ch: str, fg: str, bg: str) -> None:
        if 0 <= self.cursor_y < self.height and 0 <= self.cursor_x < self.width:
            self.cells[self.cursor_y][self.cursor_x] = (ch, fg, bg)
        self.cursor_x += 1

    def write(self, text: str) -> None:
        for i, part in enumerate(text.split("\n")):
            if i > 0:
                self.cursor_y += 1
                self.cursor_x = 0
            for ch in part:
                self._put(ch, self.text_color, self.background_color)

    def blit(self, text: str, fg: str, bg: str) -> None:
        check_blit(text, fg, bg)
        for ch, f, b in zip(text, fg, bg):
            self._put(ch, f, b)

    def clear(self) -> None:
        blank = (" ", self.text_color, self.background_color)
        self.cells = [[blank] * self.width for _ in range(self.height)]

    def row_text(self, y: int) -> str:
        return "".join(cell[0] for cell in self.cells[y])

    def lines(self) -> List[str]:
        return [self.row_text(y) for y in range(self.height)]


def _rgb(code: str) -> Tuple[int, int, int]:
    value = PALETTE.get(code, PALETTE[DocConstants.BASE_COLOR])
    return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


class BlessedDevice:
    """Device that draws on a real terminal using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        self.term = terminal or blessed.Terminal()
        self.text_color = DocConstants.NEUTRAL_COLOR
        self.background_color = DocConstants.BASE_COLOR
        self.cursor_x = 0
        self.cursor_y = 0

    def _emit(self, s: str) -> None:
        print(s, end='', file=self.term.stream, flush=True)

    def _style(self, fg: str, bg: str) -> str:
        return self.term.color_rgb(*_rgb(fg)) + self.term.on_color_rgb(*_rgb(bg))

    def get_background_color(self) -> str:
        return self.background_color

    def get_text_color(self) -> str:
        return self.text_color

    def set_background_color(self, color: str) -> None:
        self.background_color = color

    def set_text_color(self, color: str) -> None:
        self.text_color = color

    def set_cursor_pos(self, x: int, y: int) -> None:
        self.cursor_x = x
        self.cursor_y = y

    def get_size(self) -> Tuple[int, int]:
        return (self.term.width, self.term.height)

    def write(self, text: str) -> None:
        style = self._style(self.text_color, self.background_color)
        for i, part in enumerate(text.split("\n")):
            if i > 0:
                self.cursor_y += 1
                self.cursor_x = 0
            self._emit(self.term.move_xy(self.cursor_x, self.cursor_y) + style + part + self.term.normal)
            self.cursor_x += len(part)

    def blit(self, text: str, fg: str, bg: str) -> None:
        check_blit(text, fg, bg)
        out = [self.term.move_xy(self.cursor_x, self.cursor_y)]
        last = None
        for ch, f, b in zip(text, fg, bg):
            if (f, b) != last:
                out.append(self._style(f, b))
                last = (f, b)
            out.append(ch)
        out.append(self.term.normal)
        self._emit("".join(out))
        self.cursor_x += len(text)

    def clear(self) -> None:
        self._emit(self.term.home + self._style(self.text_color, self.background_color)
                   + self.term.clear + self.term.normal)
        self.cursor_x = 0
        self.cursor_y = 0


def blit_on(blit: List[List[BlitRow]], page: int, device: Device,
            x: Optional[int] = None, y: Optional[int] = None) -> None:
    """Draw rendered page ``page`` (1-based) on ``device``.

    The page is centered on the device unless ``x``/``y`` are given. The
    device colors are restored afterwards.
    """
    rows = blit[page - 1]
    page_width = len(rows[0].text) if rows else 0
    page_height = len(rows)
    width, height = device.get_size()

    if x is None:
        x = max(0, math.ceil((width - page_width) / 2))
    if y is None:
        y = max(0, math.ceil((height - page_height) / 2))

    old_fg = device.get_text_color()
    old_bg = device.get_background_color()
    device.set_text_color(DocConstants.BASE_COLOR)
    device.set_background_color(DocConstants.NEUTRAL_COLOR)
    try:
        for i, row in enumerate(rows):
            device.set_cursor_pos(x, y + i)
            device.blit(row.text, row.fg, row.bg)
    finally:
        device.set_text_color(old_fg)
        device.set_background_color(old_bg)
