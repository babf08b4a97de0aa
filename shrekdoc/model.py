"""Document model: the editable buffer and the decoded page grid."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple, Optional

from .constants import DocConstants


class Alignment(str, Enum):
    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"
    DEFAULT = "l"


class Color(str, Enum):
    """Single-character palette codes."""
    WHITE = "0"
    ORANGE = "1"
    MAGENTA = "2"
    LIGHT_BLUE = "3"
    YELLOW = "4"
    LIME = "5"
    PINK = "6"
    GRAY = "7"
    LIGHT_GRAY = "8"
    CYAN = "9"
    PURPLE = "a"
    BLUE = "b"
    BROWN = "c"
    GREEN = "d"
    RED = "e"
    BLACK = "f"
    DEFAULT = DocConstants.BASE_COLOR


PALETTE: dict[str, str] = {
    "0": "#F0F0F0",
    "1": "#F2B233",
    "2": "#E57FD8",
    "3": "#99B2F2",
    "4": "#DEDE6C",
    "5": "#7FCC19",
    "6": "#F2B2CC",
    "7": "#4C4C4C",
    "8": "#999999",
    "9": "#4C99B2",
    "a": "#B266E5",
    "b": "#3366CC",
    "c": "#7F664C",
    "d": "#57A64E",
    "e": "#CC4C4C",
    "f": "#191919",
}


@dataclass
class EditableDocument:
    """Flat, canonical form of a document.

    Glyphs and colors are parallel strings addressed by 1-based absolute
    position. ``linestart`` and ``pages`` are sparse: a position without a
    key carries no line-start alignment and no page break.
    """
    page_width: int
    page_height: int
    glyphs: str = ""
    colors: str = ""
    title: Optional[str] = None
    linestart: dict[int, Alignment] = field(default_factory=dict)
    pages: dict[int, int] = field(default_factory=dict)

    @property
    def content(self) -> tuple[str, str]:
        return (self.glyphs, self.colors)

    def __len__(self) -> int:
        return len(self.glyphs)

    def clone(self) -> "EditableDocument":
        """Copy with independent marker maps; strings are shared."""
        return replace(self, linestart=dict(self.linestart), pages=dict(self.pages))


class GridIndex(NamedTuple):
    page: int
    line: int
    column: int


class BlitRow(NamedTuple):
    text: str
    fg: str
    bg: str


@dataclass
class DocumentLine:
    text: str = ""
    colors: str = ""
    alignment: Alignment = Alignment.DEFAULT
    line_x: int = 1
    overlay: str = ""

    def ends_with_newline(self) -> bool:
        return self.text.endswith("\n")


@dataclass
class DecodedDocument:
    """Read-only page grid built by :func:`shrekdoc.codec.decode`.

    ``pages`` and ``index_lut`` are stored 0-based; use :meth:`line` and
    :meth:`position_at` for 1-based page/line/column access. ``indices``
    holds one entry per glyph plus a trailing entry for the cursor
    position after the last glyph.
    """
    page_width: int
    page_height: int
    editable: EditableDocument
    pages: list[list[DocumentLine]] = field(default_factory=list)
    indices: list[GridIndex] = field(default_factory=list)
    index_lut: list[list[list[int]]] = field(default_factory=list)
    blit: list[list[BlitRow]] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def last_position(self) -> int:
        """Absolute position of the last glyph (0 for an empty document)."""
        return len(self.editable)

    @property
    def title(self) -> Optional[str]:
        return self.editable.title

    def line(self, page: int, line: int) -> Optional[DocumentLine]:
        """Return the line at 1-based (page, line), or None past the content."""
        if not 1 <= page <= len(self.pages):
            return None
        lines = self.pages[page - 1]
        if not 1 <= line <= len(lines):
            return None
        return lines[line - 1]

    def index_of(self, position: int) -> GridIndex:
        if not 1 <= position <= len(self.indices):
            raise IndexError(f"Position {position} is outside the document")
        return self.indices[position - 1]

    def position_at(self, page: int, line: int, column: int) -> int:
        """Return the absolute position addressed by a grid cell."""
        if not (1 <= page <= len(self.index_lut)
                and 1 <= line <= self.page_height
                and 1 <= column <= self.page_width):
            raise IndexError(f"Cell ({page}, {line}, {column}) is outside the grid")
        return self.index_lut[page - 1][line - 1][column - 1]

    # --- Edits: each returns the encoded text of a new document ---
    def remove(self, a: int, b: int) -> str:
        from . import edits
        return edits.remove(self.editable, a, b)

    def insert_at(self, idx: int, text: str, color: str) -> str:
        from . import edits
        return edits.insert_at(self.editable, idx, text, color)

    def set_color(self, color: str, a: int, b: int) -> str:
        from . import edits
        return edits.set_color(self.editable, color, a, b)

    def set_alignment(self, idx: int, alignment: Alignment, b: Optional[int] = None) -> str:
        from . import edits
        return edits.set_alignment(self.editable, idx, alignment, b)

    def insert_page(self, idx: int) -> str:
        from . import edits
        return edits.insert_page(self.editable, idx)

    def render(self, a: Optional[int] = None, b: Optional[int] = None, **flags) -> list[list[BlitRow]]:
        from .render import render
        return render(self, a, b, **flags)
