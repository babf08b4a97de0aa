"""Encoding and decoding of shrekdoc documents.

``decode`` turns document text into a :class:`DecodedDocument`: the body is
stripped of escape codes, word wrapped to the page width, split into pages
and indexed both ways between absolute positions and grid cells.
``encode`` writes an :class:`EditableDocument` back to document text and is
the only producer of the wire format.
"""

import logging
from typing import Dict, List, Optional

from .constants import DocConstants
from .errors import ConstraintViolation, FormatError
from .header import decode_header, encode_header
from .model import (
    Alignment,
    Color,
    DecodedDocument,
    DocumentLine,
    EditableDocument,
    GridIndex,
)
from .render import render
from .wrap import wrap_text

logger = logging.getLogger(__name__)

ESCAPE_CHAR = DocConstants.ESCAPE_CHAR


class _GridBuilder:
    """Running state while laying glyphs out on pages."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.editable = EditableDocument(page_width=width, page_height=height)
        self.pages: List[List[DocumentLine]] = [[]]
        self.lut: List[List[List[Optional[int]]]] = [self._blank_page()]
        self.indices: List[GridIndex] = []

        self.color = Color.DEFAULT.value
        self.alignment = Alignment.DEFAULT
        self.page = 1
        self.line = 1
        self.column = 1
        self.position = 1
        self._text: List[str] = []
        self._colors: List[str] = []

    def _blank_page(self) -> List[List[Optional[int]]]:
        return [[None] * self.width for _ in range(self.height)]

    def new_page(self) -> None:
        self.page += 1
        self.line = 1
        self.column = 1
        self.pages.append([])
        self.lut.append(self._blank_page())

    def flush_line(self) -> None:
        """Close the line being built; an empty line is not kept."""
        if not self._text:
            return
        self.pages[self.page - 1].append(
            DocumentLine("".join(self._text), "".join(self._colors), self.alignment)
        )
        self._text = []
        self._colors = []
        self.line += 1
        self.column = 1

    def apply(self, codes: List[str]) -> None:
        for code in codes:
            op, arg = code[0], code[1:]
            if op == "r":
                self.color = Color.DEFAULT.value
                self.alignment = Alignment.DEFAULT
            elif op == "c":
                self.color = arg
            elif op == "a":
                try:
                    self.alignment = Alignment(arg)
                except ValueError:
                    raise FormatError(f"Invalid alignment {arg!r}") from None
            elif op == "p":
                self.flush_line()
                self.new_page()
                pages = self.editable.pages
                pages[self.position] = pages.get(self.position, 0) + 1
            elif op == "t":
                title = arg.strip()
                if not title:
                    raise FormatError("Document title is empty")
                if self.editable.title is None:
                    self.editable.title = title
            else:
                raise FormatError(f"Invalid escape code {code!r}")

    def put(self, glyph: str) -> None:
        if self.column == 1 and self.line > self.height:
            self.new_page()
        self.indices.append(GridIndex(self.page, self.line, self.column))
        self.lut[self.page - 1][self.line - 1][self.column - 1] = self.position
        self._text.append(glyph)
        self._colors.append(self.color)
        self.position += 1
        self.column += 1

    def fill_index_lut(self) -> List[List[List[int]]]:
        """Point every empty cell at the last position seen before it.

        Cells after the last glyph point one past it, where a cursor at the
        end of the document sits.
        """
        last_position = self.position - 1
        last_seen = 1
        for page in self.lut:
            for row in page:
                for column, value in enumerate(row):
                    if value is None:
                        row[column] = last_seen
                    elif value == last_position:
                        last_seen = value + 1
                    else:
                        last_seen = value
        return self.lut  # type: ignore[return-value]


def decode(text: str) -> DecodedDocument:
    """Decode document text into a paginated, indexed and rendered grid.

    Raises:
        FormatError, UnsupportedVersion, InvalidDocument: see :mod:`shrekdoc.errors`.
    """
    header = decode_header(text)
    rows, escapes = wrap_text(header.body, header.width)
    builder = _GridBuilder(header.width, header.height)

    for row in rows:
        for glyph in row:
            codes = escapes.get(builder.position)
            if codes:
                builder.apply(codes)
            builder.put(glyph)
        builder.flush_line()
    trailing = escapes.get(builder.position)
    if trailing:
        builder.apply(trailing)

    indices = builder.indices
    last = indices[-1] if indices else GridIndex(1, 1, 0)
    indices.append(GridIndex(last.page, last.line, last.column + 1))

    editable = builder.editable
    lines = [line for page in builder.pages for line in page]
    editable.glyphs = "".join(line.text for line in lines)
    editable.colors = "".join(line.colors for line in lines)

    glyphs = editable.glyphs
    for position in range(1, len(glyphs) + 1):
        if position == 1 or glyphs[position - 2] == "\n":
            index = indices[position - 1]
            editable.linestart[position] = builder.pages[index.page - 1][index.line - 1].alignment

    doc = DecodedDocument(
        page_width=header.width,
        page_height=header.height,
        editable=editable,
        pages=builder.pages,
        indices=indices,
        index_lut=builder.fill_index_lut(),
    )
    doc.blit = render(doc)
    logger.debug(
        "Decoded v%s document %dx%d: %d glyphs on %d pages",
        header.version, header.width, header.height, len(glyphs), doc.page_count,
    )
    return doc


def encode(editable: EditableDocument) -> str:
    """Write an editable document as raw-mode document text.

    Color and alignment escapes are only written where they change, so the
    output is not byte-identical to the text the document was decoded from.

    Raises:
        ConstraintViolation: Title longer than 32 characters or blank, page
            size outside two digits, or glyphs and colors of different length.
    """
    glyphs, colors = editable.content
    if len(glyphs) != len(colors):
        raise ConstraintViolation(
            f"Glyphs ({len(glyphs)}) and colors ({len(colors)}) differ in length"
        )

    out = [encode_header(editable.page_width, editable.page_height)]

    if editable.title:
        title = editable.title
        if len(title) > DocConstants.TITLE_WIDTH:
            raise ConstraintViolation("Title is more than 32 characters!")
        if not title.strip():
            raise ConstraintViolation("Title is blank")
        out.append(f"{ESCAPE_CHAR}t{title.ljust(DocConstants.TITLE_WIDTH)}")

    color = Color.DEFAULT.value
    alignment = Alignment.DEFAULT
    page_breaks: Dict[int, int] = editable.pages

    for position, (glyph, bg) in enumerate(zip(glyphs, colors), start=1):
        if bg != color:
            color = bg
            out.append(f"{ESCAPE_CHAR}c{color}")

        out.append(f"{ESCAPE_CHAR}p" * page_breaks.get(position, 0))

        line = editable.linestart.get(position)
        if line is not None and line != alignment:
            alignment = Alignment(line)
            out.append(f"{ESCAPE_CHAR}a{alignment.value}")

        if glyph == ESCAPE_CHAR:
            out.append(ESCAPE_CHAR)
        out.append(glyph)

    out.append(f"{ESCAPE_CHAR}p" * page_breaks.get(len(glyphs) + 1, 0))
    return "".join(out)
