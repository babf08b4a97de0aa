"""Greedy word wrap of document bodies to a fixed column width."""

from typing import Dict, List, Optional, Tuple

from .escapes import extract_escape_codes


def _run_length(glyphs: List[str], start: int) -> int:
    """Length of the run of non-whitespace glyphs beginning at start."""
    end = start
    while end < len(glyphs) and not glyphs[end].isspace():
        end += 1
    return end - start


def wrap_glyphs(glyphs: List[str], width: int) -> List[str]:
    """Wrap a glyph sequence into rows of at most ``width`` cells.

    A run of non-whitespace that does not fit the rest of the current row,
    but would fit an empty row, moves to a new row. A run longer than a
    full row is split across rows. A newline ends its row. Other
    whitespace is placed one cell at a time, wrapping only when the row is
    full. Every glyph lands in exactly one row, in order, so concatenating
    the rows gives back the input.
    """
    rows: List[List[str]] = []
    current: Optional[List[str]] = None  # None until the next glyph opens a row

    def put(ch: str) -> None:
        nonlocal current
        if current is None or len(current) >= width:
            current = []
            rows.append(current)
        current.append(ch)

    i = 0
    while i < len(glyphs):
        ch = glyphs[i]
        if ch == "\n":
            put(ch)
            current = None
            i += 1
        elif ch.isspace():
            put(ch)
            i += 1
        else:
            length = _run_length(glyphs, i)
            used = len(current) if current is not None else 0
            if width - used < length <= width:
                current = None
            for ch in glyphs[i:i + length]:
                put(ch)
            i += length

    return ["".join(row) for row in rows]


def wrap_text(text: str, width: int) -> Tuple[List[str], Dict[int, List[str]]]:
    """Extract escape codes from ``text`` and wrap the remaining glyphs.

    Returns (rows, escapes). Escape positions still refer to the flat glyph
    sequence, which is also the order the rows are consumed in.
    """
    glyphs, escapes = extract_escape_codes(text)
    return wrap_glyphs(glyphs, width), escapes
