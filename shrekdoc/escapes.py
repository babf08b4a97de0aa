"""Escape sequence extraction for document bodies."""

from typing import Dict, List, Tuple

from .constants import DocConstants
from .errors import FormatError

ESCAPE_CHAR = DocConstants.ESCAPE_CHAR
ESCAPE_WIDTHS = DocConstants.ESCAPE_WIDTHS


def extract_escape_codes(text: str) -> Tuple[List[str], Dict[int, List[str]]]:
    """Strip escape sequences from a document body.

    Args:
        text: Body text with in-band escape sequences

    Returns:
        Tuple of (glyphs, escapes). ``escapes`` maps the 1-based position of
        an output glyph to the payloads (opcode plus argument, without the
        marker) that appeared immediately before it, in encounter order.
        Codes that follow the last glyph are keyed to ``len(glyphs) + 1``.

    Raises:
        FormatError: On an unknown opcode or a sequence cut short by the
            end of the text.
    """
    glyphs: List[str] = []
    escapes: Dict[int, List[str]] = {}
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if ch != ESCAPE_CHAR:
            glyphs.append(ch)
            i += 1
            continue

        if i + 1 >= n:
            raise FormatError("Escape marker at end of document")
        opcode = text[i + 1]
        if opcode == ESCAPE_CHAR:
            # Doubled marker is a literal marker glyph
            glyphs.append(ESCAPE_CHAR)
            i += 2
            continue

        width = ESCAPE_WIDTHS.get(opcode)
        if width is None:
            raise FormatError(f"Invalid escape code {opcode!r} at offset {i}")
        if i + width > n:
            raise FormatError(f"Truncated escape code {opcode!r} at offset {i}")
        escapes.setdefault(len(glyphs) + 1, []).append(text[i + 1:i + width])
        i += width

    return glyphs, escapes
