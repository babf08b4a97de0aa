"""Edit operations on an editable document.

Every operation works on a clone of its input and returns the encoded text
of the edited clone. Decode that text to see the result; the input
document and any grid decoded from it are left untouched.
"""

from typing import Dict, Optional, TypeVar

from .codec import encode
from .errors import ConstraintViolation
from .model import Alignment, EditableDocument

T = TypeVar("T")


def _check_range(editable: EditableDocument, a: int, b: int) -> tuple[int, int]:
    a, b = min(a, b), max(a, b)
    if a < 1 or b > len(editable):
        raise ConstraintViolation(f"Range {a}..{b} is outside the document (1..{len(editable)})")
    return a, b


def _check_color(color: str) -> None:
    if not isinstance(color, str) or len(color) != 1:
        raise ConstraintViolation(f"Color must be a single character code, got {color!r}")


def _shift(markers: Dict[int, T], start: int, delta: int) -> Dict[int, T]:
    """Move every marker at ``start`` or later by ``delta`` positions."""
    return {(pos + delta if pos >= start else pos): value for pos, value in markers.items()}


def remove(editable: EditableDocument, a: int, b: int) -> str:
    """Delete positions a..b (inclusive, either order).

    Markers inside the range are dropped; later markers move down by the
    width of the range. This includes a line start at ``a``: deleting the
    first glyph of a line leaves the rest of that line with no alignment
    marker, so it decodes with the alignment of the line before it.
    """
    a, b = _check_range(editable, a, b)
    width = b - a + 1
    clone = editable.clone()

    for markers in (clone.linestart, clone.pages):
        for pos in range(a, b + 1):
            markers.pop(pos, None)
    clone.linestart = _shift(clone.linestart, b + 1, -width)
    clone.pages = _shift(clone.pages, b + 1, -width)

    clone.glyphs = clone.glyphs[:a - 1] + clone.glyphs[b:]
    clone.colors = clone.colors[:a - 1] + clone.colors[b:]
    return encode(clone)


def insert_at(editable: EditableDocument, idx: int, text: str, color: str) -> str:
    """Insert ``text`` in a single color so that it starts at position ``idx``."""
    _check_color(color)
    if not 1 <= idx <= len(editable) + 1:
        raise ConstraintViolation(f"Position {idx} is outside the document")
    clone = editable.clone()

    clone.linestart = _shift(clone.linestart, idx, len(text))
    clone.pages = _shift(clone.pages, idx, len(text))

    clone.glyphs = clone.glyphs[:idx - 1] + text + clone.glyphs[idx - 1:]
    clone.colors = clone.colors[:idx - 1] + color * len(text) + clone.colors[idx - 1:]
    return encode(clone)


def set_color(editable: EditableDocument, color: str, a: int, b: int) -> str:
    """Recolor positions a..b (inclusive, either order)."""
    _check_color(color)
    a, b = _check_range(editable, a, b)
    clone = editable.clone()
    clone.colors = clone.colors[:a - 1] + color * (b - a + 1) + clone.colors[b:]
    return encode(clone)


def set_alignment(editable: EditableDocument, idx: int, alignment: Alignment,
                  b: Optional[int] = None) -> str:
    """Align the line holding ``idx``.

    With ``b``, every line start from ``b`` back to ``idx`` is set as well.
    The line holding ``idx`` is found by scanning back from ``idx`` to the
    nearest recorded line start.
    """
    try:
        alignment = Alignment(alignment)
    except ValueError:
        raise ConstraintViolation(f"Unknown alignment {alignment!r}") from None
    if not 1 <= idx <= len(editable) + 1:
        raise ConstraintViolation(f"Position {idx} is outside the document")
    clone = editable.clone()
    linestart = clone.linestart

    if b is not None:
        for pos in range(min(b, len(editable)), idx - 1, -1):
            if pos in linestart:
                linestart[pos] = alignment
    for pos in range(idx, 0, -1):
        if pos in linestart:
            linestart[pos] = alignment
            break

    return encode(clone)


def insert_page(editable: EditableDocument, idx: int) -> str:
    """Add a page break before position ``idx``; breaks at one position stack."""
    if not 1 <= idx <= len(editable) + 1:
        raise ConstraintViolation(f"Position {idx} is outside the document")
    clone = editable.clone()
    clone.pages[idx] = clone.pages.get(idx, 0) + 1
    return encode(clone)
