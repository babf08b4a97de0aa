"""Render a decoded document into per-page blit rows."""

from typing import List, Optional, TYPE_CHECKING

from .config import RenderSettings
from .constants import DocConstants
from .model import Alignment, BlitRow, DocumentLine

if TYPE_CHECKING:
    from .model import DecodedDocument


def line_offset(alignment: Alignment, length: int, page_width: int) -> int:
    """Return the 1-based column where a line of ``length`` cells starts."""
    if alignment == Alignment.CENTER:
        return (page_width - length) // 2 + 1
    if alignment == Alignment.RIGHT:
        return page_width - length + 1
    return 1


def display_text(text: str, render_newlines: bool = False, render_control: bool = False,
                 settings: Optional[RenderSettings] = None) -> str:
    """Map glyphs that a device cannot show to one printable cell each."""
    settings = settings or RenderSettings()
    out = []
    for ch in text:
        if ch == "\n":
            out.append(settings.newline_glyph if render_newlines else " ")
        elif ch == DocConstants.ESCAPE_CHAR or not ch.isprintable():
            out.append(settings.control_glyph if render_control else " ")
        else:
            out.append(ch)
    return "".join(out)


def render(doc: "DecodedDocument", a: Optional[int] = None, b: Optional[int] = None,
           render_newlines: bool = False, render_newpages: bool = False,
           render_control: bool = False,
           settings: Optional[RenderSettings] = None) -> List[List[BlitRow]]:
    """Render every page of ``doc`` as rows of (text, fg, bg) strings.

    Args:
        doc: Decoded document; ``line_x`` and ``overlay`` of its lines are updated
        a: First absolute position to highlight
        b: Last absolute position to highlight (defaults to ``a``)
        render_newlines: Show newline glyphs instead of blanks
        render_newpages: Mark cells that carry a page break
        render_control: Show control glyphs instead of blanks
        settings: Colors and substitute glyphs; defaults when omitted

    Returns:
        One list per page of exactly ``page_height`` rows, each row three
        strings of ``page_width`` characters.
    """
    settings = settings or RenderSettings()
    if b is None:
        b = a
    if a is not None and b is not None:
        a, b = min(a, b), max(a, b)

    width = doc.page_width
    page_breaks = doc.editable.pages
    highlight = settings.highlight_color
    neutral = settings.neutral_color

    blit: List[List[BlitRow]] = []
    last_seen_color = settings.base_color
    ends_in_highlight = False
    starts_in_highlight = False

    for page_no, page in enumerate(doc.pages, start=1):
        page_blit: List[BlitRow] = []
        for line_no in range(1, doc.page_height + 1):
            line = page[line_no - 1] if line_no <= len(page) else DocumentLine()
            overlay = []
            for column in range(1, len(line.text) + 1):
                position = doc.position_at(page_no, line_no, column)
                ends_in_highlight = a is not None and a <= position <= b
                if render_newpages and page_breaks.get(position, 0) > 0:
                    overlay.append(settings.newpage_color)
                else:
                    overlay.append(highlight if ends_in_highlight else neutral)
            line.overlay = "".join(overlay)

            length = len(line.text)
            sx = line_offset(line.alignment, length, width)
            line.line_x = sx
            left_pad = sx - 1
            right_pad = width - sx + 1 - length

            if line.colors:
                color_start, color_end = line.colors[0], line.colors[-1]
                last_seen_color = color_end
            else:
                color_start = color_end = last_seen_color

            text = display_text(line.text, render_newlines, render_control, settings)
            page_blit.append(BlitRow(
                " " * left_pad + text + " " * right_pad,
                color_start * left_pad + line.colors + color_end * (width - sx + 1 - len(line.colors)),
                (highlight if starts_in_highlight else neutral) * left_pad
                + line.overlay
                + (highlight if ends_in_highlight else neutral) * right_pad,
            ))
            starts_in_highlight = ends_in_highlight
        blit.append(page_blit)

    return blit
