from shrekdoc import decode
from shrekdoc.config import RenderSettings
from shrekdoc.model import Alignment, BlitRow
from shrekdoc.render import display_text, line_offset, render

ESC = "\xa0"
HEADER = "shrekdoc-v02w10h02mR:"


def test_line_offsets():
    assert line_offset(Alignment.LEFT, 4, 10) == 1
    assert line_offset(Alignment.CENTER, 4, 10) == 4
    assert line_offset(Alignment.CENTER, 5, 10) == 3
    assert line_offset(Alignment.RIGHT, 4, 10) == 7


def test_left_aligned_rows_are_padded():
    doc = decode(HEADER + "hi")
    assert doc.blit[0][0] == BlitRow("hi        ", "f" * 10, "0" * 10)
    assert doc.blit[0][1] == BlitRow(" " * 10, "f" * 10, "0" * 10)


def test_centered_line():
    doc = decode(HEADER + ESC + "ac" + "abcd")
    assert doc.blit[0][0].text == "   abcd   "
    assert doc.line(1, 1).line_x == 4


def test_right_aligned_line():
    doc = decode(HEADER + ESC + "ar" + "abcd")
    assert doc.blit[0][0].text == "      abcd"
    assert doc.line(1, 1).line_x == 7


def test_color_padding_repeats_edge_colors():
    doc = decode(HEADER + ESC + "ac" + ESC + "c1" + "ab" + ESC + "c2" + "cd")
    assert doc.blit[0][0].fg == "111" + "1122" + "222"


def test_empty_row_repeats_last_color():
    doc = decode(HEADER + ESC + "c3" + "ab")
    assert doc.blit[0][1].fg == "3" * 10


def test_highlight_range():
    doc = decode(HEADER + "hello world")
    blit = render(doc, 3, 8)
    assert blit[0][0].bg == "0088888888"
    assert blit[0][1].bg == "8800000000"
    assert render(doc, 8, 3) == blit


def test_single_position_highlight():
    doc = decode(HEADER + "hello world")
    assert render(doc, 2)[0][0].bg == "0800000000"


def test_highlight_carries_into_next_row_padding():
    """A row's leading pad is highlighted when the previous row ended highlighted."""
    doc = decode(HEADER + "hello " + ESC + "ac" + "world")
    blit = render(doc, 1, 7)
    assert blit[0][0].bg == "8888888888"
    assert blit[0][1].text == "  world   "
    assert blit[0][1].bg == "88" + "80000" + "000"


def test_page_break_cells():
    doc = decode(HEADER + "ab" + ESC + "p" + "cd")
    blit = render(doc, 3, 4, render_newpages=True)
    assert blit[1][0].bg == "18" + "8" * 8
    assert render(doc)[1][0].bg == "0" * 10


def test_newline_display():
    doc = decode(HEADER + "ab\ncd")
    assert doc.blit[0][0].text == "ab        "
    assert render(doc, render_newlines=True)[0][0].text == "ab¶       "


def test_control_display():
    assert display_text("a\tb") == "a b"
    assert display_text("a\tb", render_control=True) == "a·b"
    assert display_text("a" + ESC + "b", render_control=True) == "a·b"


def test_settings_override_colors():
    doc = decode(HEADER + "hello")
    blit = render(doc, 1, 1, settings=RenderSettings(highlight_color="e", neutral_color="7"))
    assert blit[0][0].bg == "e" + "7" * 9


def test_every_page_is_full_size():
    doc = decode("shrekdoc-v02w08h03mR:" + "one two three four five six seven eight nine")
    assert doc.page_count > 1
    for page in doc.blit:
        assert len(page) == 3
        for row in page:
            assert len(row.text) == len(row.fg) == len(row.bg) == 8


def test_decoded_document_render_method():
    doc = decode(HEADER + "hello")
    assert doc.render(1, 5)[0][0].bg == "8888888888"
