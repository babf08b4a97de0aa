"""Constants for the shrekdoc wire format and renderer."""

class DocConstants:
    """Central wire-format and display constants."""

    # Escape sequences
    ESCAPE_CHAR = "\xa0"  # Marker that starts every in-band escape sequence
    # Total width of each sequence: marker + opcode + fixed-length argument
    ESCAPE_WIDTHS = {
        "c": 3,   # background color
        "r": 2,   # reset color and alignment
        "a": 3,   # alignment
        "p": 2,   # page break
        "t": 34,  # title
    }
    TITLE_WIDTH = 32

    # Header
    HEADER_PREFIX = "shrekdoc"
    CURRENT_VERSION = "02"
    SUPPORTED_VERSIONS = ("01", "02")
    MODE_RAW = "R"
    MODE_SERIALIZED = "S"
    MAX_DIMENSION = 99  # Two decimal digits in the header

    # Palette codes
    BASE_COLOR = "f"       # Text color when none was set
    NEUTRAL_COLOR = "0"    # Page background
    HIGHLIGHT_COLOR = "8"  # Selection background
    NEWPAGE_COLOR = "1"    # Background of a cell carrying a page break

    # Display substitutes
    NEWLINE_GLYPH = "¶"
    CONTROL_GLYPH = "·"
