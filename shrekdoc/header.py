"""Document header parsing and formatting.

A document starts with ``shrekdoc-v<VV>w<WW>h<HH>m<M>:`` where ``VV`` is the
format version, ``WW``/``HH`` the page size in characters and ``M`` the body
mode: ``R`` for a raw body, ``S`` for a body wrapped in the legacy literal
notation (see :mod:`shrekdoc.textutils`).
"""

import re
from typing import NamedTuple

from .constants import DocConstants
from .errors import ConstraintViolation, FormatError, InvalidDocument, UnsupportedVersion
from .textutils import unserialize

HEADER_RE = re.compile(r"^shrekdoc-v(\d{2})w(\d{2})h(\d{2})m([RS]):")


class DocumentHeader(NamedTuple):
    version: str
    width: int
    height: int
    mode: str
    body: str


def decode_header(text: str) -> DocumentHeader:
    """Split a document into its header fields and body.

    Raises:
        FormatError: Missing or malformed header, or a zero dimension.
        UnsupportedVersion: Version outside the supported list.
        InvalidDocument: A mode S body that does not unwrap to a string.
    """
    m = HEADER_RE.match(text)
    if not m:
        raise FormatError("Invalid document (missing header!)")

    version, width_field, height_field, mode = m.groups()
    if version not in DocConstants.SUPPORTED_VERSIONS:
        raise UnsupportedVersion(version)

    try:
        width = int(width_field)
        height = int(height_field)
    except ValueError:
        raise FormatError("Invalid document dimensions.")
    if width <= 0 or height <= 0:
        raise FormatError(f"Invalid document dimensions {width}x{height}.")

    body = text[m.end():]
    if mode == DocConstants.MODE_SERIALIZED:
        body = unserialize(body)
        if not isinstance(body, str):
            raise InvalidDocument("Invalid serialized document.")

    return DocumentHeader(version, width, height, mode, body)


def encode_header(width: int, height: int) -> str:
    """Format a current-version raw-mode header for the given page size."""
    for name, value in (("width", width), ("height", height)):
        if not 1 <= value <= DocConstants.MAX_DIMENSION:
            raise ConstraintViolation(f"Page {name} {value} does not fit the header")
    return (
        f"{DocConstants.HEADER_PREFIX}-v{DocConstants.CURRENT_VERSION}"
        f"w{width:02d}h{height:02d}m{DocConstants.MODE_RAW}:"
    )
