"""shrekdoc - A paginated rich-text document codec and renderer."""

from .codec import decode, encode
from .errors import (
    ConstraintViolation,
    FormatError,
    InvalidDocument,
    ShrekdocError,
    UnsupportedVersion,
)
from .model import Alignment, Color, DecodedDocument, EditableDocument
from .render import render

__version__ = "1.10.0"

__all__ = [
    'decode',
    'encode',
    'render',
    'Alignment',
    'Color',
    'DecodedDocument',
    'EditableDocument',
    'ShrekdocError',
    'FormatError',
    'UnsupportedVersion',
    'InvalidDocument',
    'ConstraintViolation',
]
