"""Exceptions raised by the shrekdoc codec."""


class ShrekdocError(Exception):
    """Base class for every error raised while handling a document."""


class FormatError(ShrekdocError):
    """The document text or a blit buffer is malformed."""


class UnsupportedVersion(ShrekdocError):
    """The header names a format version this codec cannot read."""

    def __init__(self, version: str):
        super().__init__(f"Unsupported document version v{version}")
        self.version = version


class InvalidDocument(ShrekdocError):
    """A serialized (mode S) body did not unwrap to a string."""


class ConstraintViolation(ShrekdocError):
    """An editable document or edit argument breaks a format limit."""
