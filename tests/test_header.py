import pytest

from shrekdoc.errors import (
    ConstraintViolation,
    FormatError,
    InvalidDocument,
    UnsupportedVersion,
)
from shrekdoc.header import decode_header, encode_header


def test_decode_raw_header():
    header = decode_header("shrekdoc-v02w10h05mR:body")
    assert header.version == "02"
    assert header.width == 10
    assert header.height == 5
    assert header.mode == "R"
    assert header.body == "body"


def test_version_one_is_supported():
    assert decode_header("shrekdoc-v01w51h19mR:").width == 51


def test_unsupported_version():
    with pytest.raises(UnsupportedVersion) as exc:
        decode_header("shrekdoc-v03w10h05mR:body")
    assert exc.value.version == "03"


def test_missing_header():
    with pytest.raises(FormatError):
        decode_header("hello")


def test_unknown_mode():
    with pytest.raises(FormatError):
        decode_header("shrekdoc-v02w10h05mX:body")


def test_zero_dimension():
    with pytest.raises(FormatError):
        decode_header("shrekdoc-v02w00h05mR:body")


def test_serialized_body_is_unwrapped():
    """Mode S bodies are string literals with decimal escapes."""
    header = decode_header('shrekdoc-v02w10h05mS:"hi\\160there"')
    assert header.mode == "S"
    assert header.body == "hi\xa0there"


def test_serialized_body_must_be_string():
    with pytest.raises(InvalidDocument):
        decode_header("shrekdoc-v02w10h05mS:{a, b}")


def test_encode_header():
    assert encode_header(10, 5) == "shrekdoc-v02w10h05mR:"
    assert encode_header(51, 19) == "shrekdoc-v02w51h19mR:"


def test_encode_header_rejects_dimensions_outside_two_digits():
    with pytest.raises(ConstraintViolation):
        encode_header(100, 5)
    with pytest.raises(ConstraintViolation):
        encode_header(10, 0)
