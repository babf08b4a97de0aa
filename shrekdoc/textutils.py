"""Decoder for the bracketed literal notation used by serialized documents.

Supports three shapes:

- ``{a, "b", c}``: a list of strings
- ``{key = value, other = "x"}``: a dict of strings
- ``"text"``: a quoted string literal with backslash escapes

Anything else is returned unchanged.
"""

import re
from typing import Dict, List, Optional, Union

_VALUE_RE = re.compile(r'"[^"]*"|[^",={}]+')
_PAIR_RE = re.compile(r'([^\s=,{}"]+)\s*=\s*("[^"]*"|[^",={}]+)')
_STRING_RE = re.compile(r'^"((?:[^"\\]|\\.)*)"$', re.S)
_ESCAPE_RE = re.compile(r'\\(\d{1,3}|.)', re.S)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "\n": "\n",
}


def _unescape(body: str) -> str:
    def replace(match: "re.Match[str]") -> str:
        esc = match.group(1)
        if esc.isdigit():
            return chr(int(esc))
        return _SIMPLE_ESCAPES.get(esc, esc)
    return _ESCAPE_RE.sub(replace, body)


def _clean(value: str) -> str:
    return value.strip().replace('"', "")


def _split_items(body: str) -> Optional[List[str]]:
    """Split a braced body on commas outside quotes.

    Returns None when a quote is left open. A single trailing comma is
    allowed.
    """
    items = []
    start = 0
    quoted = False
    for i, ch in enumerate(body):
        if ch == '"':
            quoted = not quoted
        elif ch == "," and not quoted:
            items.append(body[start:i].strip())
            start = i + 1
    if quoted:
        return None
    last = body[start:].strip()
    if last or not items:
        items.append(last)
    return items


def unserialize(text: str) -> Union[str, List[str], Dict[str, str]]:
    """Parse a literal into a string, a list of strings or a dict of strings."""
    stripped = text.strip()

    m = _STRING_RE.match(stripped)
    if m:
        return _unescape(m.group(1))

    if not (stripped.startswith("{") and stripped.endswith("}")):
        return text
    items = _split_items(stripped[1:-1])
    if items is None:
        return text

    pairs = [_PAIR_RE.fullmatch(item) for item in items]
    if all(pairs):
        return {pair.group(1): _clean(pair.group(2)) for pair in pairs}

    if all(_VALUE_RE.fullmatch(item) for item in items):
        return [_clean(item) for item in items]

    return text
