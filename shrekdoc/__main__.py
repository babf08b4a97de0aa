"""shrekdoc CLI entry point.

Allows running via `python -m shrekdoc` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from . import __version__
from .codec import decode
from .config import get_store
from .errors import ShrekdocError
from .model import DecodedDocument
from .render import render

USAGE = "usage: shrekdoc [--version] [--dump] FILE"


def dump_pages(doc: DecodedDocument, out: TextIO) -> None:
    """Print the text of every rendered page, separated by form feeds."""
    for i, page in enumerate(doc.blit):
        if i > 0:
            print("\f", file=out)
        for row in page:
            print(row.text.rstrip(), file=out)


def run_viewer(doc: DecodedDocument) -> None:
    """Show the document one page at a time until the user presses q."""
    # Lazy import to keep --dump usable without a terminal
    from .terminal import BlessedDevice, blit_on

    device = BlessedDevice()
    term = device.term
    page = 1
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        while True:
            device.clear()
            blit_on(doc.blit, page, device)
            key = term.inkey()
            if key == "q":
                break
            if key.code == term.KEY_RIGHT or key == " ":
                page = min(page + 1, doc.page_count)
            elif key.code == term.KEY_LEFT:
                page = max(page - 1, 1)


def main(argv: Optional[list[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(__version__)
        return

    dump = "--dump" in args
    files = [a for a in args if not a.startswith("--")]
    if len(files) != 1:
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    path = Path(files[0])
    try:
        doc = decode(path.read_text(encoding="utf-8"))
    except (OSError, ShrekdocError) as e:
        print(f"{path}: {e}", file=sys.stderr)
        sys.exit(1)
    doc.blit = render(doc, settings=get_store().load())

    if dump:
        dump_pages(doc, sys.stdout)
    else:
        run_viewer(doc)


if __name__ == "__main__":  # pragma: no cover
    main()
