#!/usr/bin/env python3
"""shrekdoc - view a paginated document in the terminal.

Usage:
    python main.py [--dump] FILE

Controls:
    Right arrow / Space: Next page
    Left arrow: Previous page
    q: Quit
"""

from shrekdoc.__main__ import main


if __name__ == "__main__":
    main()
