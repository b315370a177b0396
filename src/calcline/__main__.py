"""
Entry point for the calcline CLI.

Usage:
    python -m calcline repl
"""

import sys

from .cli import main

if __name__ == "__main__":
    main(sys.argv[1:])
