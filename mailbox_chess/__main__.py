"""
Main entry point for the console game.

Usage:
    python -m mailbox_chess [depth]
"""

import sys

from mailbox_chess.cli.interface import main

if __name__ == "__main__":
    sys.exit(main())
