#!/usr/bin/env python3
"""
Main entry point for the bookmark shortcut generator.

Target of the ``bookmark-shortcuts`` console script.
"""

import sys
from bookmark_shortcuts.cli import main as cli_main


def main():
    """Run the CLI and exit with its status code."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
