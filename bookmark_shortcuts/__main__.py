#!/usr/bin/env python3
"""
Package entry point for the bookmark shortcut generator.

This allows the package to be executed with: python -m bookmark_shortcuts
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
