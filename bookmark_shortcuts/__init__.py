"""
Bookmark shortcut generator.

Turns a plain-text list of ``<shortcut> <path>`` bookmarks into lf
keybindings, zsh named directories or shell cd aliases.
"""

__version__ = "1.0.0"
