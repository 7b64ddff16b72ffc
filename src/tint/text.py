"""Helpers for measuring and cleaning styled text."""
from __future__ import annotations

import re

__all__ = ["strip", "raw_len"]

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9]+m")


def strip(text: str) -> str:
    """Remove SGR escape sequences (ESC [ digits m) from text."""
    # removing one sequence can join its neighbours into another
    while True:
        text, count = ANSI_ESCAPE_RE.subn("", text)
        if not count:
            return text


def raw_len(text: str) -> int:
    """Length of text once SGR escape sequences are removed."""
    return len(strip(text))
