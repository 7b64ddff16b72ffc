from __future__ import annotations

import pytest

from tint.color_mode import ColorMode
from tint.styler import base_styler
from tint.text import raw_len, strip

SAMPLES = [
    "",
    "plain text",
    "\x1b[31mred\x1b[39m",
    "\x1b[1m\x1b[36mcyan bold\x1b[39m\x1b[22m",
    "a\x1b[0m\x1b[0mb",
    "\x1b[100m\x1b[49m",
    "\x1b[\x1b[31m1mx",
]


def test_strip_without_codes_is_identity() -> None:
    assert strip("no codes here") == "no codes here"


def test_strip_removes_adjacent_codes() -> None:
    assert strip("\x1b[1m\x1b[31m\x1b[4mx\x1b[24m\x1b[39m\x1b[22m") == "x"


def test_strip_leaves_other_sequences() -> None:
    assert strip("\x1b[1;31mx") == "\x1b[1;31mx"
    assert strip("[31m") == "[31m"


@pytest.mark.parametrize("text", SAMPLES)
def test_strip_is_idempotent(text: str) -> None:
    assert strip(strip(text)) == strip(text)


@pytest.mark.parametrize("chain", ["cyan", "cyan.bold", "bgRed.underline.italic", "reset.grey", "normal.bgGrey.strikethrough"])
def test_strip_recovers_styled_text(chain: str) -> None:
    styler = base_styler(ColorMode(enabled=True)).chain(chain)
    assert strip(styler("hello world")) == "hello world"
    assert raw_len(styler("hello world")) == len("hello world")


def test_strip_recovers_nested_text() -> None:
    base = base_styler(ColorMode(enabled=True))
    out = base.cyan("x" + base.bold("y") + "z")
    assert strip(out) == "xyz"


def test_raw_len_counts_code_points() -> None:
    assert raw_len("\x1b[31mhé✓\x1b[39m") == 3
    assert raw_len("") == 0


def test_strip_removes_sequences_formed_by_stripping() -> None:
    assert strip("\x1b[\x1b[31m1mx") == "x"
