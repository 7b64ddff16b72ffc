"""SGR attribute table for terminal styling."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

__all__ = [
    "AttributeSpec",
    "ATTRIBUTES",
    "CLOSE_CODES",
    "CSI",
    "RESET_CODE",
    "resolve_name",
    "sgr",
]

CSI = "\x1b["

# Foreground colors (close: 39)
FG: dict[str, int] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "grey": 90,
    "normal": 39,
}
FG_CLOSE = 39

# Background colors (close: 49)
BG: dict[str, int] = {
    "black": 40,
    "red": 41,
    "green": 42,
    "yellow": 43,
    "blue": 44,
    "magenta": 45,
    "cyan": 46,
    "white": 47,
    "grey": 100,
}
BG_CLOSE = 49

# Text attributes as (open, close)
STYLE: dict[str, tuple[int, int]] = {
    "bold": (1, 22),
    "dim": (2, 22),
    "italic": (3, 23),
    "underline": (4, 24),
    "inverse": (7, 27),
    "hidden": (8, 28),
    "strikethrough": (9, 29),
    "reset": (0, 0),
}


def sgr(code: int) -> str:
    """Generate a single SGR (Select Graphic Rendition) escape sequence."""
    return f"{CSI}{code}m"


RESET_CODE = sgr(0)


@dataclass(frozen=True)
class AttributeSpec:
    name: str
    open: str
    close: str


def _bg_name(name: str) -> str:
    return f"bg{name[:1].upper()}{name[1:]}"


def _build() -> dict[str, AttributeSpec]:
    table: dict[str, AttributeSpec] = {}

    def add(name: str, open_code: int, close_code: int) -> None:
        if name in table:
            raise ValueError(f"Duplicate attribute name: {name}")
        table[name] = AttributeSpec(name=name, open=sgr(open_code), close=sgr(close_code))

    for name, code in FG.items():
        add(name, code, FG_CLOSE)
    for name, code in BG.items():
        add(_bg_name(name), code, BG_CLOSE)
    for name, (open_code, close_code) in STYLE.items():
        add(name, open_code, close_code)
    return table


ATTRIBUTES: Mapping[str, AttributeSpec] = _build()

# Distinct close sequences, in table order
CLOSE_CODES: tuple[str, ...] = tuple(dict.fromkeys(spec.close for spec in ATTRIBUTES.values()))

# snake_case spellings of the camelCase background names
ALIASES: Mapping[str, str] = {f"bg_{name}": _bg_name(name) for name in BG}


def resolve_name(name: str) -> str | None:
    """
    Map an attribute name or alias to its canonical name.

    Returns:
        The canonical name, or None if the name is not an attribute.
    """
    if name in ATTRIBUTES:
        return name
    return ALIASES.get(name)
