"""Color enablement detection."""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Sequence, TextIO

__all__ = [
    "ColorMode",
    "COLOR_MODE",
    "detect_color_mode",
]


@dataclass(frozen=True)
class ColorMode:
    """Color mode configuration."""

    enabled: bool


def _isatty(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def detect_color_mode(
    mode: str = "auto",
    *,
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
    stream: TextIO | None = None,
    platform: str | None = None,
) -> ColorMode:
    """
    Detect whether colors should be enabled.

    Args:
        mode: "auto", "always", or "never"
        env: Environment to consult (defaults to os.environ)
        argv: Command line to scan for --color / --no-color (defaults to sys.argv)
        stream: Output stream checked for a TTY (defaults to sys.stdout)
        platform: Platform name (defaults to sys.platform)

    Returns:
        ColorMode with enabled flag set appropriately.
    """
    m = (mode or "auto").lower().strip()

    if m == "never":
        return ColorMode(enabled=False)
    if m == "always":
        return ColorMode(enabled=True)

    env = os.environ if env is None else env
    argv = sys.argv if argv is None else argv
    stream = sys.stdout if stream is None else stream
    platform = sys.platform if platform is None else platform

    # Explicit opt-out wins over everything else
    if env.get("NO_COLOR") or "--no-color" in argv or env.get("NODE_DISABLE_COLORS"):
        return ColorMode(enabled=False)

    if env.get("FORCE_COLOR") or "--color" in argv:
        return ColorMode(enabled=True)

    if platform == "win32":
        return ColorMode(enabled=True)

    if _isatty(stream) and env.get("TERM") != "dumb":
        return ColorMode(enabled=True)

    return ColorMode(enabled=bool(env.get("CI")))


# Resolved once per process; stylers read it, never recompute it.
COLOR_MODE = detect_color_mode()
