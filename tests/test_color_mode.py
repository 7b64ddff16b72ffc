from __future__ import annotations

import io
import os
from unittest.mock import patch

from tint.color_mode import detect_color_mode


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


def _auto(env: dict[str, str], argv: list[str] | None = None, *, tty: bool = False, platform: str = "linux") -> bool:
    stream = _Tty() if tty else io.StringIO()
    return detect_color_mode("auto", env=env, argv=argv or [], stream=stream, platform=platform).enabled


def test_explicit_modes() -> None:
    assert detect_color_mode("always").enabled is True
    assert detect_color_mode("never").enabled is False
    assert detect_color_mode(" ALWAYS ").enabled is True


def test_no_color_beats_force_color() -> None:
    assert _auto({"NO_COLOR": "1", "FORCE_COLOR": "1"}) is False
    assert _auto({"NO_COLOR": "1"}, tty=True) is False


def test_argv_flags() -> None:
    assert _auto({}, ["prog", "--no-color", "--color"]) is False
    assert _auto({}, ["prog", "--color"]) is True


def test_node_disable_colors() -> None:
    assert _auto({"NODE_DISABLE_COLORS": "1"}, tty=True) is False


def test_force_color() -> None:
    assert _auto({"FORCE_COLOR": "1"}) is True


def test_windows_enabled() -> None:
    assert _auto({}, platform="win32") is True


def test_tty_and_term() -> None:
    assert _auto({"TERM": "xterm-256color"}, tty=True) is True
    assert _auto({"TERM": "dumb"}, tty=True) is False


def test_ci_enabled_without_tty() -> None:
    assert _auto({"CI": "true"}) is True


def test_piped_output_disabled() -> None:
    assert _auto({}) is False


def test_empty_values_are_ignored() -> None:
    assert _auto({"NO_COLOR": "", "FORCE_COLOR": "1"}) is True


def test_closed_stream_is_not_a_tty() -> None:
    stream = io.StringIO()
    stream.close()
    mode = detect_color_mode("auto", env={}, argv=[], stream=stream, platform="linux")
    assert mode.enabled is False


def test_defaults_read_os_environ() -> None:
    with patch.dict(os.environ, {"FORCE_COLOR": "1"}, clear=True):
        assert detect_color_mode(argv=[], stream=io.StringIO(), platform="linux").enabled is True
    with patch.dict(os.environ, {}, clear=True):
        assert detect_color_mode(argv=[], stream=io.StringIO(), platform="linux").enabled is False
