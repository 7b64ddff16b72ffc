"""Composable, immutable stylers."""
from __future__ import annotations

import re
import threading
from dataclasses import dataclass, field
from typing import Any, Sequence

from .attributes import ATTRIBUTES, CLOSE_CODES, RESET_CODE, resolve_name
from .color_mode import COLOR_MODE, ColorMode

__all__ = ["Styler", "base_styler", "derive"]


@dataclass(frozen=True, eq=False)
class Styler:
    """
    Accumulated set of attributes that can be applied to text.

    Accessing an attribute name (``styler.cyan``) derives a child styler
    that applies this style and then the attribute. Children are cached on
    the parent, so repeated access returns the same instance.

    Calling a styler wraps text in its open/close sequences, rewriting any
    close sequences already inside the text so that the enclosing style is
    restored instead of cleared.
    """

    open_prefix: str = ""
    close_suffix: str = ""
    substitutions: tuple[tuple[str, str], ...] = ()
    mode: ColorMode = field(default_factory=lambda: COLOR_MODE)
    path: tuple[str, ...] = ()

    _children: dict[str, Styler] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _table: dict[str, str] = field(init=False, repr=False)
    _pattern: re.Pattern[str] | None = field(init=False, repr=False)

    def __post_init__(self) -> None:
        table = dict(self.substitutions)
        if table:
            # Close codes from other families restore this style as a whole
            for code in CLOSE_CODES:
                table.setdefault(code, code + self.open_prefix)
        pattern = re.compile("|".join(re.escape(key) for key in table)) if table else None
        object.__setattr__(self, "_table", table)
        object.__setattr__(self, "_pattern", pattern)

    def __getattr__(self, name: str) -> Styler:
        if name.startswith("_"):
            raise AttributeError(name)
        canonical = resolve_name(name)
        if canonical is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        children = self._children
        child = children.get(canonical)
        if child is None:
            with self._lock:
                child = children.get(canonical)
                if child is None:
                    child = derive(self, canonical)
                    children[canonical] = child
        return child

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(ATTRIBUTES))

    def __repr__(self) -> str:
        return f"<Styler {'.'.join(self.path) or 'base'}>"

    def __call__(self, text: Any, *values: Any) -> str:
        """
        Style text.

        Args:
            text: A string, a sequence of literal parts to splice with
                ``values``, or a template string object (``strings`` plus
                ``interpolations`` or ``values``)
            values: Values interpolated between literal parts

        Returns:
            Styled text (or the flattened text if colors are disabled)
        """
        text = _flatten(text, values)

        if not self.mode.enabled:
            return text

        pattern = self._pattern
        if pattern is not None and pattern.search(text):
            table = self._table
            text = pattern.sub(lambda m: table.get(m.group(0), m.group(0)), text)

        return self.open_prefix + text + self.close_suffix

    def chain(self, *names: str) -> Styler:
        """Apply attribute names in order; each may be a dotted path like "cyan.bold"."""
        styler = self
        for name in names:
            for part in name.split("."):
                styler = getattr(styler, part.strip())
        return styler

    def with_mode(self, mode: ColorMode) -> Styler:
        """Rebuild this attribute chain on a base using another color mode."""
        if mode == self.mode:
            return self
        return base_styler(mode).chain(*self.path)


def _splice(parts: Sequence[Any], values: Sequence[Any]) -> str:
    out: list[str] = [str(parts[0])] if parts else []
    for i, value in enumerate(values):
        out.append(str(value))
        if i + 1 < len(parts):
            out.append(str(parts[i + 1]))
    # literal parts beyond the last value are kept as-is
    out.extend(str(part) for part in parts[len(values) + 1:])
    return "".join(out)


def _render_interpolation(item: Any) -> str:
    value = item.value
    conversion = getattr(item, "conversion", None)
    if conversion == "r":
        value = repr(value)
    elif conversion == "s":
        value = str(value)
    elif conversion == "a":
        value = ascii(value)
    return format(value, getattr(item, "format_spec", "") or "")


def _flatten(text: Any, values: Sequence[Any]) -> str:
    if isinstance(text, str):
        return _splice((text,), values) if values else text
    if isinstance(text, (tuple, list)) and values:
        return _splice(text, values)

    # PEP 750 template strings
    strings = getattr(text, "strings", None)
    if isinstance(strings, tuple):
        interpolations = getattr(text, "interpolations", None)
        if isinstance(interpolations, tuple):
            rendered = tuple(_render_interpolation(item) for item in interpolations)
            return _splice(strings, rendered + tuple(values))
        t_values = getattr(text, "values", None)
        if isinstance(t_values, tuple):
            return _splice(strings, t_values + tuple(values))

    return _splice((text,), values)


def derive(parent: Styler, name: str) -> Styler:
    """
    Build the styler for ``parent`` followed by attribute ``name``.

    Raises:
        KeyError: If name is not a canonical attribute name
    """
    spec = ATTRIBUTES[name]

    table = dict(parent.substitutions)
    table[RESET_CODE] = table.get(RESET_CODE, RESET_CODE) + spec.open
    # for reset both rules hit the same key, so its open code lands twice
    table[spec.close] = table.get(spec.close, spec.close) + spec.open

    return Styler(
        open_prefix=parent.open_prefix + spec.open,
        close_suffix=spec.close + parent.close_suffix,
        substitutions=tuple(table.items()),
        mode=parent.mode,
        path=parent.path + (name,),
    )


def base_styler(mode: ColorMode | None = None) -> Styler:
    """Create an identity styler; attributes derived from it share ``mode``."""
    return Styler(mode=COLOR_MODE if mode is None else mode)
