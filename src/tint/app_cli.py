from __future__ import annotations

import argparse
import sys
import timeit
from typing import Callable, Sequence

from .color_mode import ColorMode, detect_color_mode
from .styler import Styler, base_styler
from .text import raw_len, strip

SAMPLE = "The quick brown fox jumps over the lazy dog"
VALUE = 42


def _resolve_mode(choice: str) -> ColorMode:
    # The CLI owns --color itself, so argv is not scanned for it again
    return detect_color_mode(choice, argv=())


def paint(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    mode = _resolve_mode(args.color)

    # One-time notice if colors disabled in auto mode
    if args.color == "auto" and not mode.enabled:
        print("[colors disabled: piped output or NO_COLOR set]", file=sys.stderr, flush=True)

    try:
        styler = base_styler(mode).chain(*(args.style or ()))
    except AttributeError as exc:
        parser.error(f"unknown style: {exc}")

    print(styler(" ".join(args.text)))


def strip_view(args: argparse.Namespace) -> None:
    if args.file is None:
        data = sys.stdin.read()
    else:
        try:
            with open(args.file, encoding="utf-8") as fh:
                data = fh.read()
        except OSError as e:
            print(f"Cannot read {args.file}: {e}", file=sys.stderr)
            sys.exit(1)
    sys.stdout.write(strip(data))


def len_view(args: argparse.Namespace) -> None:
    print(raw_len(args.text))


def _bench_cases(base: Styler) -> list[tuple[str, Callable[[], str]]]:
    cached = base.cyan.bold
    cached_template = base.magenta.underline
    return [
        ("cached", lambda: cached(SAMPLE)),
        ("chain", lambda: base.cyan.bold(SAMPLE)),
        ("template", lambda: base.green.bold(("value = ", ""), VALUE)),
        ("cached template", lambda: cached_template(("value = ", ""), VALUE)),
        (
            "nested template",
            lambda: base.red.bold(("hello ", ""), base.yellow.italic("world")),
        ),
    ]


def bench(args: argparse.Namespace) -> None:
    """Time the common styling patterns."""
    base = base_styler(_resolve_mode(args.color))
    n = args.iterations

    lines = []
    header = f"{'Case':<20} | {'Total (ms)':>10} | {'Per call (us)':>13}"
    lines.append(header)
    lines.append("-" * len(header))
    for name, fn in _bench_cases(base):
        total = timeit.timeit(fn, number=n)
        lines.append(f"{name:<20} | {total * 1000.0:10.2f} | {total / n * 1e6:13.3f}")
    print("\n".join(lines))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="tint",
        description="Style terminal text with nested-safe ANSI codes.",
    )
    parser.add_argument("--color", choices=["auto", "always", "never"], default="auto", help="Color mode (default: auto)")
    sub = parser.add_subparsers(dest="command", required=True)

    pt = sub.add_parser("paint", help="Print text with the given styles")
    pt.add_argument("--style", action="append", default=None, help="Attribute chain, e.g. cyan.bold (repeatable)")
    pt.add_argument("text", nargs="+")

    st = sub.add_parser("strip", help="Remove ANSI codes from a file or stdin")
    st.add_argument("file", nargs="?", default=None)

    ln = sub.add_parser("len", help="Visible length of text, ignoring ANSI codes")
    ln.add_argument("text")

    bn = sub.add_parser("bench", help="Time common styling patterns")
    bn.add_argument("--iterations", type=int, default=100_000, help="Calls per case (default: 100000)")

    args = parser.parse_args(argv)
    if args.command == "paint":
        paint(args, parser)
    elif args.command == "strip":
        strip_view(args)
    elif args.command == "len":
        len_view(args)
    elif args.command == "bench":
        if args.iterations <= 0:
            parser.error("--iterations must be positive")
        bench(args)


if __name__ == "__main__":
    main()
