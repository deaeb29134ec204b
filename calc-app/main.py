"""
Resistor Code - Command-Line Entry Point

Front end for the color-code engine.  Every domain error raised by the
engine is caught here and turned into a one-line message on stderr with
exit status 1; nothing below this module prints.

Usage
-----
  resistor-code decode Brown Black Orange Gold
  resistor-code encode 4.7 --unit kΩ --tolerance 5 --bands 4
  resistor-code detect reply.json        (or '-' for stdin)
  resistor-code table
  resistor-code example --bands 6
"""

from __future__ import annotations

import argparse
import logging
import sys

import config
from band_detection import decode_detection, parse_detection_response
from color_code import describe
from color_table import COLOR_TABLE, format_multiplier
from errors import ColorCodeError
from inverse_calc import encode, parse_resistance, standard_tolerances

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resistor-code",
        description="Decode and encode resistor color bands.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output"
    )
    sub = parser.add_subparsers(dest="command", help="Command to run")

    p = sub.add_parser("decode", help="Band colors → resistance")
    p.add_argument("bands", nargs="+", metavar="BAND", help="Band colors, left to right")

    p = sub.add_parser("encode", help="Resistance → band colors")
    p.add_argument("value", help="Resistance, e.g. 4.7 or 4.7k")
    p.add_argument("-u", "--unit", default="Ω", help="Ω, kΩ or MΩ (default: Ω)")
    p.add_argument(
        "-t", "--tolerance", type=float, default=config.DEFAULT_TOLERANCE,
        help="Tolerance in percent: "
        + ", ".join(f"{pct:g}" for pct, _ in standard_tolerances())
        + f" (default: {config.DEFAULT_TOLERANCE:g})",
    )
    p.add_argument(
        "-b", "--bands", type=int, choices=(4, 5), default=config.DEFAULT_BAND_COUNT,
        help=f"Number of bands (default: {config.DEFAULT_BAND_COUNT})",
    )

    p = sub.add_parser("detect", help="Decode a vision-service JSON reply")
    p.add_argument("file", help="Path to the reply, or '-' for stdin")

    sub.add_parser("table", help="Print the color table")

    p = sub.add_parser("example", help="Decode an example resistor")
    p.add_argument(
        "-b", "--bands", type=int, choices=sorted(config.EXAMPLE_BANDS),
        default=config.DEFAULT_BAND_COUNT,
    )
    return parser


def _format_table() -> str:
    def cell(value) -> str:
        return "-" if value is None else f"{value:g}"

    lines = [f"{'Color':<8}{'Digit':>6}{'Mult':>8}{'Tol %':>8}{'TCR':>6}"]
    for color, entry in COLOR_TABLE.items():
        mult = "-" if entry.multiplier is None else format_multiplier(entry.multiplier)
        lines.append(
            f"{color.value:<8}{cell(entry.digit_value):>6}{mult:>8}"
            f"{cell(entry.tolerance):>8}{cell(entry.tcr):>6}"
        )
    return "\n".join(lines)


def _read_reply(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def run(args: argparse.Namespace) -> str:
    """Execute one parsed command and return its output text."""
    if args.command == "decode":
        return describe(args.bands)

    if args.command == "encode":
        ohms = parse_resistance(args.value, args.unit)
        bands = encode(ohms, args.tolerance, args.bands)
        return describe(bands)

    if args.command == "detect":
        names = parse_detection_response(_read_reply(args.file))
        reading = decode_detection(names)
        return f"{'-'.join(c.value for c in reading.bands)} ({reading.display})"

    if args.command == "table":
        return _format_table()

    if args.command == "example":
        return describe(config.EXAMPLE_BANDS[args.bands])

    raise ValueError(f"unknown command {args.command!r}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        stream=sys.stdout,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        output = run(args)
    except ColorCodeError as exc:
        log.debug("%s failed: %r", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
