from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

if __package__ in (None, ""):
    # Allow both:
    # - python -m berlin_clock.main ...
    # - python berlin_clock/main.py ...
    import os

    sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from berlin_clock.converter import InvalidTimeFormat, convert_time, convert_time_rows
from berlin_clock.render import render_json, render_text, to_data

SELFTEST_CASES = {
    "00:00:00": "Y\nOOOO\nOOOO\nOOOOOOOOOOO\nOOOO",
    "13:17:01": "O\nRROO\nRRRO\nYYROOOOOOOO\nYYOO",
    "24:00:00": "Y\nRRRR\nRRRR\nOOOOOOOOOOO\nOOOO",
    "23:59:59": "O\nRRRR\nRRRO\nYYRYYRYYRYY\nYYYY",
}
SELFTEST_REJECTED = ("24:01:00", "9:00:00", "12:60:00", "")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="berlin-clock",
        description="Convert an HH:mm:ss time to Berlin Clock lamp rows.",
    )

    p.add_argument("time", nargs="?", help="Wall-clock time in HH:mm:ss (or 24:00:00)")
    p.add_argument("--json", dest="as_json", action="store_true", help="print rows as JSON")
    p.add_argument("--selftest", action="store_true", help="run built-in sanity checks")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    return p


def run_selftest() -> int:
    for text, expected in SELFTEST_CASES.items():
        assert convert_time(text) == expected, text

    for text in SELFTEST_REJECTED:
        try:
            convert_time(text)
        except InvalidTimeFormat:
            continue
        raise AssertionError(f"{text!r} should be rejected")

    sys.stdout.write("SELFTEST OK\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.selftest:
        return run_selftest()

    if args.time is None:
        parser.error("time is required (unless --selftest)")

    try:
        rows = convert_time_rows(args.time)
    except InvalidTimeFormat as exc:
        parser.error(str(exc))

    if args.as_json:
        sys.stdout.write(render_json(to_data(rows)))
    else:
        sys.stdout.write(render_text(rows))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
