#!/usr/bin/env python3
"""
scripts/transpose_chart.py — Print a Nashville Number chart in a chosen key.

The key comes from --key, else from an "Original Key: X" header line, else C.

    python scripts/transpose_chart.py songs/amazing_grace.txt --key G --plain
"""

import argparse
import logging
import os
import sys

# Ensure src module is importable
_HERE = os.path.dirname(os.path.abspath(__file__))
_ROOT = os.path.dirname(_HERE)
sys.path.insert(0, _ROOT)

from src.chart import ChartSession, UnsupportedKeyError
from src.constants import SUPPORTED_KEYS
from src.resolver import render_chord_span, render_plain


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert Nashville numbers in a chart to chords.")
    parser.add_argument("file", nargs="?", help="Chart text file (reads stdin when omitted)")
    parser.add_argument("--key", "-k", default=None,
                        help="Target key (default: header key, then C)")
    parser.add_argument("--plain", action="store_true",
                        help="Print bare chord names instead of <span> markup")
    parser.add_argument("--list-keys", action="store_true",
                        help="Print the supported keys and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log per-token diagnostics to stderr")
    args = parser.parse_args(argv)

    if args.list_keys:
        print(" ".join(SUPPORTED_KEYS))
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.file:
            with open(args.file, encoding="utf-8") as f:
                text = f.read()
        else:
            text = sys.stdin.read()
    except OSError as e:
        print(f"Error reading {args.file}: {e}", file=sys.stderr)
        return 1

    render = render_plain if args.plain else render_chord_span
    try:
        session = ChartSession(text, key=args.key, render=render)
    except UnsupportedKeyError as e:
        print(f"{e}. Choose one of: {' '.join(SUPPORTED_KEYS)}", file=sys.stderr)
        return 2

    if args.verbose:
        print(f"Key: {session.current_key}", file=sys.stderr)
    sys.stdout.write(session.display)
    return 0


if __name__ == "__main__":
    sys.exit(main())
