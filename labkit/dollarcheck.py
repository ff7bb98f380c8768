"""Check that a file contains no dollar sign."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO


def find_dollar(stream: TextIO) -> int | None:
    """Return the line number (from 1) of the first '$', or None."""
    for linenr, line in enumerate(stream, start=1):
        if "$" in line:
            return linenr
    return None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Report a dollar sign in a file.")
    parser.add_argument("file", nargs="?", default="myfile.in")
    args = parser.parse_args(argv)

    try:
        with open(args.file, encoding="utf-8") as f:
            linenr = find_dollar(f)
    except OSError as e:
        print(f"Error opening file.: {e.strerror}", file=sys.stderr)
        return 0

    if linenr is not None:
        print(f"illegal dollar sign in line {linenr}")
        return 1
    return 0