"""Command that prints every record of a CSV file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from justcsv.errors import CsvError
from justcsv.reader import CsvReader


def main(argv: Sequence[str] | None = None) -> int:
    """Print the numbered records of the CSV file named on the command line."""
    parser = argparse.ArgumentParser(prog="readcsv", description="Print the records of a CSV file.")
    parser.add_argument("path", type=Path, help="CSV file to read")
    args = parser.parse_args(argv)
    try:
        with args.path.open(encoding="utf-8", newline="\n") as source:
            for line, row in enumerate(CsvReader(source)):
                print(f"{line:4}. {row!r}")
    except (CsvError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())