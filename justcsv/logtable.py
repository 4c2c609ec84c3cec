"""Command that prints a table of logarithms as CSV."""

from __future__ import annotations

import io
import math
import sys
from collections.abc import Callable, Sequence
from decimal import Decimal

from justcsv.writer import CsvWriter

HEADERS = ("x", "log(x)")
_LIMIT = 0xFFFF


def _format_float(value: float) -> str:
    """Shortest round-tripping decimal form, without exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _safe_log(func: Callable[[float], float], x: int) -> float:
    return -math.inf if x == 0 else func(x)


def natural_log(writer: CsvWriter) -> None:
    """Write one row per integer with its natural logarithm."""
    for x in range(_LIMIT):
        writer.write_row([str(x), _format_float(_safe_log(math.log, x))])


def log2(writer: CsvWriter) -> None:
    """Write the whole table of base-2 logarithms as one document."""
    data = [[str(x), _format_float(_safe_log(math.log2, x))] for x in range(_LIMIT)]
    writer.write_document(data)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the table; any argument selects base-2 logarithms."""
    args = list(sys.argv[1:] if argv is None else argv)
    table = io.StringIO()
    writer = CsvWriter(table)
    writer.write_headers(HEADERS)
    if args:
        log2(writer)
    else:
        natural_log(writer)
    print(table.getvalue())
    return 0


if __name__ == "__main__":
    sys.exit(main())