"""Reading CSV records from a text stream."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from justcsv.errors import CsvError, IncompleteRecordError, UnexpectedEofError
from justcsv.parse import record


@dataclass(frozen=True)
class CsvReaderConfig:
    """Options of a :class:`CsvReader`."""

    has_headers: bool = False
    separator: str = ","
    escape: str = '"'

    def __post_init__(self) -> None:
        for name in ("separator", "escape"):
            if len(getattr(self, name)) != 1:
                raise ValueError(f"{name} must be a single character")


class CsvReader(Iterator[list[str]]):
    """Iterator over the records of a UTF-8 comma separated text stream.

    A record may span several lines when a quoted field holds line breaks.
    A malformed record raises an error; iteration may continue afterwards
    with the next record.
    """

    def __init__(self, source: TextIO, config: CsvReaderConfig | None = None) -> None:
        self._source = source
        self.config = config if config is not None else CsvReaderConfig()
        self._headers: list[str] | None = None
        if self.config.has_headers:
            try:
                self._headers = self._read_row()
            except (CsvError, OSError, UnicodeDecodeError):
                self._headers = None

    def headers(self) -> list[str] | None:
        """Return the header row, or ``None`` if none was expected or it failed to parse."""
        return list(self._headers) if self._headers is not None else None

    def __iter__(self) -> CsvReader:
        return self

    def __next__(self) -> list[str]:
        row = self._read_row()
        if row is None:
            raise StopIteration
        return row

    def _read_row(self) -> list[str] | None:
        """Read one record, or return ``None`` at the end of the stream."""
        record_line = ""
        while True:
            line = self._source.readline()
            if not line:
                if not record_line:
                    return None
                raise UnexpectedEofError()
            record_line += line
            try:
                _, fields = record(record_line, self.config.separator, self.config.escape)
            except IncompleteRecordError:
                continue
            return fields