"""Writing CSV records to a text stream."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from justcsv.errors import WriteHeadersAfterRecordsError


class NewLine(Enum):
    """Standard line terminators."""

    RFC = "\r\n"
    UNIX = "\n"


@dataclass(frozen=True)
class CsvWriterConfig:
    """Options of a :class:`CsvWriter`.

    ``newline`` is a :class:`NewLine` member or any custom terminator string.
    """

    separator: str = ","
    escape: str = '"'
    newline: NewLine | str = NewLine.RFC

    def __post_init__(self) -> None:
        if len(self.escape) != 1:
            raise ValueError("escape must be a single character")

    @property
    def line_terminator(self) -> str:
        """The text written between records."""
        if isinstance(self.newline, NewLine):
            return self.newline.value
        return self.newline


class CsvWriter:
    """Writes records of string fields as comma separated values."""

    def __init__(self, dest: TextIO, config: CsvWriterConfig | None = None) -> None:
        self._dest = dest
        self.config = config if config is not None else CsvWriterConfig()
        self._dirty = False

    def write_row(self, row: Iterable[str]) -> None:
        """Write one record, preceded by a line terminator unless it is the first."""
        if self._dirty:
            self._dest.write(self.config.line_terminator)
        else:
            self._dirty = True
        self._dest.write(self.config.separator.join(self._escape_if_needed(f) for f in row))

    def write_headers(self, headers: Iterable[str]) -> None:
        """Write the header row; it must come before any record."""
        if self._dirty:
            raise WriteHeadersAfterRecordsError()
        self.write_row(headers)

    def write_document(self, doc: Iterable[Iterable[str]]) -> None:
        """Write every record of ``doc``."""
        for row in doc:
            self.write_row(row)

    def _escape_if_needed(self, field: str) -> str:
        separator = self.config.separator
        escape = self.config.escape
        if any(c < " " or c in separator or c == escape for c in field):
            return '"' + field.replace(escape, escape * 2) + '"'
        return field