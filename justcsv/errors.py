"""Exception types raised while reading and writing CSV data."""

from __future__ import annotations


class CsvError(Exception):
    """Base class for every error raised by this package."""

    @classmethod
    def custom(cls, value: object) -> CsvError:
        """Build an error whose message is the string form of ``value``."""
        return cls(str(value))


class UnexpectedEofError(CsvError):
    """The stream ended while a record was still incomplete."""

    def __init__(self, message: str = "stream ended before a complete record was parsed") -> None:
        super().__init__(message)


class WriteHeadersAfterRecordsError(CsvError):
    """Headers were written after records had already been written."""

    def __init__(self, message: str = "headers cannot be written after records") -> None:
        super().__init__(message)


class ParseFailedError(CsvError):
    """The input is not valid CSV and cannot become valid with more data."""


class IncompleteRecordError(CsvError):
    """The input ends inside a quoted field; more data is needed."""

    def __init__(self, message: str = "record is incomplete, more input is needed") -> None:
        super().__init__(message)