"""Parsing of a single CSV record."""

from __future__ import annotations

from collections.abc import Callable

from justcsv.errors import IncompleteRecordError, ParseFailedError

# Characters with the Unicode White_Space property.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _trim_start(text: str) -> str:
    return text.lstrip(_WHITESPACE)


def _textdata(src: str, stop: Callable[[str], bool]) -> tuple[str, str]:
    """Take characters up to the first one matching ``stop``."""
    end = next((i for i, c in enumerate(src) if stop(c)), len(src))
    return src[end:], src[:end]


def _escaped(src: str, comma: str, dquote: str) -> tuple[str, str] | None:
    """Parse a quoted field.

    Returns ``None`` when ``src`` does not start with a quoted field, so the
    caller may try plain text instead.
    """
    trimmed = _trim_start(src)
    if not trimmed.startswith(dquote):
        return None
    rest = trimmed[len(dquote):]
    pos = 0
    while True:
        i = rest.find(dquote, pos)
        if i < 0:
            raise IncompleteRecordError()
        after = i + len(dquote)
        if after == len(rest):
            return "", rest[:i]
        if rest.startswith(dquote, after):
            pos = after + len(dquote)
            continue
        remainder = _trim_start(rest[after:])
        if remainder.startswith(comma) or not remainder or ord(remainder[0]) < 0x20:
            return remainder, rest[:i]
        offset = len(src) - len(remainder)
        raise ParseFailedError(
            f"unexpected character {remainder[0]!r} after closing quote at offset {offset}"
        )


def _field(src: str, comma: str, dquote: str) -> tuple[str, str]:
    parsed = _escaped(src, comma, dquote)
    if parsed is None:
        parsed = _textdata(src, lambda c: c < " " or c == comma or c == dquote)
    rest, value = parsed
    return rest, value.replace(dquote * 2, dquote)


def record(src: str, comma: str = ",", dquote: str = '"') -> tuple[str, list[str]]:
    """Parse one record from the start of ``src``.

    Returns the unparsed remainder and the list of field values. Raises
    :class:`IncompleteRecordError` when a quoted field is not closed yet and
    :class:`ParseFailedError` when the input is malformed.
    """
    rest, value = _field(src, comma, dquote)
    fields = [value]
    while rest.startswith(comma):
        rest, value = _field(rest[len(comma):], comma, dquote)
        fields.append(value)
    return rest, fields