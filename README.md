# justcsv

A small reader and writer for UTF-8 comma separated values in the style of
RFC 4180: quoted fields, doubled quotes inside quoted fields, and records
that span several lines when a quoted field holds a newline. It has no
dependencies beyond the standard library.

## Installation

```
pip install justcsv
```

## Reading

`justcsv.reader.CsvReader` wraps a text stream (anything with `readline()`)
and yields one record at a time as a list of strings.

```python
import io
from justcsv.reader import CsvReader

source = io.StringIO('"1",2,3\r\n4, "everybody needs\nmilk",6')
for record in CsvReader(source):
    print(record)
# ['1', '2', '3']
# ['4', 'everybody needs\nmilk', '6']
```

Whitespace before an opening quote and after a closing quote is ignored.
A record that cannot be parsed raises an error from `justcsv.errors`:

- `ParseFailedError` when something other than the separator or a line end
  follows a closing quote;
- `UnexpectedEofError` when the stream ends inside a quoted field.

After a `ParseFailedError` the reader can be advanced again to continue
with the next record.

### Options

`CsvReaderConfig` is a frozen dataclass with these fields:

| field         | default | meaning                                   |
|---------------|---------|-------------------------------------------|
| `has_headers` | `False` | take the first record as the header row   |
| `separator`   | `","`   | field separator, a single character       |
| `escape`      | `'"'`   | quote character, a single character       |

A `separator` or `escape` of any other length raises `ValueError`.

```python
import io
from justcsv.reader import CsvReader, CsvReaderConfig

reader = CsvReader(io.StringIO("Col 1,Col 2\r\n1,2"), CsvReaderConfig(has_headers=True))
print(reader.headers())   # ['Col 1', 'Col 2']
print(next(reader))       # ['1', '2']
```

`headers()` returns `None` when no headers were expected, or when the
header row could not be read.

### Parsing a single record

`justcsv.parse.record(src, comma=",", dquote='"')` parses one record from
the start of a string and returns the unparsed remainder together with the
list of fields. It raises `IncompleteRecordError` when a quoted field is
not yet closed and `ParseFailedError` when the input is malformed.

## Writing

`justcsv.writer.CsvWriter` writes rows of strings to a text stream. A field
that contains a control character, a character of the separator or the
escape character is wrapped in double quotes, with the escape character
doubled. Rows are separated by a line terminator; nothing is written after
the last row.

```python
import io
from justcsv.writer import CsvWriter

dest = io.StringIO()
writer = CsvWriter(dest)
writer.write_row(["1", "2", "3"])
writer.write_row(["4", '5"abc"X', "6\n\tagain"])
print(repr(dest.getvalue()))
# '1,2,3\r\n4,"5""abc""X","6\n\tagain"'
```

- `write_row(row)` writes one record.
- `write_headers(headers)` behaves like `write_row` but raises
  `WriteHeadersAfterRecordsError` once any row has been written.
- `write_document(doc)` writes every row of an iterable of rows.

### Options

`CsvWriterConfig` is a frozen dataclass with these fields:

| field       | default       | meaning                                        |
|-------------|---------------|------------------------------------------------|
| `separator` | `","`         | text placed between fields                     |
| `escape`    | `'"'`         | character doubled inside quoted fields         |
| `newline`   | `NewLine.RFC` | `NewLine.RFC` (`\r\n`), `NewLine.UNIX` (`\n`) or any custom string |

An `escape` that is not a single character raises `ValueError`. The
`line_terminator` property gives the text written between rows.

## Errors

All errors derive from `justcsv.errors.CsvError`.
`CsvError.custom(value)` builds an error whose message is `str(value)`.

## Command-line tools

Print every record of a CSV file, numbered from 0:

```
justcsv-read data.csv
```

On a read or parse error the message goes to standard error and the exit
status is 1.

Print a table of `x` and `log(x)` for `x` from 0 to 65534 (`log(0)` is
printed as `-inf`); natural logarithms by default, base-2 logarithms when
any argument is given:

```
justcsv-log-table
justcsv-log-table 2
```

## Limitations

Fields are always returned and written as strings; there is no type
conversion, no mapping of rows to dictionaries by header, and no check
that records have the same number of fields.