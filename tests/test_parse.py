import pytest

from justcsv.errors import IncompleteRecordError, ParseFailedError
from justcsv.parse import record


def test_parse_just_record():
    line = "мама,мыла,раму\r\n"
    assert record(line, ",", '"')[1] == ["мама", "мыла", "раму"]


def test_parse_with_escaped():
    line = 'мама, "мыла",раму'
    assert record(line, ",", '"')[1] == ["мама", "мыла", "раму"]


def test_parse_multiline():
    line = 'мама, "мыла\ntwo times"\t\t,раму'
    assert record(line, ",", '"')[1] == ["мама", "мыла\ntwo times", "раму"]


def test_fail_after_dquote():
    with pytest.raises(ParseFailedError):
        record('мама,мыла, "раму"abc', ",", '"')
    assert record('мама,"мыла", "раму" ', ",", '"')[1] == ["мама", "мыла", "раму"]


def test_escaped_dquote():
    line = 'мама, "мыла\n""two times"""\t\t,раму'
    assert record(line, ",", '"')[1] == ["мама", "мыла\n\"two times\"", "раму"]


def test_unclosed_quote_is_incomplete():
    with pytest.raises(IncompleteRecordError):
        record('1,"open field\n', ",", '"')


def test_incomplete_completes_with_more_input():
    first = '4, "everybody needs\n'
    with pytest.raises(IncompleteRecordError):
        record(first)
    assert record(first + 'milk",6')[1] == ["4", "everybody needs\nmilk", "6"]


def test_remainder_is_returned():
    rest, fields = record("1,2,3\r\n4,5,6")
    assert fields == ["1", "2", "3"]
    assert rest == "\r\n4,5,6"


def test_trailing_empty_field():
    assert record("4,5,\r\n")[1] == ["4", "5", ""]


def test_empty_input_gives_single_empty_field():
    assert record("") == ("", [""])


def test_custom_separator_and_escape():
    assert record("a;'b;c';'d''e'", ";", "'")[1] == ["a", "b;c", "d'e"]


def test_unquoted_leading_space_is_kept():
    assert record(" a,b")[1] == [" a", "b"]


def test_closing_quote_followed_by_newline():
    rest, fields = record('"7",8,"9"\r\n')
    assert fields == ["7", "8", "9"]
    assert rest == ""


def test_default_arguments_match_rfc():
    assert record('x,"y"') == record('x,"y"', ",", '"')
    assert record('x,"y"')[1] == ["x", "y"]