"""Tests for the row writer."""

from __future__ import annotations

from io import StringIO

import pytest

from csvmarshal import EmptyRecordError
from csvmarshal.encoding import join_record, write_record


def test_join_three_fields() -> None:
    assert join_record(["a", "b", "c"]) == "a,b,c\n"


def test_join_single_field() -> None:
    assert join_record(["x"]) == "x\n"


def test_join_empty_strings_keep_separators() -> None:
    assert join_record(["", ""]) == ",\n"


def test_join_does_not_escape() -> None:
    # Embedded delimiters, quotes and newlines are written as is.
    assert join_record(['a,b', '"q"', "l1\nl2"]) == 'a,b,"q",l1\nl2\n'


def test_join_accepts_tuples() -> None:
    assert join_record(("1", "2")) == "1,2\n"


def test_join_no_fields_raises() -> None:
    with pytest.raises(EmptyRecordError, match="no fields"):
        join_record([])


def test_write_record_appends() -> None:
    buf = StringIO()
    write_record(buf, ["id", "name"])
    write_record(buf, ["1", "Alice"])
    assert buf.getvalue() == "id,name\n1,Alice\n"


def test_write_record_no_fields_writes_nothing() -> None:
    buf = StringIO()
    with pytest.raises(EmptyRecordError):
        write_record(buf, [])
    assert buf.getvalue() == ""
