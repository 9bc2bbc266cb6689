"""Row writer and output format constants.

Fields are joined verbatim: commas, quotes and newlines inside a field are
not escaped or quoted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from csvmarshal.errors import EmptyRecordError

if TYPE_CHECKING:
    from collections.abc import Sequence  # pragma: no cover
    from io import StringIO  # pragma: no cover

DELIMITER = ","
LINE_TERMINATOR = "\n"
# Output is always UTF-8 without a byte-order mark.
OUTPUT_ENCODING = "utf-8"


def join_record(fields: Sequence[str]) -> str:
    """Join fields into one newline-terminated row.

    Raises:
        EmptyRecordError: If `fields` is empty.

    Example:
        >>> join_record(["a", "b", "c"])
        'a,b,c\\n'
    """
    if len(fields) == 0:
        raise EmptyRecordError
    return DELIMITER.join(fields) + LINE_TERMINATOR


def write_record(buf: StringIO, fields: Sequence[str]) -> None:
    """Append one row to `buf`."""
    buf.write(join_record(fields))
