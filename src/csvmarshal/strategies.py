"""Encoding strategies.

Each strategy turns one shape of value into UTF-8 CSV bytes:

    - DirectStrategy: the value supplies its own bytes.
    - RecordStrategy: one RecordEncodable, header row plus one data row.
    - CollectionStrategy: a `Records` sequence with a RecordEncodable
      element type; header from the first element only.
    - TaggedStrategy: a sequence of dynamically-typed elements that must all
      be RecordEncodable and share the first element's concrete type.
"""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO
from typing import TYPE_CHECKING, Any, ClassVar, cast

from csvmarshal.encoding import OUTPUT_ENCODING, write_record
from csvmarshal.errors import (
    ElementNotRecordEncodableError,
    EmptyCollectionError,
    HeterogeneousElementTypeError,
    RecordLengthMismatchError,
    UnsupportedElementTypeError,
)
from csvmarshal.protocols import DirectEncodable, RecordEncodable
from csvmarshal.records import Records

if TYPE_CHECKING:
    from collections.abc import Iterable  # pragma: no cover

# Sequences that are scalars as far as CSV is concerned.
_SCALAR_SEQUENCES = (str, bytes, bytearray, memoryview)


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def is_record_type(tp: Any) -> bool:
    """Whether instances of `tp` implement `header()` and `record()`."""
    return isinstance(tp, type) and issubclass(tp, RecordEncodable)


def is_interface_type(tp: Any) -> bool:
    """Whether `tp` names a capability rather than a concrete type.

    `object`, `typing.Any` and `Protocol` classes say nothing about the
    concrete type of the elements they describe.
    """
    return tp is object or tp is Any or bool(getattr(tp, "_is_protocol", False))


class CSVStrategy:
    """Base class for encoding strategies."""

    name: ClassVar[str]

    @classmethod
    def accepts(cls, value: Any) -> bool:
        raise NotImplementedError  # pragma: no cover

    @classmethod
    def encode(cls, value: Any, *, strict: bool = False) -> bytes:
        raise NotImplementedError  # pragma: no cover

    @staticmethod
    def _write_rows(
        records: Iterable[RecordEncodable],
        header: Sequence[str],
        *,
        strict: bool,
    ) -> bytes:
        buf = StringIO()
        write_record(buf, header)
        for i, rec in enumerate(records):
            row = rec.record()
            if strict and len(row) != len(header):
                raise RecordLengthMismatchError(len(header), len(row), i)
            write_record(buf, row)
        return buf.getvalue().encode(OUTPUT_ENCODING)


class DirectStrategy(CSVStrategy):
    name = "direct"

    @classmethod
    def accepts(cls, value: Any) -> bool:
        return isinstance(value, DirectEncodable)

    @classmethod
    def encode(cls, value: Any, *, strict: bool = False) -> bytes:
        # Output is whatever the value returns; neither checked nor re-encoded.
        return cast("DirectEncodable", value).marshal_csv()


class RecordStrategy(CSVStrategy):
    name = "record"

    @classmethod
    def accepts(cls, value: Any) -> bool:
        return isinstance(value, RecordEncodable)

    @classmethod
    def encode(cls, value: Any, *, strict: bool = False) -> bytes:
        rec = cast("RecordEncodable", value)
        return cls._write_rows([rec], rec.header(), strict=strict)


class CollectionStrategy(CSVStrategy):
    """Homogeneous collection with a declared RecordEncodable element type.

    Only the first element's header is read. Elements after the first are
    not checked against it. A `Records` declaring an interface element type
    holds dynamically-typed elements, so those get the tagged checks.
    """

    name = "collection"

    @classmethod
    def accepts(cls, value: Any) -> bool:
        return isinstance(value, Records)

    @classmethod
    def encode(cls, value: Any, *, strict: bool = False) -> bytes:
        items = cast("Records[Any]", value)
        if is_record_type(items.element_type):
            if len(items) == 0:
                raise EmptyCollectionError
        elif is_interface_type(items.element_type):
            items = TaggedStrategy.check(items)
        else:
            raise UnsupportedElementTypeError(items.element_type)
        return cls._write_rows(items, items[0].header(), strict=strict)


class TaggedStrategy(CSVStrategy):
    """Collection of dynamically-typed elements.

    Every element must implement `header()` and `record()` and have exactly
    the concrete type of element 0. All elements are checked before any
    output is produced.
    """

    name = "tagged"

    @classmethod
    def accepts(cls, value: Any) -> bool:
        return is_sequence(value)

    @classmethod
    def encode(cls, value: Any, *, strict: bool = False) -> bytes:
        items = cls.check(value)
        return cls._write_rows(items, items[0].header(), strict=strict)

    @staticmethod
    def check(items: Sequence[Any]) -> Sequence[RecordEncodable]:
        """Verify that `items` is non-empty, RecordEncodable and uniformly typed.

        Raises:
            EmptyCollectionError: If `items` is empty.
            ElementNotRecordEncodableError: On the first element lacking
                `header()`/`record()`.
            HeterogeneousElementTypeError: On the first element whose type
                differs from element 0's.
        """
        if len(items) == 0:
            raise EmptyCollectionError
        expected = type(items[0])
        for i, item in enumerate(items):
            actual = type(item)
            if not isinstance(item, RecordEncodable):
                raise ElementNotRecordEncodableError(i, actual)
            if actual is not expected:
                raise HeterogeneousElementTypeError(expected, actual, i)
        return cast("Sequence[RecordEncodable]", items)
