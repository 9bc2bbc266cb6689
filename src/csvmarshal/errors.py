"""Exceptions raised by csvmarshal.

Every error the library raises itself derives from `CSVMarshalError`.
Exceptions raised by a value's own `marshal_csv()` are never wrapped.
"""

from __future__ import annotations


def _type_name(tp: type) -> str:
    return f"{tp.__module__}.{tp.__qualname__}"


class CSVMarshalError(Exception):
    """Base error for csvmarshal."""


class UnsupportedTypeError(CSVMarshalError):
    """The value exposes none of the recognized capabilities."""

    def __init__(self, value_type: type, reason: str | None = None) -> None:
        self.value_type = value_type
        msg = f"cannot marshal type {_type_name(value_type)}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class UnsupportedElementTypeError(CSVMarshalError):
    """A collection declares a concrete element type that is not RecordEncodable."""

    def __init__(self, element_type: type) -> None:
        self.element_type = element_type
        super().__init__(
            f"collection element type {_type_name(element_type)} does not implement "
            "header() and record()"
        )


class EmptyCollectionError(CSVMarshalError):
    """A collection strategy received zero elements; no header can be inferred."""

    def __init__(self) -> None:
        super().__init__("no data")


class ElementNotRecordEncodableError(CSVMarshalError):
    """An element of a tagged collection lacks header() or record()."""

    def __init__(self, index: int, actual_type: type) -> None:
        self.index = index
        self.actual_type = actual_type
        super().__init__(
            f"element {index} of type {_type_name(actual_type)} does not implement "
            "header() and record()"
        )


class HeterogeneousElementTypeError(CSVMarshalError):
    """An element of a tagged collection differs in type from element 0."""

    def __init__(self, expected_type: type, actual_type: type, index: int) -> None:
        self.expected_type = expected_type
        self.actual_type = actual_type
        self.index = index
        super().__init__(
            f"element {index} has type {_type_name(actual_type)}, "
            f"expected {_type_name(expected_type)}"
        )


class EmptyRecordError(CSVMarshalError):
    """The row writer was given zero fields."""

    def __init__(self) -> None:
        super().__init__("cannot write a row with no fields")


class RecordLengthMismatchError(CSVMarshalError):
    """Header and record widths differ (strict mode only)."""

    def __init__(self, header_length: int, record_length: int, index: int = 0) -> None:
        self.header_length = header_length
        self.record_length = record_length
        self.index = index
        super().__init__(
            f"record {index} has {record_length} fields, header has {header_length}"
        )
