"""Capabilities a value can expose to be marshaled.

A value is never required to inherit from anything here: the dispatcher
checks for the methods at run time.

    - DirectEncodable: `marshal_csv()` returns finished bytes.
    - RecordEncodable: `header()` and `record()` return one row each.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class DirectEncodable(Protocol):
    """A value that produces its own complete CSV output.

    Implementations are responsible for the format of what they return.
    Failures are reported by raising; the exception reaches the caller unchanged.
    """

    def marshal_csv(self) -> bytes: ...


@runtime_checkable
class RecordEncodable(Protocol):
    """A value that maps onto a single CSV row.

    `header()` and `record()` should return sequences of the same length.
    """

    def header(self) -> Sequence[str]: ...

    def record(self) -> Sequence[str]: ...


@dataclass(frozen=True)
class Marshaler:
    """Precomputed DirectEncodable result."""

    data: bytes
    error: BaseException | None = None

    def marshal_csv(self) -> bytes:
        if self.error is not None:
            raise self.error
        return self.data


@dataclass(frozen=True)
class Recorder:
    """RecordEncodable over a fixed header and record."""

    header_fields: Sequence[str]
    record_fields: Sequence[str]

    def header(self) -> Sequence[str]:
        return self.header_fields

    def record(self) -> Sequence[str]:
        return self.record_fields


def new_marshaler(data: bytes, error: BaseException | None = None) -> Marshaler:
    return Marshaler(data, error)


def new_recorder(header: Sequence[str], record: Sequence[str]) -> Recorder:
    return Recorder(header, record)
