"""csvmarshal dispatcher.

Turns an arbitrary value into CSV bytes by looking at what it can do rather
than what it is:

    - `marshal_csv()` wins over everything else: a type can opt out of the
      generic row format and still be picked up here.
    - `header()` + `record()` gives a header row and one data row.
    - A sequence gives a header row and one data row per element.
    - A `weakref.ref` that matches none of the above is dereferenced and its
      referent marshaled instead.
"""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from csvmarshal.encoding import OUTPUT_ENCODING
from csvmarshal.errors import UnsupportedElementTypeError, UnsupportedTypeError
from csvmarshal.records import Records
from csvmarshal.strategies import (
    CollectionStrategy,
    CSVStrategy,
    DirectStrategy,
    RecordStrategy,
    TaggedStrategy,
    is_interface_type,
    is_record_type,
    is_sequence,
)

logger = logging.getLogger(__name__)

Strategy = Literal["auto", "direct", "record", "collection", "tagged"]


@dataclass(frozen=True)
class EncodingResult:
    """Encoded CSV with the strategy that produced it."""

    strategy: Strategy
    data: bytes

    @property
    def text(self) -> str:
        return self.data.decode(OUTPUT_ENCODING)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.data)


class CSVMarshal:
    """Capability-based CSV encoder.

    Resolution order for ``strategy="auto"`` (first match wins):
        1. marshal_csv(): "direct"
        2. header() and record(): "record"
        3. Records with a RecordEncodable element type: "collection"
           Records with an interface element type (object, Any, a Protocol): "tagged"
           Records with any other element type: UnsupportedElementTypeError
           any other sequence: "tagged"
        4. weakref.ref: dereference and start over
        5. anything else: UnsupportedTypeError
    """

    # Strategy registry
    _strategies: ClassVar[dict[str, type[CSVStrategy]]] = {
        "direct": DirectStrategy,
        "record": RecordStrategy,
        "collection": CollectionStrategy,
        "tagged": TaggedStrategy,
    }

    @staticmethod
    def encode(
        value: Any,
        *,
        strategy: Strategy = "auto",
        strict: bool = False,
    ) -> bytes:
        """Encode a value as CSV.

        Args:
            value: The value to encode.
            strategy: Strategy to use:
                - "auto": Pick one from the value's capabilities (default)
                - "direct": Return ``value.marshal_csv()`` as is
                - "record": One RecordEncodable
                - "collection": A ``Records`` sequence, header from element 0
                - "tagged": Any sequence; element types are checked
            strict: If True, raise when a record's width differs from the header's.

        Returns:
            UTF-8 CSV bytes without a byte-order mark. "direct" returns the
            value's own bytes unchanged.

        Raises:
            CSVMarshalError: If the value cannot be encoded.
            ValueError: If `strategy` is not a known strategy name.

        Example:
            >>> CSVMarshal.encode(Recorder(["id", "name"], ["1", "Alice"]))
            b'id,name\\n1,Alice\\n'
        """
        return CSVMarshal.encode_with_strategy(value, strategy=strategy, strict=strict).data

    @staticmethod
    def encode_with_strategy(
        value: Any,
        *,
        strategy: Strategy = "auto",
        strict: bool = False,
    ) -> EncodingResult:
        """Encode a value and report which strategy was used.

        Same as encode() but returns an EncodingResult.
        """
        if strategy != "auto" and strategy not in CSVMarshal._strategies:
            raise ValueError(f"Unknown strategy: {strategy!r}")

        value, name = CSVMarshal._resolve(value, strategy)
        logger.debug("encoding %s with %r strategy", type(value).__qualname__, name)
        data = CSVMarshal._strategies[name].encode(value, strict=strict)
        return EncodingResult(name, data)

    @staticmethod
    def detect(value: Any) -> Strategy:
        """Return the strategy "auto" would use for `value`.

        Raises:
            UnsupportedTypeError: If no strategy applies.
            UnsupportedElementTypeError: If `value` is a Records whose element
                type is a concrete class without header() and record().
        """
        return CSVMarshal._resolve(value, "auto")[1]

    @staticmethod
    def _resolve(value: Any, strategy: Strategy) -> tuple[Any, Strategy]:
        # A reference is only followed when the reference itself matches nothing,
        # one level per pass.
        while True:
            if strategy == "auto":
                name = CSVMarshal._match(value)
            elif CSVMarshal._strategies[strategy].accepts(value):
                name = strategy
            else:
                name = None

            if name is not None:
                return value, name
            if not isinstance(value, weakref.ReferenceType):
                break
            target = value()
            if target is None:
                raise UnsupportedTypeError(type(value), "reference is dead")
            logger.debug("dereferenced weakref to %s", type(target).__qualname__)
            value = target

        if strategy == "auto":
            raise UnsupportedTypeError(type(value))
        raise UnsupportedTypeError(
            type(value), f"not applicable to the {strategy!r} strategy"
        )

    @staticmethod
    def _match(value: Any) -> Strategy | None:
        if DirectStrategy.accepts(value):
            return "direct"
        if RecordStrategy.accepts(value):
            return "record"
        if is_sequence(value):
            if isinstance(value, Records):
                if is_record_type(value.element_type):
                    return "collection"
                if is_interface_type(value.element_type):
                    return "tagged"
                raise UnsupportedElementTypeError(value.element_type)
            return "tagged"
        return None


def marshal(
    value: Any,
    *,
    strategy: Strategy = "auto",
    strict: bool = False,
) -> bytes:
    """Shorthand for `CSVMarshal.encode`."""
    return CSVMarshal.encode(value, strategy=strategy, strict=strict)
