"""csvmarshal - capability-based CSV encoding.

Encodes any value that can describe itself as CSV rows, without requiring it
to inherit from a library type.
"""

from csvmarshal.core import CSVMarshal, EncodingResult, Strategy, marshal
from csvmarshal.errors import (
    CSVMarshalError,
    ElementNotRecordEncodableError,
    EmptyCollectionError,
    EmptyRecordError,
    HeterogeneousElementTypeError,
    RecordLengthMismatchError,
    UnsupportedElementTypeError,
    UnsupportedTypeError,
)
from csvmarshal.protocols import (
    DirectEncodable,
    Marshaler,
    RecordEncodable,
    Recorder,
    new_marshaler,
    new_recorder,
)
from csvmarshal.records import Records

__all__ = [
    "CSVMarshal",
    "CSVMarshalError",
    "DirectEncodable",
    "ElementNotRecordEncodableError",
    "EmptyCollectionError",
    "EmptyRecordError",
    "EncodingResult",
    "HeterogeneousElementTypeError",
    "Marshaler",
    "RecordEncodable",
    "RecordLengthMismatchError",
    "Recorder",
    "Records",
    "Strategy",
    "UnsupportedElementTypeError",
    "UnsupportedTypeError",
    "marshal",
    "new_marshaler",
    "new_recorder",
]
__version__ = "0.1.0"
