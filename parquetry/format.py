"""Wire-level enumerations and records of the Parquet file format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union


class ParquetError(Exception):
    """A general error raised while handling Parquet data."""


class OutOfSpecError(ParquetError):
    """Raised when data does not follow the Parquet specification."""


class Type(IntEnum):
    """Physical types as numbered in the Parquet format."""

    BOOLEAN = 0
    INT32 = 1
    INT64 = 2
    INT96 = 3
    FLOAT = 4
    DOUBLE = 5
    BYTE_ARRAY = 6
    FIXED_LEN_BYTE_ARRAY = 7


class ConvertedType(IntEnum):
    """Legacy converted types as numbered in the Parquet format."""

    UTF8 = 0
    MAP = 1
    MAP_KEY_VALUE = 2
    LIST = 3
    ENUM = 4
    DECIMAL = 5
    DATE = 6
    TIME_MILLIS = 7
    TIME_MICROS = 8
    TIMESTAMP_MILLIS = 9
    TIMESTAMP_MICROS = 10
    UINT_8 = 11
    UINT_16 = 12
    UINT_32 = 13
    UINT_64 = 14
    INT_8 = 15
    INT_16 = 16
    INT_32 = 17
    INT_64 = 18
    JSON = 19
    BSON = 20
    INTERVAL = 21


class Repetition(IntEnum):
    """Field repetition as numbered in the Parquet format."""

    REQUIRED = 0
    OPTIONAL = 1
    REPEATED = 2


class TimeUnit(Enum):
    """Resolution of time and timestamp logical types."""

    MILLIS = "MILLIS"
    MICROS = "MICROS"
    NANOS = "NANOS"


@dataclass(frozen=True)
class StringType:
    """UTF-8 encoded string."""


@dataclass(frozen=True)
class MapType:
    """Map of keys to values."""


@dataclass(frozen=True)
class ListType:
    """List of elements."""


@dataclass(frozen=True)
class EnumType:
    """Enumeration stored as a binary string."""


@dataclass(frozen=True)
class DecimalType:
    """Decimal with a fixed precision and scale."""

    scale: int
    precision: int


@dataclass(frozen=True)
class DateType:
    """Days since the Unix epoch."""


@dataclass(frozen=True)
class TimeType:
    """Time of day."""

    is_adjusted_to_utc: bool
    unit: TimeUnit


@dataclass(frozen=True)
class TimestampType:
    """Instant in time."""

    is_adjusted_to_utc: bool
    unit: TimeUnit


@dataclass(frozen=True)
class IntType:
    """Integer of a given width and signedness."""

    bit_width: int
    is_signed: bool


@dataclass(frozen=True)
class NullType:
    """Column that holds only nulls."""


@dataclass(frozen=True)
class JsonType:
    """Embedded JSON document."""


@dataclass(frozen=True)
class BsonType:
    """Embedded BSON document."""


@dataclass(frozen=True)
class UuidType:
    """Universally unique identifier."""


LogicalType = Union[
    StringType,
    MapType,
    ListType,
    EnumType,
    DecimalType,
    DateType,
    TimeType,
    TimestampType,
    IntType,
    NullType,
    JsonType,
    BsonType,
    UuidType,
]


@dataclass
class SchemaElement:
    """One node of a schema in its flattened, depth-first form."""

    name: str
    type_: Optional[Type] = None
    type_length: Optional[int] = None
    repetition_type: Optional[Repetition] = None
    num_children: Optional[int] = None
    converted_type: Optional[ConvertedType] = None
    scale: Optional[int] = None
    precision: Optional[int] = None
    field_id: Optional[int] = None
    logical_type: Optional[LogicalType] = None


@dataclass
class ParquetStatistics:
    """Statistics as stored in a file, values plain encoded."""

    null_count: Optional[int] = None
    distinct_count: Optional[int] = None
    max_value: Optional[bytes] = None
    min_value: Optional[bytes] = None
    min: Optional[bytes] = None
    max: Optional[bytes] = None