"""Typed column statistics and their plain-encoded wire form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from parquetry.format import OutOfSpecError, ParquetStatistics
from parquetry.native import NativeType, decode
from parquetry.physical_type import PhysicalKind, PhysicalType

_BOOL_SIZE = 1


@dataclass(frozen=True)
class BooleanStatistics:
    """Statistics of a BOOLEAN column."""

    null_count: Optional[int] = None
    distinct_count: Optional[int] = None
    max_value: Optional[bool] = None
    min_value: Optional[bool] = None

    @property
    def physical_type(self) -> PhysicalType:
        """Always ``BOOLEAN``."""
        return PhysicalType.BOOLEAN


@dataclass(frozen=True)
class PrimitiveStatistics:
    """Statistics of a fixed-size numeric column (INT32, INT64, INT96, FLOAT, DOUBLE)."""

    native_type: NativeType
    descriptor: Any
    null_count: Optional[int] = None
    distinct_count: Optional[int] = None
    max_value: Optional[Any] = None
    min_value: Optional[Any] = None

    @property
    def physical_type(self) -> PhysicalType:
        """The physical type of the values."""
        return self.native_type.physical_type


@dataclass(frozen=True)
class BinaryStatistics:
    """Statistics of a BYTE_ARRAY column."""

    descriptor: Any
    null_count: Optional[int] = None
    distinct_count: Optional[int] = None
    max_value: Optional[bytes] = None
    min_value: Optional[bytes] = None

    @property
    def physical_type(self) -> PhysicalType:
        """Always ``BYTE_ARRAY``."""
        return PhysicalType.BYTE_ARRAY


@dataclass(frozen=True)
class FixedLenStatistics:
    """Statistics of a FIXED_LEN_BYTE_ARRAY column."""

    descriptor: Any
    physical_type: PhysicalType
    null_count: Optional[int] = None
    distinct_count: Optional[int] = None
    max_value: Optional[bytes] = None
    min_value: Optional[bytes] = None

    def __post_init__(self) -> None:
        if self.physical_type.kind is not PhysicalKind.FIXED_LEN_BYTE_ARRAY:
            raise ValueError("FixedLenStatistics requires a FIXED_LEN_BYTE_ARRAY type")


Statistics = Union[
    BooleanStatistics, PrimitiveStatistics, BinaryStatistics, FixedLenStatistics
]


def _check_plain(statistics: ParquetStatistics, size: int) -> None:
    for label, value in (
        ("max_value", statistics.max_value),
        ("min_value", statistics.min_value),
    ):
        if value is not None and len(value) != size:
            raise OutOfSpecError(f"The {label} of statistics MUST be plain encoded")


def _optional_bytes(value: Optional[bytes]) -> Optional[bytes]:
    return None if value is None else bytes(value)


def _read_boolean(statistics: ParquetStatistics) -> BooleanStatistics:
    _check_plain(statistics, _BOOL_SIZE)

    def as_bool(value: Optional[bytes]) -> Optional[bool]:
        return None if value is None else value[0] != 0

    return BooleanStatistics(
        null_count=statistics.null_count,
        distinct_count=statistics.distinct_count,
        max_value=as_bool(statistics.max_value),
        min_value=as_bool(statistics.min_value),
    )


def _read_primitive(
    native_type: NativeType, statistics: ParquetStatistics, descriptor: Any
) -> PrimitiveStatistics:
    _check_plain(statistics, native_type.size)

    def as_native(value: Optional[bytes]) -> Any:
        return None if value is None else decode(native_type, value)

    return PrimitiveStatistics(
        native_type,
        descriptor,
        null_count=statistics.null_count,
        distinct_count=statistics.distinct_count,
        max_value=as_native(statistics.max_value),
        min_value=as_native(statistics.min_value),
    )


def _read_fixed_len(
    statistics: ParquetStatistics, physical_type: PhysicalType, descriptor: Any
) -> FixedLenStatistics:
    size = physical_type.length
    _check_plain(statistics, size)

    def truncated(value: Optional[bytes]) -> Optional[bytes]:
        return None if value is None else bytes(value[:size])

    return FixedLenStatistics(
        descriptor,
        physical_type,
        null_count=statistics.null_count,
        distinct_count=statistics.distinct_count,
        max_value=truncated(statistics.max_value),
        min_value=truncated(statistics.min_value),
    )


def deserialize_statistics(
    statistics: ParquetStatistics, descriptor: Any
) -> Statistics:
    """Read wire statistics according to ``descriptor.physical_type``.

    Raises ``OutOfSpecError`` if a value is not plain encoded for that type.
    """
    physical_type = descriptor.physical_type
    kind = physical_type.kind
    if kind is PhysicalKind.BOOLEAN:
        return _read_boolean(statistics)
    if kind is PhysicalKind.BYTE_ARRAY:
        return BinaryStatistics(
            descriptor,
            null_count=statistics.null_count,
            distinct_count=statistics.distinct_count,
            max_value=_optional_bytes(statistics.max_value),
            min_value=_optional_bytes(statistics.min_value),
        )
    if kind is PhysicalKind.FIXED_LEN_BYTE_ARRAY:
        return _read_fixed_len(statistics, physical_type, descriptor)
    return _read_primitive(NativeType[kind.name], statistics, descriptor)


def serialize_statistics(statistics: Statistics) -> ParquetStatistics:
    """Write typed statistics into their plain-encoded wire form."""
    if isinstance(statistics, BooleanStatistics):

        def encode(value: Any) -> Optional[bytes]:
            return None if value is None else bytes([int(value)])

    elif isinstance(statistics, PrimitiveStatistics):
        native_type = statistics.native_type

        def encode(value: Any) -> Optional[bytes]:
            return None if value is None else native_type.to_le_bytes(value)

    elif isinstance(statistics, (BinaryStatistics, FixedLenStatistics)):
        encode = _optional_bytes
    else:
        raise TypeError(f"not a statistics object: {statistics!r}")

    return ParquetStatistics(
        null_count=statistics.null_count,
        distinct_count=statistics.distinct_count,
        max_value=encode(statistics.max_value),
        min_value=encode(statistics.min_value),
    )