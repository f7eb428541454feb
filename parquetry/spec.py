"""Rules on which annotations may be applied to which physical types."""

from __future__ import annotations

import math
from typing import Optional, Union

from parquetry.converted_type import Decimal, PrimitiveConvertedType
from parquetry.format import (
    BsonType,
    DateType,
    DecimalType,
    EnumType,
    IntType,
    JsonType,
    ListType,
    LogicalType,
    MapType,
    NullType,
    ParquetError,
    StringType,
    TimestampType,
    TimeType,
    TimeUnit,
    UuidType,
)
from parquetry.physical_type import PhysicalKind, PhysicalType

_I32_MAX = 2**31 - 1

_BYTE_ARRAY_CONVERTED = frozenset(
    {
        PrimitiveConvertedType.UTF8,
        PrimitiveConvertedType.BSON,
        PrimitiveConvertedType.JSON,
    }
)
_INT32_CONVERTED = frozenset(
    {
        PrimitiveConvertedType.DATE,
        PrimitiveConvertedType.TIME_MILLIS,
        PrimitiveConvertedType.UINT_8,
        PrimitiveConvertedType.UINT_16,
        PrimitiveConvertedType.UINT_32,
        PrimitiveConvertedType.INT_8,
        PrimitiveConvertedType.INT_16,
        PrimitiveConvertedType.INT_32,
    }
)
_INT64_CONVERTED = frozenset(
    {
        PrimitiveConvertedType.TIME_MICROS,
        PrimitiveConvertedType.TIMESTAMP_MILLIS,
        PrimitiveConvertedType.TIMESTAMP_MICROS,
        PrimitiveConvertedType.UINT_64,
        PrimitiveConvertedType.INT_64,
    }
)


def _max_decimal_precision(length: int) -> int:
    """Largest number of decimal digits a signed integer of ``length`` bytes holds."""
    try:
        largest = 2.0 ** (8 * length - 1) - 1.0
    except OverflowError:
        return _I32_MAX
    if largest <= 0:
        return 0
    return math.floor(math.log10(largest))


def check_decimal_invariants(
    physical_type: PhysicalType, precision: int, scale: int
) -> None:
    """Raise ``ParquetError`` unless a decimal fits the physical type."""
    if precision < 1:
        raise ParquetError(
            f"DECIMAL precision must be larger than 0; It is {precision}"
        )
    if scale >= precision:
        raise ParquetError(
            f"Invalid DECIMAL: scale ({scale}) cannot be greater than or equal "
            f"to precision ({precision})"
        )

    kind = physical_type.kind
    if kind is PhysicalKind.INT32:
        if not 1 <= precision <= 9:
            raise ParquetError(
                f"Cannot represent INT32 as DECIMAL with precision {precision}"
            )
    elif kind is PhysicalKind.INT64:
        if not 1 <= precision <= 18:
            raise ParquetError(
                f"Cannot represent INT64 as DECIMAL with precision {precision}"
            )
    elif kind is PhysicalKind.FIXED_LEN_BYTE_ARRAY:
        length = physical_type.length
        max_precision = _max_decimal_precision(length)
        if precision > max_precision:
            raise ParquetError(
                f"Cannot represent FIXED_LEN_BYTE_ARRAY as DECIMAL with length "
                f"{length} and precision {precision}. The max precision can only "
                f"be {max_precision}"
            )
    elif kind is not PhysicalKind.BYTE_ARRAY:
        raise ParquetError(
            "DECIMAL can only annotate INT32, INT64, BYTE_ARRAY and "
            "FIXED_LEN_BYTE_ARRAY"
        )


def check_converted_invariants(
    physical_type: PhysicalType,
    converted_type: Optional[Union[PrimitiveConvertedType, Decimal]],
) -> None:
    """Raise ``ParquetError`` unless the converted type may annotate the physical type."""
    if converted_type is None:
        return
    if isinstance(converted_type, Decimal):
        check_decimal_invariants(
            physical_type, converted_type.precision, converted_type.scale
        )
    elif converted_type in _BYTE_ARRAY_CONVERTED:
        if physical_type != PhysicalType.BYTE_ARRAY:
            raise ParquetError(
                f"{converted_type.name} can only annotate BYTE_ARRAY fields"
            )
    elif converted_type in _INT32_CONVERTED:
        if physical_type != PhysicalType.INT32:
            raise ParquetError(f"{converted_type.name} can only annotate INT32")
    elif converted_type in _INT64_CONVERTED:
        if physical_type != PhysicalType.INT64:
            raise ParquetError(f"{converted_type.name} can only annotate INT64")
    elif converted_type is PrimitiveConvertedType.INTERVAL:
        if physical_type != PhysicalType.fixed_len_byte_array(12):
            raise ParquetError("INTERVAL can only annotate FIXED_LEN_BYTE_ARRAY(12)")
    elif converted_type is PrimitiveConvertedType.ENUM:
        if physical_type != PhysicalType.BYTE_ARRAY:
            raise ParquetError("ENUM can only annotate BYTE_ARRAY fields")


def _logical_fits(logical_type: LogicalType, physical_type: PhysicalType) -> bool:
    kind = physical_type.kind
    if isinstance(logical_type, (EnumType, StringType, JsonType, BsonType)):
        return kind is PhysicalKind.BYTE_ARRAY
    if isinstance(logical_type, (DateType, NullType)):
        return kind is PhysicalKind.INT32
    if isinstance(logical_type, TimeType):
        if kind is PhysicalKind.INT32:
            return logical_type.unit is TimeUnit.MILLIS
        if kind is PhysicalKind.INT64:
            if logical_type.unit is TimeUnit.MILLIS:
                raise ParquetError("Cannot use millisecond unit on INT64 type")
            return True
        return False
    if isinstance(logical_type, TimestampType):
        return kind is PhysicalKind.INT64
    if isinstance(logical_type, IntType):
        if kind is PhysicalKind.INT32:
            return logical_type.bit_width <= 32
        if kind is PhysicalKind.INT64:
            return logical_type.bit_width == 64
        return False
    if isinstance(logical_type, UuidType):
        return physical_type == PhysicalType.fixed_len_byte_array(16)
    return False


def check_logical_invariants(
    physical_type: PhysicalType, logical_type: Optional[LogicalType]
) -> None:
    """Raise ``ParquetError`` unless the logical type may annotate the physical type."""
    if logical_type is None:
        return
    if isinstance(logical_type, (MapType, ListType)):
        raise ParquetError(f"{logical_type!r} cannot be applied to a primitive type")
    if isinstance(logical_type, DecimalType):
        check_decimal_invariants(
            physical_type, logical_type.precision, logical_type.scale
        )
        return
    if not _logical_fits(logical_type, physical_type):
        raise ParquetError(
            f"Cannot annotate {logical_type!r} from {physical_type} fields"
        )