"""Converted (legacy) type annotations of primitive and group nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from parquetry.format import (
    BsonType,
    ConvertedType,
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


class PrimitiveConvertedType(Enum):
    """Converted types that annotate primitive nodes, except decimals."""

    UTF8 = "UTF8"
    ENUM = "ENUM"
    DATE = "DATE"
    TIME_MILLIS = "TIME_MILLIS"
    TIME_MICROS = "TIME_MICROS"
    TIMESTAMP_MILLIS = "TIMESTAMP_MILLIS"
    TIMESTAMP_MICROS = "TIMESTAMP_MICROS"
    UINT_8 = "UINT_8"
    UINT_16 = "UINT_16"
    UINT_32 = "UINT_32"
    UINT_64 = "UINT_64"
    INT_8 = "INT_8"
    INT_16 = "INT_16"
    INT_32 = "INT_32"
    INT_64 = "INT_64"
    JSON = "JSON"
    BSON = "BSON"
    INTERVAL = "INTERVAL"


@dataclass(frozen=True)
class Decimal:
    """Decimal annotation: unscaled value times 10 to the power of -scale."""

    precision: int
    scale: int


class GroupConvertedType(Enum):
    """Converted types that annotate group nodes."""

    MAP = "MAP"
    MAP_KEY_VALUE = "MAP_KEY_VALUE"
    LIST = "LIST"


PrimitiveConverted = Union[PrimitiveConvertedType, Decimal]

_TO_PRIMITIVE: Dict[ConvertedType, PrimitiveConvertedType] = {
    ConvertedType[member.name]: member for member in PrimitiveConvertedType
}
_TO_GROUP: Dict[ConvertedType, GroupConvertedType] = {
    ConvertedType[member.name]: member for member in GroupConvertedType
}


def converted_to_primitive_converted(
    ty: ConvertedType, maybe_decimal: Optional[Tuple[int, int]]
) -> PrimitiveConverted:
    """Interpret a wire converted type on a primitive node.

    ``maybe_decimal`` is ``(precision, scale)`` when the node carries both.
    """
    if ty is ConvertedType.DECIMAL:
        if maybe_decimal is None:
            raise ParquetError("Decimal requires a precision and scale")
        precision, scale = maybe_decimal
        return Decimal(precision, scale)
    try:
        return _TO_PRIMITIVE[ty]
    except KeyError:
        raise ParquetError(
            f'Converted type "{ty.name}" cannot be applied to a primitive type'
        ) from None


def converted_to_group_converted(ty: ConvertedType) -> GroupConvertedType:
    """Interpret a wire converted type on a group node."""
    try:
        return _TO_GROUP[ty]
    except KeyError:
        raise ParquetError(
            f'Converted type "{ty.name}" cannot be applied to a group type'
        ) from None


def primitive_converted_to_converted(
    ty: PrimitiveConverted,
) -> Tuple[ConvertedType, Optional[Tuple[int, int]]]:
    """Return the wire converted type and, for decimals, ``(precision, scale)``."""
    if isinstance(ty, Decimal):
        return ConvertedType.DECIMAL, (ty.precision, ty.scale)
    return ConvertedType[ty.name], None


def group_converted_converted_to(ty: GroupConvertedType) -> ConvertedType:
    """Return the wire converted type of a group annotation."""
    return ConvertedType[ty.name]


_SIMPLE_LOGICAL: Dict[type, Union[PrimitiveConverted, GroupConvertedType]] = {
    StringType: PrimitiveConvertedType.UTF8,
    MapType: GroupConvertedType.MAP,
    ListType: GroupConvertedType.LIST,
    EnumType: PrimitiveConvertedType.ENUM,
    DateType: PrimitiveConvertedType.DATE,
    JsonType: PrimitiveConvertedType.JSON,
    BsonType: PrimitiveConvertedType.BSON,
}

_TIME_UNITS = {
    TimeUnit.MILLIS: PrimitiveConvertedType.TIME_MILLIS,
    TimeUnit.MICROS: PrimitiveConvertedType.TIME_MICROS,
}
_TIMESTAMP_UNITS = {
    TimeUnit.MILLIS: PrimitiveConvertedType.TIMESTAMP_MILLIS,
    TimeUnit.MICROS: PrimitiveConvertedType.TIMESTAMP_MICROS,
}
_INTEGERS = {
    (8, True): PrimitiveConvertedType.INT_8,
    (16, True): PrimitiveConvertedType.INT_16,
    (32, True): PrimitiveConvertedType.INT_32,
    (64, True): PrimitiveConvertedType.INT_64,
    (8, False): PrimitiveConvertedType.UINT_8,
    (16, False): PrimitiveConvertedType.UINT_16,
    (32, False): PrimitiveConvertedType.UINT_32,
    (64, False): PrimitiveConvertedType.UINT_64,
}


def logical_to_converted(
    logical_type: LogicalType,
) -> Optional[Union[PrimitiveConverted, GroupConvertedType]]:
    """Return the converted type equivalent to a logical type, if one exists.

    Nanosecond times and timestamps, UUIDs and the null type have none.
    """
    simple = _SIMPLE_LOGICAL.get(type(logical_type))
    if simple is not None:
        return simple
    if isinstance(logical_type, DecimalType):
        return Decimal(logical_type.precision, logical_type.scale)
    if isinstance(logical_type, TimeType):
        return _TIME_UNITS.get(logical_type.unit)
    if isinstance(logical_type, TimestampType):
        return _TIMESTAMP_UNITS.get(logical_type.unit)
    if isinstance(logical_type, IntType):
        key = (logical_type.bit_width, logical_type.is_signed)
        try:
            return _INTEGERS[key]
        except KeyError:
            raise ParquetError(f"Integer type {key} is not supported") from None
    if isinstance(logical_type, (NullType, UuidType)):
        return None
    raise TypeError(f"not a logical type: {logical_type!r}")