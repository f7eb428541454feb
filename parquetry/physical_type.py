"""Physical types of Parquet columns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

from parquetry.format import ParquetError, Type


class PhysicalKind(Enum):
    """The kind of a physical type, without its length."""

    BOOLEAN = "BOOLEAN"
    INT32 = "INT32"
    INT64 = "INT64"
    INT96 = "INT96"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BYTE_ARRAY = "BYTE_ARRAY"
    FIXED_LEN_BYTE_ARRAY = "FIXED_LEN_BYTE_ARRAY"


@dataclass(frozen=True)
class PhysicalType:
    """A physical type; fixed-length byte arrays carry their length."""

    kind: PhysicalKind
    length: Optional[int] = None

    BOOLEAN: ClassVar["PhysicalType"]
    INT32: ClassVar["PhysicalType"]
    INT64: ClassVar["PhysicalType"]
    INT96: ClassVar["PhysicalType"]
    FLOAT: ClassVar["PhysicalType"]
    DOUBLE: ClassVar["PhysicalType"]
    BYTE_ARRAY: ClassVar["PhysicalType"]

    def __post_init__(self) -> None:
        fixed = self.kind is PhysicalKind.FIXED_LEN_BYTE_ARRAY
        if fixed and self.length is None:
            raise ValueError("FIXED_LEN_BYTE_ARRAY requires a length")
        if not fixed and self.length is not None:
            raise ValueError(f"{self.kind.name} does not take a length")

    @classmethod
    def fixed_len_byte_array(cls, length: int) -> "PhysicalType":
        """Return the fixed-length byte array type of ``length`` bytes."""
        return cls(PhysicalKind.FIXED_LEN_BYTE_ARRAY, length)

    def __str__(self) -> str:
        if self.length is None:
            return self.kind.name
        return f"{self.kind.name}({self.length})"


PhysicalType.BOOLEAN = PhysicalType(PhysicalKind.BOOLEAN)
PhysicalType.INT32 = PhysicalType(PhysicalKind.INT32)
PhysicalType.INT64 = PhysicalType(PhysicalKind.INT64)
PhysicalType.INT96 = PhysicalType(PhysicalKind.INT96)
PhysicalType.FLOAT = PhysicalType(PhysicalKind.FLOAT)
PhysicalType.DOUBLE = PhysicalType(PhysicalKind.DOUBLE)
PhysicalType.BYTE_ARRAY = PhysicalType(PhysicalKind.BYTE_ARRAY)


def type_to_physical_type(type_: Type, length: Optional[int]) -> PhysicalType:
    """Build a physical type from its wire type and optional length."""
    kind = PhysicalKind[Type(type_).name]
    if kind is PhysicalKind.FIXED_LEN_BYTE_ARRAY:
        if length is None:
            raise ParquetError("Length must be defined for FixedLenByteArray")
        return PhysicalType(kind, length)
    return PhysicalType(kind)


def physical_type_to_type(physical_type: PhysicalType) -> Tuple[Type, Optional[int]]:
    """Return the wire type and length of a physical type."""
    return Type[physical_type.kind.name], physical_type.length