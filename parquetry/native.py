"""Native little-endian representations of fixed-size physical types."""

from __future__ import annotations

import struct
from enum import Enum
from typing import Any, Tuple

from parquetry.physical_type import PhysicalKind, PhysicalType

_JULIAN_DAY_OF_EPOCH = 2_440_588
_SECONDS_PER_DAY = 86_400
_NANOS_PER_SECOND = 1_000_000_000


def _wrap_i64(value: int) -> int:
    return ((value + (1 << 63)) % (1 << 64)) - (1 << 63)


def int96_to_i64_ns(value: Tuple[int, int, int]) -> int:
    """Convert an INT96 timestamp (nanos low, nanos high, Julian day) to ns since epoch."""
    low, high, day = value
    nanoseconds = _wrap_i64((high << 32) + low)
    seconds = (day - _JULIAN_DAY_OF_EPOCH) * _SECONDS_PER_DAY
    return _wrap_i64(seconds * _NANOS_PER_SECOND + nanoseconds)


class NativeType(Enum):
    """Fixed-size physical types with their plain little-endian encoding."""

    INT32 = ("<i", PhysicalKind.INT32)
    INT64 = ("<q", PhysicalKind.INT64)
    FLOAT = ("<f", PhysicalKind.FLOAT)
    DOUBLE = ("<d", PhysicalKind.DOUBLE)
    INT96 = ("<3I", PhysicalKind.INT96)

    def __init__(self, fmt: str, kind: PhysicalKind) -> None:
        self._codec = struct.Struct(fmt)
        self.physical_type = PhysicalType(kind)

    @property
    def size(self) -> int:
        """Number of bytes of one encoded value."""
        return self._codec.size

    def to_le_bytes(self, value: Any) -> bytes:
        """Encode ``value`` in little-endian order."""
        try:
            if self is NativeType.INT96:
                return self._codec.pack(*value)
            return self._codec.pack(value)
        except struct.error as exc:
            raise ValueError(f"{value!r} cannot be encoded as {self.name}") from exc

    def from_le_bytes(self, data: bytes) -> Any:
        """Decode one value from exactly ``size`` little-endian bytes."""
        if len(data) != self.size:
            raise ValueError(
                f"{self.name} requires {self.size} bytes, got {len(data)}"
            )
        values = self._codec.unpack(bytes(data))
        return values if self is NativeType.INT96 else values[0]

    def compare(self, a: Any, b: Any) -> int:
        """Return -1, 0 or 1; incomparable values (NaN) compare equal."""
        if self is NativeType.INT96:
            a, b = int96_to_i64_ns(a), int96_to_i64_ns(b)
        if a < b:
            return -1
        if a > b:
            return 1
        return 0


def decode(native_type: NativeType, chunk: bytes) -> Any:
    """Decode a plain-encoded value of ``native_type`` from ``chunk``."""
    return native_type.from_le_bytes(chunk)