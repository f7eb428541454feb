"""Merging of per-page statistics into one statistics of a column chunk."""

from __future__ import annotations

import functools
import operator
from dataclasses import replace
from typing import Any, Callable, Iterable, Optional, TypeVar

from parquetry.format import OutOfSpecError, ParquetError
from parquetry.physical_type import PhysicalKind
from parquetry.statistics import Statistics

T = TypeVar("T")


def _merge(a: Optional[T], b: Optional[T], pick: Callable[[T, T], T]) -> Optional[T]:
    if a is None:
        return b
    if b is None:
        return a
    return pick(a, b)


def _ord_binary(a: bytes, b: bytes, want_max: bool) -> bytes:
    for left, right in zip(a, b):
        if left > right:
            return a if want_max else b
        if left < right:
            return b if want_max else a
    return a


def _bool_min(x: bool, y: bool) -> bool:
    return y if x and not y else x


def _bool_max(x: bool, y: bool) -> bool:
    return x if x and not y else y


def _primitive_min(x: Any, y: Any) -> Any:
    return y if x > y else x


def _primitive_max(x: Any, y: Any) -> Any:
    return x if x < y else y


def _binary_min(x: bytes, y: bytes) -> bytes:
    return _ord_binary(x, y, False)


def _binary_max(x: bytes, y: bytes) -> bytes:
    return _ord_binary(x, y, True)


_PICKS = {
    PhysicalKind.BOOLEAN: (_bool_min, _bool_max),
    PhysicalKind.INT32: (_primitive_min, _primitive_max),
    PhysicalKind.INT64: (_primitive_min, _primitive_max),
    PhysicalKind.FLOAT: (_primitive_min, _primitive_max),
    PhysicalKind.DOUBLE: (_primitive_min, _primitive_max),
    PhysicalKind.BYTE_ARRAY: (_binary_min, _binary_max),
    PhysicalKind.FIXED_LEN_BYTE_ARRAY: (_binary_min, _binary_max),
}


def reduce(stats: Iterable[Optional[Statistics]]) -> Optional[Statistics]:
    """Merge statistics of one physical type; ``None`` entries are skipped.

    Returns ``None`` when there is nothing to merge. Raises ``OutOfSpecError``
    if the statistics differ in physical type.
    """
    present = [s for s in stats if s is not None]
    if not present:
        return None

    first = present[0]
    if any(s.physical_type != first.physical_type for s in present[1:]):
        raise OutOfSpecError("The statistics do not have the same data_type")

    kind = first.physical_type.kind
    if kind not in _PICKS:
        raise ParquetError(f"Statistics of {kind.name} cannot be reduced")
    pick_min, pick_max = _PICKS[kind]

    def step(acc: Statistics, new: Statistics) -> Statistics:
        return replace(
            acc,
            min_value=_merge(acc.min_value, new.min_value, pick_min),
            max_value=_merge(acc.max_value, new.max_value, pick_max),
            null_count=_merge(acc.null_count, new.null_count, operator.add),
            distinct_count=None,
        )

    return functools.reduce(step, present[1:], first)