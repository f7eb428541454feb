"""The schema tree: primitive leaves and groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from parquetry.basic_type import BasicTypeInfo
from parquetry.converted_type import Decimal, GroupConvertedType, PrimitiveConvertedType
from parquetry.format import LogicalType, Repetition
from parquetry.physical_type import PhysicalType
from parquetry.spec import check_converted_invariants, check_logical_invariants


class ParquetType:
    """A node of a schema; the top-level schema is a root ``GroupType``."""

    basic_info: BasicTypeInfo

    @property
    def name(self) -> str:
        """The field name."""
        return self.basic_info.name

    @property
    def is_root(self) -> bool:
        """Whether this node is the schema's root."""
        return self.basic_info.is_root

    @property
    def repetition(self) -> Repetition:
        """The repetition of the field."""
        return self.basic_info.repetition

    @property
    def id(self) -> Optional[int]:
        """The field id, if set."""
        return self.basic_info.id

    def check_contains(self, sub_type: "ParquetType") -> bool:
        """Whether ``sub_type`` is part of this schema, e.g. a projection of it."""
        basic_match = self.name == sub_type.name and (
            (self.is_root and sub_type.is_root)
            or (
                not self.is_root
                and not sub_type.is_root
                and self.repetition == sub_type.repetition
            )
        )
        if isinstance(self, PrimitiveType) and isinstance(sub_type, PrimitiveType):
            return basic_match and self.physical_type == sub_type.physical_type
        if isinstance(self, GroupType) and isinstance(sub_type, GroupType):
            by_name = {field.name: field for field in self.fields}
            return all(
                field.name in by_name and by_name[field.name].check_contains(field)
                for field in sub_type.fields
            )
        return False


@dataclass(frozen=True)
class PrimitiveType(ParquetType):
    """A leaf holding values of a physical type."""

    basic_info: BasicTypeInfo
    physical_type: PhysicalType
    logical_type: Optional[LogicalType] = None
    converted_type: Optional[Union[PrimitiveConvertedType, Decimal]] = None


@dataclass(frozen=True)
class GroupType(ParquetType):
    """A node holding child fields."""

    basic_info: BasicTypeInfo
    fields: Tuple[ParquetType, ...] = ()
    logical_type: Optional[LogicalType] = None
    converted_type: Optional[GroupConvertedType] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))


def new_root(name: str, fields: Iterable[ParquetType]) -> GroupType:
    """Build the root group of a schema."""
    return GroupType(
        BasicTypeInfo(name, Repetition.OPTIONAL, None, True), tuple(fields)
    )


def from_converted(
    name: str,
    fields: Iterable[ParquetType],
    repetition: Optional[Repetition] = None,
    converted_type: Optional[GroupConvertedType] = None,
    id: Optional[int] = None,
) -> GroupType:
    """Build a non-root group; a missing repetition means optional."""
    if repetition is None:
        repetition = Repetition.OPTIONAL
    return GroupType(
        BasicTypeInfo(name, Repetition(repetition), id, False),
        tuple(fields),
        converted_type=converted_type,
    )


def try_from_primitive(
    name: str,
    physical_type: PhysicalType,
    repetition: Repetition,
    converted_type: Optional[Union[PrimitiveConvertedType, Decimal]] = None,
    logical_type: Optional[LogicalType] = None,
    id: Optional[int] = None,
) -> PrimitiveType:
    """Build a leaf, raising ``ParquetError`` if its annotations do not fit."""
    check_converted_invariants(physical_type, converted_type)
    check_logical_invariants(physical_type, logical_type)
    return PrimitiveType(
        BasicTypeInfo(name, Repetition(repetition), id, False),
        physical_type,
        logical_type,
        converted_type,
    )


def from_physical(name: str, physical_type: PhysicalType) -> PrimitiveType:
    """Build an optional, unannotated leaf."""
    return PrimitiveType(
        BasicTypeInfo(name, Repetition.OPTIONAL, None, False), physical_type
    )


def try_from_group(
    name: str,
    repetition: Repetition,
    converted_type: Optional[GroupConvertedType],
    logical_type: Optional[LogicalType],
    fields: Iterable[ParquetType],
    id: Optional[int] = None,
) -> GroupType:
    """Build a non-root group with the given annotations."""
    return GroupType(
        BasicTypeInfo(name, Repetition(repetition), id, False),
        tuple(fields),
        logical_type,
        converted_type,
    )