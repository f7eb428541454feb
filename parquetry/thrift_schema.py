"""Conversion between the schema tree and its flattened wire form."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from parquetry.converted_type import (
    converted_to_group_converted,
    converted_to_primitive_converted,
    group_converted_converted_to,
    primitive_converted_to_converted,
)
from parquetry.format import ParquetError, Repetition, SchemaElement
from parquetry.parquet_type import (
    GroupType,
    ParquetType,
    PrimitiveType,
    from_converted,
    new_root,
    try_from_primitive,
)
from parquetry.physical_type import physical_type_to_type, type_to_physical_type


def to_thrift(schema: ParquetType) -> List[SchemaElement]:
    """Flatten a root schema into its elements, depth first."""
    if not schema.is_root:
        raise ParquetError("Root schema must be Group type")
    return list(_flatten(schema))


def _flatten(node: ParquetType) -> Iterator[SchemaElement]:
    if isinstance(node, PrimitiveType):
        type_, type_length = physical_type_to_type(node.physical_type)
        converted, maybe_decimal = (None, None)
        if node.converted_type is not None:
            converted, maybe_decimal = primitive_converted_to_converted(
                node.converted_type
            )
        yield SchemaElement(
            name=node.name,
            type_=type_,
            type_length=type_length,
            repetition_type=node.repetition,
            num_children=None,
            converted_type=converted,
            precision=maybe_decimal[0] if maybe_decimal else None,
            scale=maybe_decimal[1] if maybe_decimal else None,
            field_id=node.id,
            logical_type=node.logical_type,
        )
    elif isinstance(node, GroupType):
        converted = (
            group_converted_converted_to(node.converted_type)
            if node.converted_type is not None
            else None
        )
        yield SchemaElement(
            name=node.name,
            repetition_type=None if node.is_root else node.repetition,
            num_children=len(node.fields),
            converted_type=converted,
            field_id=node.id,
            logical_type=node.logical_type,
        )
        for field in node.fields:
            yield from _flatten(field)
    else:
        raise TypeError(f"not a schema node: {node!r}")


def from_thrift(elements: Sequence[SchemaElement]) -> ParquetType:
    """Rebuild a schema tree from its flattened elements."""
    nodes = []
    index = 0
    while index < len(elements):
        index, node = _read_node(elements, index)
        nodes.append(node)
    if len(nodes) != 1:
        raise ParquetError(f"Expected exactly one root node, but found {len(nodes)}")
    return nodes[0]


def _read_node(
    elements: Sequence[SchemaElement], index: int
) -> Tuple[int, ParquetType]:
    if index >= len(elements):
        raise ParquetError("The schema ends before all children were read")
    is_root = index == 0
    element = elements[index]

    if not element.num_children:
        if element.repetition_type is None:
            raise ParquetError("Repetition level must be defined for a primitive type")
        if element.type_ is None:
            raise ParquetError("Physical type must be defined for a primitive type")
        physical_type = type_to_physical_type(element.type_, element.type_length)

        converted = None
        if element.converted_type is not None:
            has_precision = element.precision is not None
            has_scale = element.scale is not None
            if has_precision != has_scale:
                raise ParquetError(
                    "When precision or scale are defined, both must be defined"
                )
            maybe_decimal = (
                (element.precision, element.scale) if has_precision else None
            )
            converted = converted_to_primitive_converted(
                element.converted_type, maybe_decimal
            )

        node = try_from_primitive(
            element.name,
            physical_type,
            Repetition(element.repetition_type),
            converted,
            element.logical_type,
            element.field_id,
        )
        return index + 1, node

    repetition = (
        Repetition(element.repetition_type)
        if element.repetition_type is not None
        else None
    )
    fields = []
    next_index = index + 1
    for _ in range(element.num_children):
        next_index, child = _read_node(elements, next_index)
        fields.append(child)

    if is_root:
        return next_index, new_root(element.name, fields)
    converted = (
        converted_to_group_converted(element.converted_type)
        if element.converted_type is not None
        else None
    )
    return next_index, from_converted(
        element.name, fields, repetition, converted, element.field_id
    )