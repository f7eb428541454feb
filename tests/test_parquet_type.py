import pytest

from parquetry.converted_type import GroupConvertedType, PrimitiveConvertedType
from parquetry.format import IntType, ParquetError, Repetition, StringType
from parquetry.parquet_type import (
    GroupType,
    PrimitiveType,
    from_converted,
    from_physical,
    new_root,
    try_from_group,
    try_from_primitive,
)
from parquetry.physical_type import PhysicalType


def leaf(name, physical=PhysicalType.INT32, repetition=Repetition.OPTIONAL):
    return try_from_primitive(name, physical, repetition, None, None, None)


def sample_schema():
    return new_root(
        "schema",
        [
            leaf("a"),
            leaf("b", PhysicalType.INT64, Repetition.REQUIRED),
            from_converted(
                "c",
                [leaf("x"), leaf("y", PhysicalType.BYTE_ARRAY)],
                Repetition.OPTIONAL,
                None,
                None,
            ),
        ],
    )


def test_new_root_is_root():
    root = new_root("schema", [leaf("a")])
    assert root.is_root
    assert root.name == "schema"
    assert [field.name for field in root.fields] == ["a"]


def test_from_converted_defaults_to_optional():
    group = from_converted("g", [leaf("a")], None, GroupConvertedType.LIST, 3)
    assert group.repetition is Repetition.OPTIONAL
    assert group.converted_type is GroupConvertedType.LIST
    assert group.id == 3
    assert not group.is_root


def test_from_converted_keeps_required():
    group = from_converted("g", [leaf("a")], Repetition.REQUIRED, None, None)
    assert group.repetition is Repetition.REQUIRED


def test_from_physical():
    node = from_physical("p", PhysicalType.DOUBLE)
    assert isinstance(node, PrimitiveType)
    assert node.repetition is Repetition.OPTIONAL
    assert node.id is None
    assert node.physical_type == PhysicalType.DOUBLE
    assert node.converted_type is None and node.logical_type is None


def test_try_from_primitive_keeps_annotations():
    node = try_from_primitive(
        "s",
        PhysicalType.BYTE_ARRAY,
        Repetition.REQUIRED,
        PrimitiveConvertedType.UTF8,
        StringType(),
        7,
    )
    assert node.converted_type is PrimitiveConvertedType.UTF8
    assert node.logical_type == StringType()
    assert node.id == 7


def test_try_from_primitive_rejects_bad_converted():
    with pytest.raises(ParquetError):
        try_from_primitive(
            "s", PhysicalType.INT32, Repetition.REQUIRED,
            PrimitiveConvertedType.UTF8, None, None,
        )


def test_try_from_primitive_rejects_bad_logical():
    with pytest.raises(ParquetError):
        try_from_primitive(
            "s", PhysicalType.INT32, Repetition.REQUIRED, None, IntType(64, True), None
        )


def test_try_from_group():
    group = try_from_group(
        "g", Repetition.REPEATED, GroupConvertedType.MAP, None, [leaf("k")], 2
    )
    assert isinstance(group, GroupType)
    assert group.repetition is Repetition.REPEATED
    assert group.fields == (leaf("k"),)


def test_schema_contains_itself():
    schema = sample_schema()
    assert schema.check_contains(schema)


def test_schema_contains_projection():
    projection = new_root(
        "schema",
        [from_converted("c", [leaf("y", PhysicalType.BYTE_ARRAY)], None, None, None)],
    )
    assert sample_schema().check_contains(projection)
    assert not projection.check_contains(sample_schema())


def test_missing_field_not_contained():
    other = new_root("schema", [leaf("z")])
    assert not sample_schema().check_contains(other)


def test_primitive_mismatches():
    assert not leaf("a").check_contains(leaf("a", PhysicalType.INT64))
    assert not leaf("a").check_contains(leaf("a", repetition=Repetition.REQUIRED))
    assert not leaf("a").check_contains(leaf("b"))


def test_primitive_and_group_not_contained():
    group = from_converted("a", [leaf("x")], None, None, None)
    assert not leaf("a").check_contains(group)
    assert not group.check_contains(leaf("a"))


def test_equality_is_structural():
    assert sample_schema() == sample_schema()
    assert leaf("a") != from_physical("a", PhysicalType.INT64)