# parquetry

Building blocks for Parquet metadata, in pure Python and with no dependencies.

## What is in the package

- `parquetry.format`: the wire-level enumerations (`Type`, `ConvertedType`, `Repetition`,
  `TimeUnit`), the logical type annotations (`StringType`, `DecimalType`, `TimeType`,
  `TimestampType`, `IntType`, `UuidType` and the rest), and the `SchemaElement` and
  `ParquetStatistics` records. Also the errors `ParquetError` and its subclass `OutOfSpecError`.
- `parquetry.physical_type`: `PhysicalType` (`PhysicalType.INT32`, `PhysicalType.BYTE_ARRAY`,
  `PhysicalType.fixed_len_byte_array(16)`, ...), plus `type_to_physical_type` and
  `physical_type_to_type` to go to and from the wire `Type`.
- `parquetry.converted_type`: `PrimitiveConvertedType`, `Decimal` and `GroupConvertedType`, with
  conversions to and from the wire `ConvertedType`. `logical_to_converted` gives the converted type
  that matches a logical type. Nanosecond times and timestamps, UUIDs and the null type have none,
  so for those it returns `None`.
- `parquetry.spec`: `check_decimal_invariants`, `check_converted_invariants` and
  `check_logical_invariants`. Each raises `ParquetError` when an annotation does not fit a physical
  type.
- `parquetry.basic_type` and `parquetry.parquet_type`: the schema tree. It is made of
  `PrimitiveType` leaves and `GroupType` nodes, both `ParquetType`s. You build it with `new_root`,
  `try_from_primitive`, `from_physical`, `from_converted` and `try_from_group`.
  `ParquetType.check_contains` tells whether one schema is part of another.
- `parquetry.thrift_schema`: `to_thrift` flattens a root schema into a depth-first list of
  `SchemaElement`s. `from_thrift` rebuilds the tree from that list.
- `parquetry.native`: `NativeType` (`INT32`, `INT64`, `INT96`, `FLOAT`, `DOUBLE`) encodes and
  decodes plain little-endian values. It has `to_le_bytes`, `from_le_bytes`, `compare` and `size`.
  The module also has `decode`, and `int96_to_i64_ns` for legacy INT96 timestamps.
- `parquetry.statistics`: `BooleanStatistics`, `PrimitiveStatistics`, `BinaryStatistics` and
  `FixedLenStatistics`. `deserialize_statistics` and `serialize_statistics` convert them to and
  from `ParquetStatistics`.
- `parquetry.reduce`: `reduce` merges the statistics of several pages into one.
- `parquetry.options`: `WriteOptions` and `Version`.

## Installation

```
pip install parquetry
```

## Building a schema and flattening it

```python
from parquetry.converted_type import PrimitiveConvertedType
from parquetry.format import Repetition
from parquetry.parquet_type import new_root, try_from_primitive
from parquetry.physical_type import PhysicalType
from parquetry.thrift_schema import from_thrift, to_thrift

id_field = try_from_primitive("id", PhysicalType.INT64, Repetition.REQUIRED, None, None, None)
name_field = try_from_primitive(
    "name", PhysicalType.BYTE_ARRAY, Repetition.OPTIONAL,
    PrimitiveConvertedType.UTF8, None, None,
)
schema = new_root("people", [id_field, name_field])

elements = to_thrift(schema)
assert from_thrift(elements) == schema
```

Some annotations raise `ParquetError` because they do not fit their physical type. Two examples:

- `UTF8` on an `INT32` column.
- A `Decimal` whose precision is too large for its storage.

`to_thrift` also raises `ParquetError` when it is given a node that is not a root.

## Statistics

```python
from types import SimpleNamespace

from parquetry.format import ParquetStatistics
from parquetry.native import NativeType
from parquetry.physical_type import PhysicalType
from parquetry.reduce import reduce
from parquetry.statistics import PrimitiveStatistics, deserialize_statistics, serialize_statistics

descriptor = SimpleNamespace(physical_type=PhysicalType.INT32)

raw = ParquetStatistics(
    null_count=0,
    max_value=NativeType.INT32.to_le_bytes(10),
    min_value=NativeType.INT32.to_le_bytes(-3),
)
stats = deserialize_statistics(raw, descriptor)
assert (stats.min_value, stats.max_value) == (-3, 10)
assert serialize_statistics(stats) == raw

page = PrimitiveStatistics(NativeType.INT32, descriptor, null_count=2, max_value=42, min_value=0)
merged = reduce([stats, page, None])
assert (merged.min_value, merged.max_value, merged.null_count) == (-3, 42, 2)
```

`deserialize_statistics` reads the values according to `descriptor.physical_type`. The descriptor
can be any object that has that attribute. A value whose length is wrong for the type raises
`OutOfSpecError`.

How `reduce` merges statistics:

- `None` entries are skipped. It returns `None` when nothing is left to merge.
- It keeps the smallest minimum and the largest maximum.
- Binary values are compared byte by byte over their common prefix.
- It adds the null counts together.
- It drops the distinct count.
- Statistics of different physical types raise `OutOfSpecError`.
- INT96 statistics cannot be merged, and raise `ParquetError`.

## What the package does not do

The package reads and writes no Parquet files. It has these limits:

- **No compact-protocol encoding or decoding.** Schemas and statistics stay as Python objects
  (`SchemaElement`, `ParquetStatistics`).
- **No data page encoding or compression.**
- **Nothing writes column chunks, row groups or file footers.** `WriteOptions` only holds the
  options: whether to write statistics, a compression codec value, and a `Version`.

## Running the tests

```
pip install -e ".[test]"
pytest
```