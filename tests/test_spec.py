import pytest
from hypothesis import given
from hypothesis import strategies as st

from parquetry.converted_type import Decimal, PrimitiveConvertedType
from parquetry.format import (
    DateType,
    DecimalType,
    IntType,
    ListType,
    MapType,
    ParquetError,
    StringType,
    TimestampType,
    TimeType,
    TimeUnit,
    UuidType,
)
from parquetry.physical_type import PhysicalType
from parquetry.spec import (
    check_converted_invariants,
    check_decimal_invariants,
    check_logical_invariants,
)

FLBA = PhysicalType.fixed_len_byte_array


def accepted(check, *args):
    try:
        check(*args)
    except ParquetError:
        return False
    return True


@pytest.mark.parametrize(
    "physical, precision, scale, expected",
    [
        (PhysicalType.INT32, 9, 2, True),
        (PhysicalType.INT32, 10, 2, False),
        (PhysicalType.INT64, 18, 2, True),
        (PhysicalType.INT64, 19, 2, False),
        (FLBA(16), 38, 18, True),
        (FLBA(16), 39, 18, False),
        (PhysicalType.BYTE_ARRAY, 9, 0, True),
        (PhysicalType.BYTE_ARRAY, 0, 0, False),
        (PhysicalType.BYTE_ARRAY, 5, 5, False),
        (PhysicalType.BOOLEAN, 5, 1, False),
        (PhysicalType.DOUBLE, 5, 1, False),
        (FLBA(0), 1, 0, False),
    ],
)
def test_decimal_invariants(physical, precision, scale, expected):
    assert accepted(check_decimal_invariants, physical, precision, scale) is expected


def test_decimal_error_mentions_precision():
    with pytest.raises(ParquetError, match="precision must be larger than 0"):
        check_decimal_invariants(PhysicalType.INT32, 0, 0)


@given(st.integers(1, 9), st.data())
def test_int32_decimal_within_bound(precision, data):
    scale = data.draw(st.integers(0, precision - 1))
    assert check_decimal_invariants(PhysicalType.INT32, precision, scale) is None


@given(st.integers(10, 40), st.data())
def test_int32_decimal_beyond_bound(precision, data):
    scale = data.draw(st.integers(0, precision - 1))
    with pytest.raises(ParquetError):
        check_decimal_invariants(PhysicalType.INT32, precision, scale)


@pytest.mark.parametrize(
    "length, max_precision",
    [(1, 2), (2, 4), (4, 9), (8, 18), (16, 38)],
)
def test_flba_max_precision(length, max_precision):
    assert check_decimal_invariants(FLBA(length), max_precision, 0) is None
    with pytest.raises(ParquetError):
        check_decimal_invariants(FLBA(length), max_precision + 1, 0)


@pytest.mark.parametrize(
    "physical, converted, expected",
    [
        (PhysicalType.INT32, None, True),
        (PhysicalType.BYTE_ARRAY, PrimitiveConvertedType.UTF8, True),
        (PhysicalType.INT32, PrimitiveConvertedType.UTF8, False),
        (PhysicalType.BYTE_ARRAY, PrimitiveConvertedType.JSON, True),
        (PhysicalType.INT64, PrimitiveConvertedType.BSON, False),
        (PhysicalType.INT32, PrimitiveConvertedType.DATE, True),
        (PhysicalType.INT64, PrimitiveConvertedType.DATE, False),
        (PhysicalType.INT32, PrimitiveConvertedType.UINT_32, True),
        (PhysicalType.INT64, PrimitiveConvertedType.INT_64, True),
        (PhysicalType.INT32, PrimitiveConvertedType.INT_64, False),
        (PhysicalType.INT64, PrimitiveConvertedType.TIMESTAMP_MILLIS, True),
        (FLBA(12), PrimitiveConvertedType.INTERVAL, True),
        (FLBA(16), PrimitiveConvertedType.INTERVAL, False),
        (PhysicalType.BYTE_ARRAY, PrimitiveConvertedType.ENUM, True),
        (PhysicalType.INT32, PrimitiveConvertedType.ENUM, False),
        (PhysicalType.INT64, Decimal(18, 2), True),
        (PhysicalType.INT32, Decimal(18, 2), False),
    ],
)
def test_converted_invariants(physical, converted, expected):
    assert accepted(check_converted_invariants, physical, converted) is expected


def test_interval_error_message():
    with pytest.raises(ParquetError, match="INTERVAL can only annotate"):
        check_converted_invariants(PhysicalType.INT32, PrimitiveConvertedType.INTERVAL)


@pytest.mark.parametrize(
    "physical, logical, expected",
    [
        (PhysicalType.INT32, None, True),
        (PhysicalType.BYTE_ARRAY, MapType(), False),
        (PhysicalType.BYTE_ARRAY, ListType(), False),
        (PhysicalType.BYTE_ARRAY, StringType(), True),
        (PhysicalType.INT32, StringType(), False),
        (PhysicalType.INT32, DateType(), True),
        (PhysicalType.INT32, TimeType(True, TimeUnit.MILLIS), True),
        (PhysicalType.INT32, TimeType(True, TimeUnit.MICROS), False),
        (PhysicalType.INT64, TimeType(True, TimeUnit.MILLIS), False),
        (PhysicalType.INT64, TimeType(False, TimeUnit.NANOS), True),
        (PhysicalType.INT64, TimestampType(True, TimeUnit.MILLIS), True),
        (PhysicalType.INT32, TimestampType(True, TimeUnit.MILLIS), False),
        (PhysicalType.INT32, IntType(16, True), True),
        (PhysicalType.INT32, IntType(64, True), False),
        (PhysicalType.INT64, IntType(64, False), True),
        (PhysicalType.INT64, IntType(32, False), False),
        (FLBA(16), UuidType(), True),
        (FLBA(8), UuidType(), False),
        (PhysicalType.INT64, DecimalType(scale=2, precision=18), True),
        (PhysicalType.INT32, DecimalType(scale=2, precision=18), False),
    ],
)
def test_logical_invariants(physical, logical, expected):
    assert accepted(check_logical_invariants, physical, logical) is expected


def test_millis_on_int64_message():
    with pytest.raises(ParquetError, match="millisecond unit on INT64"):
        check_logical_invariants(PhysicalType.INT64, TimeType(True, TimeUnit.MILLIS))