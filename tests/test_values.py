from datetime import datetime

import numpy as np
import pandas as pd
import pytest

from data_compare import (
    DataCompareError,
    ValueKind,
    canonical_serialize,
    normalize_value,
    value_kind,
    values_equal,
)


class TestNormalizeValue:
    """normalize_value -- mapping parsed values onto plain builtins."""

    def test_numpy_scalars_become_builtins(self):
        assert normalize_value(np.int64(3)) == 3
        assert type(normalize_value(np.int64(3))) is int
        assert normalize_value(np.float64(2.5)) == 2.5
        assert normalize_value(np.bool_(True)) is True

    def test_missing_values_become_none(self):
        assert normalize_value(float("nan")) is None
        assert normalize_value(np.nan) is None
        assert normalize_value(pd.NA) is None
        assert normalize_value(pd.NaT) is None
        assert normalize_value(float("inf")) is None

    def test_integral_float_becomes_int(self):
        assert type(normalize_value(4.0)) is int

    def test_bool_is_not_treated_as_number(self):
        assert normalize_value(True) is True

    def test_timestamp_becomes_iso_string(self):
        assert normalize_value(pd.Timestamp("2024-03-01 10:00")) == "2024-03-01T10:00:00"
        assert normalize_value(datetime(2024, 3, 1)) == "2024-03-01T00:00:00"

    def test_nested_containers(self):
        value = {1: (np.int32(1), [np.nan, "x"])}
        assert normalize_value(value) == {"1": [1, [None, "x"]]}

    def test_unsupported_type_raises(self):
        with pytest.raises(TypeError, match="Unsupported value type"):
            normalize_value(object())


class TestValueKind:

    @pytest.mark.parametrize("value, kind", [
        (None, ValueKind.NULL),
        (False, ValueKind.BOOL),
        (1, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        ("a", ValueKind.STRING),
        ([1], ValueKind.SEQUENCE),
        ({"a": 1}, ValueKind.MAPPING),
    ])
    def test_kinds(self, value, kind):
        assert value_kind(value) is kind

    def test_rejects_unnormalized_value(self):
        with pytest.raises(TypeError):
            value_kind((1, 2))


class TestCanonicalSerialize:

    def test_key_order_does_not_matter(self):
        assert canonical_serialize({"a": 1, "b": 2}) == canonical_serialize({"b": 2, "a": 1})
        assert values_equal({"a": {"x": 1, "y": 2}}, {"a": {"y": 2, "x": 1}})

    def test_int_and_float_forms_are_equal(self):
        assert values_equal(1, 1.0)

    def test_bool_differs_from_number(self):
        assert not values_equal(True, 1)

    def test_list_order_matters(self):
        assert not values_equal([1, 2], [2, 1])

    def test_compact_output(self):
        assert canonical_serialize({"b": [1, "é"], "a": None}) == '{"a":null,"b":[1,"é"]}'

    def test_deeply_nested_value_raises_compare_error(self):
        value = []
        for _ in range(100_000):
            value = [value]
        with pytest.raises(DataCompareError, match="nested too deeply"):
            canonical_serialize(value)
