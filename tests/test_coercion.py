"""Tests for key composition and value coercion."""

import logging
import math

import pytest

from index_properties.coercion import (
    UINT32_MAX,
    ValueType,
    coerce,
    compose_key,
    format_value,
    is_valid_default,
    parse_double,
    parse_uint32,
)


def test_compose_key():
    assert compose_key("vespa.fieldweight", "title") == "vespa.fieldweight.title"


def test_compose_key_distinct_identifiers_never_alias():
    assert compose_key("vespa.fieldweight", "a") != compose_key("vespa.fieldweight", "b")


class TestBoolean:
    def test_true_literal(self):
        assert coerce(ValueType.BOOLEAN, ["true"], False) is True

    @pytest.mark.parametrize("raw", ["false", "True", "TRUE", "1", "yes", "", " true"])
    def test_anything_else_is_false(self, raw):
        assert coerce(ValueType.BOOLEAN, [raw], True) is False

    def test_only_first_value_counts(self):
        assert coerce(ValueType.BOOLEAN, ["false", "true"], False) is False


class TestUint32:
    def test_parses_decimal(self):
        assert coerce(ValueType.UINT32, ["42"], 7) == 42

    def test_surrounding_whitespace_allowed(self):
        assert parse_uint32(" 42 ") == 42

    def test_max_value(self):
        assert parse_uint32(str(UINT32_MAX)) == UINT32_MAX

    @pytest.mark.parametrize("raw", ["", "abc", "-1", "4294967296", "1.5", "1_000", "+3", "0x10"])
    def test_malformed_falls_back_to_default(self, raw):
        assert coerce(ValueType.UINT32, [raw], 7) == 7

    def test_malformed_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="index_properties.coercion"):
            coerce(ValueType.UINT32, ["abc"], 7, key="vespa.hitcollector.heapsize")
        record = caplog.records[-1]
        assert record.getMessage() == "property.malformed"
        assert record.key == "vespa.hitcollector.heapsize"
        assert record.raw == "abc"


class TestDouble:
    def test_parses_float(self):
        assert coerce(ValueType.DOUBLE, ["0.25"], 1.0) == 0.25

    def test_parses_integer_text(self):
        assert coerce(ValueType.DOUBLE, ["42"], 1.0) == 42.0

    def test_parses_negative_infinity(self):
        assert parse_double("-inf") == -math.inf

    @pytest.mark.parametrize("raw", ["", "abc", "1,5", "1_0", "\uff10.\uff15"])
    def test_malformed_falls_back_to_default(self, raw):
        assert coerce(ValueType.DOUBLE, [raw], 1.0) == 1.0


def test_string_passes_through_verbatim():
    assert coerce(ValueType.STRING, ["  Mixed Case  ", "ignored"], "") == "  Mixed Case  "


def test_string_list_takes_every_value():
    assert coerce(ValueType.STRING_LIST, ("a", "b,c", "d"), []) == ["a", "b,c", "d"]


class TestFormatValue:
    def test_boolean(self):
        assert format_value(ValueType.BOOLEAN, True) == ["true"]
        assert format_value(ValueType.BOOLEAN, False) == ["false"]

    def test_uint32(self):
        assert format_value(ValueType.UINT32, 200) == ["200"]

    def test_uint32_out_of_range(self):
        with pytest.raises(ValueError):
            format_value(ValueType.UINT32, -1)

    def test_uint32_rejects_bool(self):
        with pytest.raises(ValueError):
            format_value(ValueType.UINT32, True)

    def test_double_infinity_parses_back(self):
        (rendered,) = format_value(ValueType.DOUBLE, -math.inf)
        assert parse_double(rendered) == -math.inf

    def test_string_list(self):
        assert format_value(ValueType.STRING_LIST, ("a", "b")) == ["a", "b"]

    def test_string_list_rejects_bare_string(self):
        with pytest.raises(ValueError):
            format_value(ValueType.STRING_LIST, "ab")


@pytest.mark.parametrize(
    ("value_type", "value", "valid"),
    [
        (ValueType.BOOLEAN, False, True),
        (ValueType.BOOLEAN, "false", False),
        (ValueType.UINT32, 100, True),
        (ValueType.UINT32, 1.0, False),
        (ValueType.DOUBLE, 1.0, True),
        (ValueType.DOUBLE, 1, False),
        (ValueType.DOUBLE, -math.inf, True),
        (ValueType.STRING, "", True),
        (ValueType.STRING_LIST, (), True),
        (ValueType.STRING_LIST, ["a"], False),
    ],
)
def test_is_valid_default(value_type, value, valid):
    assert is_valid_default(value_type, value) is valid
