"""Tests for the exception hierarchy."""

from index_properties.exceptions import (
    PropertyConfigError,
    PropertyError,
    PropertyTypeError,
    StoreError,
    UnknownPropertyError,
)


def test_all_derive_from_property_error():
    for exc in (
        PropertyConfigError("vespa.x", "bad"),
        PropertyTypeError("vespa.x", "check", "string"),
        UnknownPropertyError("vespa.x"),
        StoreError("set"),
    ):
        assert isinstance(exc, PropertyError)


def test_config_error_message():
    exc = PropertyConfigError("vespa.x", "duplicate key")
    assert exc.name == "vespa.x"
    assert str(exc) == "Property 'vespa.x' misconfigured: duplicate key"


def test_type_error_message():
    exc = PropertyTypeError("vespa.rank.firstphase", "check", "string")
    assert "does not support 'check'" in str(exc)


def test_unknown_property_is_a_key_error():
    exc = UnknownPropertyError("vespa.nope")
    assert isinstance(exc, KeyError)
    assert str(exc) == "No property registered for key 'vespa.nope'"


def test_store_error_detail():
    assert str(StoreError("set")) == "Store error during 'set'"
    assert str(StoreError("set", "boom")) == "Store error during 'set': boom"
