"""index_properties — typed access to flat, multi-valued rank properties.

Every property has a ``vespa.``-prefixed name, a type and a default.
Look it up against a store and you get a typed value back; a missing or
unparseable value yields the default.
"""

from index_properties.coercion import ValueType
from index_properties.descriptor import EntityProperty, Property
from index_properties.exceptions import (
    PropertyConfigError,
    PropertyError,
    PropertyTypeError,
    StoreError,
    UnknownPropertyError,
)
from index_properties.registry import CATALOGUE, PropertyRegistry
from index_properties.result import Resolution
from index_properties.stores import InMemoryStore, PropertyStore

__all__ = [
    "CATALOGUE",
    "EntityProperty",
    "InMemoryStore",
    "Property",
    "PropertyConfigError",
    "PropertyError",
    "PropertyRegistry",
    "PropertyStore",
    "PropertyTypeError",
    "Resolution",
    "StoreError",
    "UnknownPropertyError",
    "ValueType",
]
