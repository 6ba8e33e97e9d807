"""Property store backends."""

from index_properties.stores.base import PropertyStore
from index_properties.stores.memory import InMemoryStore

__all__ = ["InMemoryStore", "PropertyStore"]
