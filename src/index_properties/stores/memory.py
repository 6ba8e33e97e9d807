"""InMemoryStore — dict-backed property store for one evaluation context."""

from __future__ import annotations

from typing import Any

from index_properties.exceptions import StoreError
from index_properties.stores.base import PropertyStore


class InMemoryStore(PropertyStore):
    """In-memory store using a dict of value lists.

    Parameters:
        initial: Optional mapping of key to a single value or a sequence of
                 values, written in iteration order.
    """

    def __init__(self, initial: dict[str, str | list[str] | tuple[str, ...]] | None = None) -> None:
        self._data: dict[str, list[str]] = {}
        if initial:
            for key, values in initial.items():
                if isinstance(values, str):
                    self.set(key, values)
                    continue
                for value in values:
                    self.set(key, value)

    def get(self, key: str) -> tuple[str, ...] | None:
        values = self._data.get(key)
        if not values:
            return None
        return tuple(values)

    def set(self, key: str, value: str) -> None:
        if not isinstance(key, str):
            raise StoreError("set", f"key must be a string, got {type(key).__name__}")
        if not isinstance(value, str):
            raise StoreError("set", f"value for '{key}' must be a string, got {type(value).__name__}")
        self._data.setdefault(key, []).append(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def clear(self) -> None:
        self._data.clear()

    def num_keys(self) -> int:
        return len(self._data)

    def num_values(self) -> int:
        return sum(len(values) for values in self._data.values())

    def to_dict(self) -> dict[str, list[str]]:
        """Return a copy of the stored data."""
        return {key: list(values) for key, values in self._data.items()}

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, InMemoryStore):
            return NotImplemented
        return self._data == other._data

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"InMemoryStore({self._data!r})"
