"""Store protocol — flat, multi-valued string properties for one evaluation context."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PropertyStore(ABC):
    """Abstract base for property stores.

    Keys are opaque strings; each present key maps to a non-empty, ordered
    sequence of string values.  The store knows nothing about property
    names or types; descriptors layer that on top.

    Stores are populated during a single-threaded setup phase and read
    concurrently afterwards.  No locking is done here; writers must not
    overlap with readers.
    """

    @abstractmethod
    def get(self, key: str) -> tuple[str, ...] | None:
        """Return every value stored under *key*, or ``None`` if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Append *value* under *key*.  Repeated calls accumulate in order."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Drop every value under *key*.  No-op if the key does not exist."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """Return all present keys in insertion order."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every key."""
        ...

    # ── derived operations ───────────────────────────────────

    def exists(self, key: str) -> bool:
        """Return ``True`` if *key* has at least one value."""
        return self.get(key) is not None

    def num_keys(self) -> int:
        return len(self.keys())

    def num_values(self) -> int:
        total = 0
        for key in self.keys():
            values = self.get(key)
            total += len(values) if values else 0
        return total

    def import_from(self, other: PropertyStore) -> None:
        """Copy every key of *other* into this store.

        Keys already present here are replaced, not appended to.
        """
        for key in other.keys():
            values = other.get(key)
            if not values:
                continue
            self.remove(key)
            for value in values:
                self.set(key, value)

    def visit_namespace(self, namespace: str) -> dict[str, tuple[str, ...]]:
        """Return the keys directly below *namespace*, keyed by their suffix.

        ``visit_namespace("vespa.fieldweight")`` on a store holding
        ``vespa.fieldweight.title`` yields ``{"title": (...)}``.
        """
        prefix = namespace + "."
        found: dict[str, tuple[str, ...]] = {}
        for key in self.keys():
            if not key.startswith(prefix):
                continue
            suffix = key[len(prefix) :]
            if not suffix:
                continue
            values = self.get(key)
            if values:
                found[suffix] = values
        return found
