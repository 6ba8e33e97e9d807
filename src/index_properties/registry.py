"""PropertyRegistry — the immutable, process-wide catalogue of descriptors."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from index_properties.coercion import PREFIX, SEPARATOR
from index_properties.descriptor import EntityProperty, Property
from index_properties.exceptions import PropertyConfigError, UnknownPropertyError
from index_properties.properties import (
    dump,
    evaluation,
    field,
    hitcollector,
    matching,
    matchphase,
    rank,
    softtimeout,
    summary,
    type_tags,
)

if TYPE_CHECKING:
    from index_properties.stores.base import PropertyStore

logger = logging.getLogger(__name__)

Descriptor = Property | EntityProperty


class PropertyRegistry:
    """Holds fixed-key and per-entity descriptors, validated once at construction.

    Guarantees, checked when the registry is built:

    * every fixed key and every entity base name is unique;
    * no fixed key lives below an entity base name, so a per-entity key
      can never alias a fixed one.

    Parameters:
        descriptors: Descriptors to register, in catalogue order.

    Raises:
        PropertyConfigError: If the guarantees above do not hold.
    """

    def __init__(self, descriptors: Iterable[Descriptor]) -> None:
        self._fixed: dict[str, Property] = {}
        self._entities: dict[str, EntityProperty] = {}

        for descriptor in descriptors:
            if isinstance(descriptor, Property):
                if descriptor.key in self._fixed:
                    raise PropertyConfigError(descriptor.key, "duplicate key")
                self._fixed[descriptor.key] = descriptor
            elif isinstance(descriptor, EntityProperty):
                if descriptor.base_name in self._entities:
                    raise PropertyConfigError(descriptor.base_name, "duplicate base name")
                self._entities[descriptor.base_name] = descriptor
            else:
                raise PropertyConfigError(repr(descriptor), "not a property descriptor")

        for base_name in self._entities:
            if base_name in self._fixed:
                raise PropertyConfigError(base_name, "base name is also a fixed key")
            for key in self._fixed:
                if key.startswith(base_name + SEPARATOR):
                    raise PropertyConfigError(key, f"fixed key shadows per-entity base '{base_name}'")

    # ── lookup ───────────────────────────────────────────────

    def get(self, key: str) -> Property:
        """Return the fixed-key descriptor for *key*."""
        try:
            return self._fixed[key]
        except KeyError:
            raise UnknownPropertyError(key) from None

    def get_entity(self, base_name: str) -> EntityProperty:
        """Return the per-entity descriptor for *base_name*."""
        try:
            return self._entities[base_name]
        except KeyError:
            raise UnknownPropertyError(base_name) from None

    def find(self, key: str) -> tuple[Descriptor, str | None] | None:
        """Map a concrete store key back to its descriptor.

        Returns ``(descriptor, None)`` for fixed keys,
        ``(descriptor, identifier)`` for per-entity keys, and ``None`` when
        no descriptor recognises *key*.
        """
        if key in self._fixed:
            return self._fixed[key], None
        for base_name, descriptor in self._entities.items():
            prefix = base_name + SEPARATOR
            if key.startswith(prefix) and len(key) > len(prefix):
                return descriptor, key[len(prefix) :]
        return None

    def keys(self) -> list[str]:
        return list(self._fixed)

    def base_names(self) -> list[str]:
        return list(self._entities)

    def __iter__(self) -> Iterator[Descriptor]:
        yield from self._fixed.values()
        yield from self._entities.values()

    def __len__(self) -> int:
        return len(self._fixed) + len(self._entities)

    def __contains__(self, key: object) -> bool:
        return key in self._fixed or key in self._entities

    # ── resolution ───────────────────────────────────────────

    def resolve_all(self, store: PropertyStore, *, include_defaults: bool = True) -> dict[str, Any]:
        """Resolve every fixed-key descriptor against *store*.

        With ``include_defaults=False`` only keys actually present (and
        parseable) in the store are returned.
        """
        values: dict[str, Any] = {}
        for descriptor in self._fixed.values():
            resolution = descriptor.resolve(store)
            if resolution.found or include_defaults:
                values[descriptor.key] = resolution.value
        return values

    def resolve_entities(
        self,
        store: PropertyStore,
        identifiers: dict[str, Iterable[str]] | None = None,
        *,
        include_defaults: bool = True,
    ) -> dict[str, Any]:
        """Resolve per-entity descriptors into ``{concrete_key: value}``.

        Parameters:
            identifiers: Base name to the identifiers to resolve.  Base names
                         missing here use the identifiers populated in
                         *store*.
        """
        identifiers = identifiers or {}
        values: dict[str, Any] = {}
        for base_name, descriptor in self._entities.items():
            names = identifiers.get(base_name)
            wanted = list(names) if names is not None else descriptor.identifiers(store)
            for identifier in wanted:
                resolution = descriptor.resolve(store, identifier)
                if resolution.found or include_defaults:
                    values[resolution.key] = resolution.value
        return values

    def unknown_keys(self, store: PropertyStore) -> list[str]:
        """Return reserved-namespace keys in *store* that no descriptor knows."""
        unknown = [key for key in store.keys() if key.startswith(PREFIX) and self.find(key) is None]
        if unknown:
            logger.debug("property.unknown_keys", extra={"keys": unknown})
        return unknown

    # ── introspection ────────────────────────────────────────

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the catalogue."""
        properties = [descriptor.export() for descriptor in self]
        return {
            "properties": properties,
            "property_count": len(properties),
        }


CATALOGUE = PropertyRegistry(
    [
        *evaluation.ALL,
        *rank.ALL,
        *summary.ALL,
        *dump.ALL,
        *matching.ALL,
        *softtimeout.ALL,
        *matchphase.ALL,
        *hitcollector.ALL,
        *field.ALL,
        *type_tags.ALL,
    ]
)
