"""Property descriptors — named, typed, defaulted views onto a store.

Two shapes exist:

* :class:`Property` binds one fixed key such as ``vespa.rank.firstphase``.
* :class:`EntityProperty` binds a base name such as ``vespa.fieldweight``;
  the concrete key is the base name plus ``"."`` plus a caller-supplied
  identifier (a field, attribute or query feature name).

Both resolve the same way: look the key up, take the first stored value
(or all of them for string lists), convert it, and fall back to the
default when the key is absent or its value does not parse.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from index_properties.coercion import (
    PREFIX,
    SEPARATOR,
    ValueType,
    coerce,
    compose_key,
    format_value,
    is_valid_default,
)
from index_properties.exceptions import PropertyConfigError, PropertyTypeError
from index_properties.result import Resolution

if TYPE_CHECKING:
    from index_properties.stores.base import PropertyStore

_UNSET: Any = object()
_MALFORMED: Any = object()


class _Descriptor(ABC):
    """Resolution logic shared by both descriptor shapes."""

    value_type: ValueType
    default: Any

    @property
    @abstractmethod
    def name(self) -> str:
        """Key or base name identifying this descriptor."""
        ...

    def _validate(self, name: str) -> None:
        if not name.startswith(PREFIX):
            raise PropertyConfigError(name, f"name must start with '{PREFIX}'")
        if name.endswith(SEPARATOR):
            raise PropertyConfigError(name, f"name must not end with '{SEPARATOR}'")
        if self.value_type is ValueType.STRING_LIST and isinstance(self.default, list):
            object.__setattr__(self, "default", tuple(self.default))
        if not is_valid_default(self.value_type, self.default):
            raise PropertyConfigError(
                name, f"default {self.default!r} is not a valid {self.value_type.value}"
            )

    def _fallback(self, default: Any) -> Any:
        if default is _UNSET:
            if self.value_type is ValueType.STRING_LIST:
                return list(self.default)
            return self.default
        if self.value_type is ValueType.STRING_LIST:
            if not isinstance(default, (list, tuple)) or not all(
                isinstance(item, str) for item in default
            ):
                raise PropertyTypeError(
                    self.name, f"lookup(default={default!r})", self.value_type.value
                )
            if isinstance(default, list):
                return list(default)
        return default

    def _resolve_key(self, store: PropertyStore, key: str, default: Any) -> Resolution:
        fallback = self._fallback(default)
        raw = store.get(key)
        if raw is None:
            return Resolution.miss(key, fallback)
        value = coerce(self.value_type, raw, _MALFORMED, key=key)
        if value is _MALFORMED:
            return Resolution.miss(key, fallback, raw)
        return Resolution.hit(key, value, raw)

    def _require(self, operation: str, value_type: ValueType) -> None:
        if self.value_type is not value_type:
            raise PropertyTypeError(self.name, operation, self.value_type.value)

    def _write(self, store: PropertyStore, key: str, value: Any) -> None:
        try:
            rendered = format_value(self.value_type, value)
        except ValueError as exc:
            raise PropertyTypeError(self.name, f"set({value!r})", self.value_type.value) from exc
        for item in rendered:
            store.set(key, item)


@dataclass(frozen=True)
class Property(_Descriptor):
    """A property stored under one fixed key.

    Attributes:
        key:         Full key, always starting with ``vespa.``.
        value_type:  How stored strings are converted.
        default:     Value returned when the key is absent or malformed.
        description: Human-readable description.
    """

    key: str
    value_type: ValueType
    default: Any
    description: str = ""

    def __post_init__(self) -> None:
        self._validate(self.key)

    @property
    def name(self) -> str:
        return self.key

    def lookup(self, store: PropertyStore, default: Any = _UNSET) -> Any:
        """Return the typed value, or *default* (the compiled one if omitted)."""
        return self._resolve_key(store, self.key, default).value

    def check(self, store: PropertyStore, default: Any = _UNSET) -> bool:
        """Boolean lookup, for flag-style properties."""
        self._require("check", ValueType.BOOLEAN)
        return bool(self.lookup(store, default))

    def resolve(self, store: PropertyStore, default: Any = _UNSET) -> Resolution:
        """Like :meth:`lookup`, but also report whether the key was found."""
        return self._resolve_key(store, self.key, default)

    def set(self, store: PropertyStore, value: Any) -> None:
        """Write *value* under the key, rendered as store strings."""
        self._write(store, self.key, value)

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable description of this property."""
        return {
            "key": self.key,
            "type": self.value_type.value,
            "default": list(self.default) if isinstance(self.default, tuple) else self.default,
            "per_entity": False,
            "description": self.description,
        }


@dataclass(frozen=True)
class EntityProperty(_Descriptor):
    """A property scoped to a field, attribute or query feature.

    Attributes:
        base_name:   Key prefix; the identifier is appended after a ``"."``.
        value_type:  How stored strings are converted.
        default:     Value returned when the key is absent or malformed.
        description: Human-readable description.
    """

    base_name: str
    value_type: ValueType
    default: Any
    description: str = ""

    def __post_init__(self) -> None:
        self._validate(self.base_name)

    @property
    def name(self) -> str:
        return self.base_name

    def key(self, identifier: str) -> str:
        return compose_key(self.base_name, identifier)

    def lookup(self, store: PropertyStore, identifier: str, default: Any = _UNSET) -> Any:
        return self._resolve_key(store, self.key(identifier), default).value

    def check(self, store: PropertyStore, identifier: str, default: Any = _UNSET) -> bool:
        self._require("check", ValueType.BOOLEAN)
        return bool(self.lookup(store, identifier, default))

    def resolve(self, store: PropertyStore, identifier: str, default: Any = _UNSET) -> Resolution:
        return self._resolve_key(store, self.key(identifier), default)

    def set(self, store: PropertyStore, identifier: str, value: Any) -> None:
        """Write *value* for *identifier*.

        The store appends, so callers set each identifier at most once;
        a second write would be shadowed by the first on lookup.
        """
        self._write(store, self.key(identifier), value)

    def mark(self, store: PropertyStore, identifier: str) -> None:
        """Flag *identifier* by writing ``"true"`` (boolean properties only)."""
        self._require("mark", ValueType.BOOLEAN)
        store.set(self.key(identifier), "true")

    def identifiers(self, store: PropertyStore) -> list[str]:
        """Return the identifiers this property currently has values for."""
        return list(store.visit_namespace(self.base_name))

    def export(self) -> dict[str, Any]:
        return {
            "key": self.key("<name>"),
            "base_name": self.base_name,
            "type": self.value_type.value,
            "default": list(self.default) if isinstance(self.default, tuple) else self.default,
            "per_entity": True,
            "description": self.description,
        }
