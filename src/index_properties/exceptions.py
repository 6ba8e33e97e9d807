"""Custom exceptions for the index_properties package."""

from __future__ import annotations


class PropertyError(Exception):
    """Base exception for all property-related errors."""


class PropertyConfigError(PropertyError):
    """Raised when a property descriptor or the catalogue is misdefined."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(f"Property '{name}' misconfigured: {message}")


class PropertyTypeError(PropertyError):
    """Raised when a type-specific operation is used on a descriptor of another type."""

    def __init__(self, name: str, operation: str, value_type: str) -> None:
        self.name = name
        self.operation = operation
        self.value_type = value_type
        super().__init__(f"Property '{name}' of type '{value_type}' does not support '{operation}'")


class UnknownPropertyError(PropertyError, KeyError):
    """Raised when the registry has no descriptor for a key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No property registered for key '{key}'")

    def __str__(self) -> str:
        return str(self.args[0])


class StoreError(PropertyError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
