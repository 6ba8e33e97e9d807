"""Resolution — the outcome of resolving one property against a store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Resolution:
    """Immutable result of a descriptor's ``resolve``.

    Attributes:
        key:   Concrete store key that was consulted.
        value: Typed value handed to the caller.
        found: ``True`` if the key was present and its value parsed;
               ``False`` when the default was substituted.
        raw:   Values as stored, or an empty tuple when absent.
    """

    key: str
    value: Any
    found: bool
    raw: tuple[str, ...] = ()

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def hit(key: str, value: Any, raw: tuple[str, ...] = ()) -> Resolution:
        return Resolution(key=key, value=value, found=True, raw=raw)

    @staticmethod
    def miss(key: str, default: Any, raw: tuple[str, ...] = ()) -> Resolution:
        return Resolution(key=key, value=default, found=False, raw=raw)
