"""Key composition and string-to-typed-value coercion.

Every property value lives in the store as one or more strings.  The
helpers here turn the stored strings into the descriptor's declared type
and back again.  Coercion never raises for stored data: a value that does
not parse is treated as if the key were absent.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

NAMESPACE = "vespa"
SEPARATOR = "."
PREFIX = NAMESPACE + SEPARATOR

UINT32_MAX = 2**32 - 1


class ValueType(str, Enum):
    """Supported property value types."""

    BOOLEAN = "boolean"
    UINT32 = "uint32"
    DOUBLE = "double"
    STRING = "string"
    STRING_LIST = "string_list"


def compose_key(base_name: str, identifier: str) -> str:
    """Build the concrete key of a per-entity property."""
    return f"{base_name}{SEPARATOR}{identifier}"


def parse_uint32(raw: str) -> int:
    """Parse a base-10 unsigned 32-bit integer.

    Raises:
        ValueError: If *raw* is not a plain decimal number in range.
    """
    text = raw.strip()
    if not text or not (text.isascii() and text.isdigit()):
        raise ValueError(f"not an unsigned integer: {raw!r}")
    value = int(text)
    if value > UINT32_MAX:
        raise ValueError(f"out of range for uint32: {raw!r}")
    return value


def parse_double(raw: str) -> float:
    """Parse a floating point number, ``inf`` and ``-inf`` included.

    Raises:
        ValueError: If *raw* is empty or not a number.
    """
    if "_" in raw or not raw.isascii():
        raise ValueError(f"not a number: {raw!r}")
    return float(raw)


def coerce(value_type: ValueType, values: Sequence[str], default: Any, *, key: str = "") -> Any:
    """Convert stored *values* to *value_type*.

    Single-valued types only look at the first value.  Returns *default*
    when the first value cannot be parsed as a number.
    """
    if value_type is ValueType.STRING_LIST:
        return list(values)

    raw = values[0]
    if value_type is ValueType.BOOLEAN:
        return raw == "true"
    if value_type is ValueType.STRING:
        return raw

    try:
        if value_type is ValueType.UINT32:
            return parse_uint32(raw)
        return parse_double(raw)
    except ValueError:
        logger.debug(
            "property.malformed",
            extra={"key": key, "raw": raw, "value_type": value_type.value},
        )
        return default


def format_value(value_type: ValueType, value: Any) -> list[str]:
    """Render a typed *value* as the strings a store holds.

    Raises:
        ValueError: If *value* does not fit *value_type*.
    """
    if value_type is ValueType.BOOLEAN:
        if not isinstance(value, bool):
            raise ValueError(f"expected bool, got {type(value).__name__}")
        return ["true" if value else "false"]

    if value_type is ValueType.UINT32:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected int, got {type(value).__name__}")
        if not 0 <= value <= UINT32_MAX:
            raise ValueError(f"out of range for uint32: {value}")
        return [str(value)]

    if value_type is ValueType.DOUBLE:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected float, got {type(value).__name__}")
        return [repr(float(value))]

    if value_type is ValueType.STRING:
        if not isinstance(value, str):
            raise ValueError(f"expected str, got {type(value).__name__}")
        return [value]

    if isinstance(value, str) or not all(isinstance(item, str) for item in value):
        raise ValueError("expected a sequence of str")
    return list(value)


def is_valid_default(value_type: ValueType, value: Any) -> bool:
    """Return ``True`` if *value* can serve as a compiled-in default."""
    if value_type is ValueType.DOUBLE:
        return isinstance(value, float) and not math.isnan(value)
    if value_type is ValueType.STRING_LIST:
        return isinstance(value, tuple) and all(isinstance(item, str) for item in value)
    try:
        format_value(value_type, value)
    except ValueError:
        return False
    return True
