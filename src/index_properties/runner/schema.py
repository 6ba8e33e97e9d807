# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m index_properties.runner``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        properties: Store contents, key to ordered values.
        fields: Field names to resolve per-field properties for
        attributes: Attribute names to resolve attribute types for
        query_features: Query feature names to resolve query feature types for
        include_defaults: Also report properties that fell back to their default

    When ``fields``, ``attributes`` and ``query_features`` are all empty,
    per-entity properties are resolved for the identifiers present in
    ``properties``.
    """

    properties: dict[str, list[str]] = Field(default_factory=dict)
    fields: list[str] = Field(default_factory=list)
    attributes: list[str] = Field(default_factory=list)
    query_features: list[str] = Field(default_factory=list)
    include_defaults: bool = True


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether resolution completed
        values: Resolved values keyed by concrete property key
        unknown_keys: ``vespa.`` keys in the input that no property recognises
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    model_config = ConfigDict(ser_json_inf_nan="constants")

    success: bool
    values: dict[str, Any] = Field(default_factory=dict)
    unknown_keys: list[str] = Field(default_factory=list)
    error: str = ""
    error_type: str = ""
