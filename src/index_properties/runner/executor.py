# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for resolving a property dump through the catalogue.

Orchestrates the full flow:
1. Build a store from the input properties
2. Pick the identifiers for per-entity properties
3. Resolve fixed and per-entity properties
4. Return structured result
"""

from __future__ import annotations

import logging
from typing import Any

from index_properties.exceptions import PropertyError
from index_properties.properties import field, type_tags
from index_properties.registry import CATALOGUE, PropertyRegistry
from index_properties.stores import InMemoryStore, PropertyStore

from .schema import RunnerInput, RunnerOutput

logger = logging.getLogger(__name__)


class Executor:
    """Resolves runner input against a property registry.

    The executor is designed for dependency injection to support testing.
    Pass a custom registry or store to the constructor.

    Example:
        executor = Executor()
        output = executor.execute(input_data)

        # For testing with a prepared store:
        store = InMemoryStore({"vespa.rank.firstphase": "nativeRank"})
        executor = Executor(store=store)
    """

    def __init__(
        self,
        registry: PropertyRegistry | None = None,
        store: PropertyStore | None = None,
    ) -> None:
        """Initialize executor.

        Args:
            registry: Registry to resolve through.  Defaults to the catalogue.
            store: Optional store to use instead of building one from input.
                   Input properties are imported into it.
        """
        self._registry = registry or CATALOGUE
        self._injected_store = store

    def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Resolve every property for the input.

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        try:
            return self._execute_internal(input_data)
        except PropertyError as e:
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )
        except Exception as e:
            logger.exception("runner.failed")
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )

    def _execute_internal(self, input_data: RunnerInput) -> RunnerOutput:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        store = self._build_store(input_data)

        values = self._registry.resolve_all(store, include_defaults=input_data.include_defaults)
        values.update(
            self._registry.resolve_entities(
                store,
                self._identifiers(input_data),
                include_defaults=input_data.include_defaults,
            )
        )

        return RunnerOutput(
            success=True,
            values=values,
            unknown_keys=self._registry.unknown_keys(store),
        )

    def _build_store(self, input_data: RunnerInput) -> PropertyStore:
        """Create the store, or fill the injected one, from input properties."""
        source = InMemoryStore(input_data.properties)
        if self._injected_store is None:
            return source
        self._injected_store.import_from(source)
        return self._injected_store

    def _identifiers(self, input_data: RunnerInput) -> dict[str, Any] | None:
        """Map per-entity base names to the identifiers requested in input.

        Returns ``None`` when the input names no identifiers, so that the
        identifiers populated in the store are used instead.
        """
        if not (input_data.fields or input_data.attributes or input_data.query_features):
            return None
        return {
            field.FIELD_WEIGHT.base_name: input_data.fields,
            field.IS_FILTER_FIELD.base_name: input_data.fields,
            type_tags.ATTRIBUTE.base_name: input_data.attributes,
            type_tags.QUERY_FEATURE.base_name: input_data.query_features,
        }
