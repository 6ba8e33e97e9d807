"""Tests for the runner executor."""

import math

import pytest

from index_properties import EntityProperty, Property, PropertyRegistry, ValueType
from index_properties.runner.executor import Executor
from index_properties.runner.schema import RunnerInput, RunnerOutput
from index_properties.stores import InMemoryStore


class TestExecute:
    """Tests for Executor.execute()."""

    @pytest.fixture
    def executor(self):
        return Executor()

    def test_empty_input_resolves_defaults(self, executor):
        """Test that an empty dump yields every compiled default."""
        output = executor.execute(RunnerInput())

        assert output.success is True
        assert output.values["vespa.rank.firstphase"] == ""
        assert output.values["vespa.hitcollector.heapsize"] == 100
        assert output.values["vespa.hitcollector.rankscoredroplimit"] == -math.inf
        assert output.unknown_keys == []

    def test_populated_input(self, executor):
        """Test typed values for present keys."""
        input_data = RunnerInput(
            properties={
                "vespa.rank.firstphase": ["myRankFeature"],
                "vespa.summary.feature": ["a", "b"],
                "vespa.matching.numthreadspersearch": ["4"],
                "vespa.fieldweight.title": ["200"],
            }
        )

        output = executor.execute(input_data)

        assert output.values["vespa.rank.firstphase"] == "myRankFeature"
        assert output.values["vespa.summary.feature"] == ["a", "b"]
        assert output.values["vespa.matching.numthreadspersearch"] == 4
        assert output.values["vespa.fieldweight.title"] == 200

    def test_requested_identifiers(self, executor):
        """Test that named fields get per-field values even when absent."""
        input_data = RunnerInput(
            properties={"vespa.isfilterfield.category": ["true"]},
            fields=["title", "category"],
        )

        output = executor.execute(input_data)

        assert output.values["vespa.fieldweight.title"] == 100
        assert output.values["vespa.fieldweight.category"] == 100
        assert output.values["vespa.isfilterfield.title"] is False
        assert output.values["vespa.isfilterfield.category"] is True
        assert not any(key.startswith("vespa.type.") for key in output.values)

    def test_without_defaults(self, executor):
        """Test include_defaults=False reports only present keys."""
        input_data = RunnerInput(
            properties={
                "vespa.softtimeout.enabled": ["true"],
                "vespa.hitcollector.arraysize": ["oops"],
            },
            include_defaults=False,
        )

        output = executor.execute(input_data)

        assert output.values == {"vespa.softtimeout.enabled": True}

    def test_unknown_keys_reported(self, executor):
        """Test that unrecognised reserved keys are listed."""
        input_data = RunnerInput(
            properties={
                "vespa.rank.thirdphase": ["x"],
                "query(user_profile)": ["{}"],
            }
        )

        output = executor.execute(input_data)

        assert output.success is True
        assert output.unknown_keys == ["vespa.rank.thirdphase"]

    def test_injected_store_is_used(self):
        """Test that input properties are imported into an injected store."""
        store = InMemoryStore({"vespa.rank.secondphase": "injected", "vespa.rank.firstphase": "old"})
        executor = Executor(store=store)

        output = executor.execute(RunnerInput(properties={"vespa.rank.firstphase": ["new"]}))

        assert output.values["vespa.rank.firstphase"] == "new"
        assert output.values["vespa.rank.secondphase"] == "injected"
        assert store.get("vespa.rank.firstphase") == ("new",)

    def test_custom_registry(self):
        """Test resolving through a registry other than the catalogue."""
        registry = PropertyRegistry(
            [
                Property("vespa.custom.limit", ValueType.UINT32, 3),
                EntityProperty("vespa.custom.label", ValueType.STRING, "?"),
            ]
        )
        executor = Executor(registry=registry)

        output = executor.execute(
            RunnerInput(properties={"vespa.custom.label.a": ["A"], "vespa.rank.firstphase": ["x"]})
        )

        assert output.values == {"vespa.custom.limit": 3, "vespa.custom.label.a": "A"}
        assert output.unknown_keys == ["vespa.rank.firstphase"]

    def test_errors_become_output(self, executor, monkeypatch):
        """Test that unexpected failures are reported, not raised."""

        def boom(*args, **kwargs):
            raise RuntimeError("store exploded")

        monkeypatch.setattr(executor, "_build_store", boom)

        output = executor.execute(RunnerInput())

        assert output.success is False
        assert output.error == "store exploded"
        assert output.error_type == "RuntimeError"


class TestRunnerOutput:
    """Tests for RunnerOutput serialization."""

    def test_infinity_serialized_as_constant(self):
        output = RunnerOutput(success=True, values={"k": float("-inf")})
        assert '"k":-Infinity' in output.model_dump_json()
