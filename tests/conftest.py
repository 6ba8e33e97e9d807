"""Shared test fixtures."""

import pytest

from index_properties.stores import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def populated_store():
    return InMemoryStore(
        {
            "vespa.rank.firstphase": "myRankFeature",
            "vespa.rank.secondphase": "secondPhaseFeature",
            "vespa.summary.feature": ["fieldMatch(title)", "bm25(body)"],
            "vespa.matching.numthreadspersearch": "8",
            "vespa.softtimeout.enabled": "true",
            "vespa.hitcollector.heapsize": "250",
            "vespa.fieldweight.title": "200",
            "vespa.isfilterfield.category": "true",
            "vespa.type.attribute.embedding": "tensor<float>(x[128])",
        }
    )
