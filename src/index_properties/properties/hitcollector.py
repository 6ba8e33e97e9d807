"""Hit collector sizing and parallel query evaluation limits."""

from index_properties.coercion import UINT32_MAX, ValueType
from index_properties.descriptor import Property

HEAP_SIZE = Property(
    "vespa.hitcollector.heapsize",
    ValueType.UINT32,
    100,
    "Heap size used in the hit collector",
)

ARRAY_SIZE = Property(
    "vespa.hitcollector.arraysize",
    ValueType.UINT32,
    10000,
    "Array size used in the hit collector",
)

ESTIMATE_POINT = Property(
    "vespa.hitcollector.estimatepoint",
    ValueType.UINT32,
    UINT32_MAX,
    "When to estimate the total number of hits",
)

# Ranking is aborted when the hit estimate goes above the limit.
ESTIMATE_LIMIT = Property(
    "vespa.hitcollector.estimatelimit",
    ValueType.UINT32,
    UINT32_MAX,
    "Limit for the total hit estimate",
)

# Hits with rank score <= the limit are dropped.
RANK_SCORE_DROP_LIMIT = Property(
    "vespa.hitcollector.rankscoredroplimit",
    ValueType.DOUBLE,
    float("-inf"),
    "Rank score drop limit",
)

ALL = (HEAP_SIZE, ARRAY_SIZE, ESTIMATE_POINT, ESTIMATE_LIMIT, RANK_SCORE_DROP_LIMIT)
