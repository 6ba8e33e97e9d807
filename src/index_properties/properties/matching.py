"""Match-time threading and termwise evaluation tuning."""

from index_properties.coercion import ValueType
from index_properties.descriptor import Property

# In [0, 1]: how much of the corpus the query must match for termwise
# evaluation to be enabled.  1 means never, 0 means always.
TERMWISE_LIMIT = Property(
    "vespa.matching.termwiselimit",
    ValueType.DOUBLE,
    1.0,
    "Hit ratio above which termwise evaluation is enabled",
)

NUM_THREADS_PER_SEARCH = Property(
    "vespa.matching.numthreadspersearch",
    ValueType.UINT32,
    1,
    "Number of threads used per search",
)

MIN_HITS_PER_THREAD = Property(
    "vespa.matching.minhitsperthread",
    ValueType.UINT32,
    0,
    "Minimum number of hits per thread",
)

# A partition is a unit of work for the search threads.
NUM_SEARCH_PARTITIONS = Property(
    "vespa.matching.numsearchpartitions",
    ValueType.UINT32,
    1,
    "Number of partitions inside the docid space",
)

ALL = (TERMWISE_LIMIT, NUM_THREADS_PER_SEARCH, MIN_HITS_PER_THREAD, NUM_SEARCH_PARTITIONS)
