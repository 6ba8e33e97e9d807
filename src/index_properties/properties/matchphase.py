"""Match-phase degradation and result diversity.

When a query matches more documents than can be ranked in time, the match
phase may stop early, keeping the best hits by a single attribute.  The
diversity properties keep that cut from collapsing onto a few groups.
Degradation is disabled while ``DEGRADATION_ATTRIBUTE`` is empty and
diversity is disabled while ``DIVERSITY_ATTRIBUTE`` is empty or
``DIVERSITY_MIN_GROUPS`` is 1.
"""

from index_properties.coercion import ValueType
from index_properties.descriptor import Property

DEGRADATION_ATTRIBUTE = Property(
    "vespa.matchphase.degradation.attribute",
    ValueType.STRING,
    "",
    "Attribute used for graceful degradation during match phase",
)

DEGRADATION_ASCENDING_ORDER = Property(
    "vespa.matchphase.degradation.ascendingorder",
    ValueType.BOOLEAN,
    False,
    "Prefer low attribute values when degrading",
)

DEGRADATION_MAX_HITS = Property(
    "vespa.matchphase.degradation.maxhits",
    ValueType.UINT32,
    0,
    "Number of hits wanted for graceful degradation",
)

DEGRADATION_SAMPLE_PERCENTAGE = Property(
    "vespa.matchphase.degradation.samplepercentage",
    ValueType.DOUBLE,
    0.2,
    "Share of wanted hits to collect before considering degradation",
)

DEGRADATION_MAX_FILTER_COVERAGE = Property(
    "vespa.matchphase.degradation.maxfiltercoverage",
    ValueType.DOUBLE,
    1.0,
    "Maximum filter coverage before degradation applies",
)

# > 1 favors pre filtering, < 1 favors post filtering.
DEGRADATION_POST_FILTER_MULTIPLIER = Property(
    "vespa.matchphase.degradation.postfiltermultiplier",
    ValueType.DOUBLE,
    1.0,
    "Moves the switchpoint between pre and post filtering",
)

DIVERSITY_ATTRIBUTE = Property(
    "vespa.matchphase.diversity.attribute",
    ValueType.STRING,
    "",
    "Attribute used to ensure result diversity during match phase limiting",
)

DIVERSITY_MIN_GROUPS = Property(
    "vespa.matchphase.diversity.mingroups",
    ValueType.UINT32,
    1,
    "Minimum number of diversity groups to aim for",
)

DIVERSITY_CUTOFF_FACTOR = Property(
    "vespa.matchphase.diversity.cutoff.factor",
    ValueType.DOUBLE,
    10.0,
    "Diversity cutoff factor",
)

DIVERSITY_CUTOFF_STRATEGY = Property(
    "vespa.matchphase.diversity.cutoff.strategy",
    ValueType.STRING,
    "loose",
    "Diversity cutoff strategy ('loose' or 'strict')",
)

ALL = (
    DEGRADATION_ATTRIBUTE,
    DEGRADATION_ASCENDING_ORDER,
    DEGRADATION_MAX_HITS,
    DEGRADATION_SAMPLE_PERCENTAGE,
    DEGRADATION_MAX_FILTER_COVERAGE,
    DEGRADATION_POST_FILTER_MULTIPLIER,
    DIVERSITY_ATTRIBUTE,
    DIVERSITY_MIN_GROUPS,
    DIVERSITY_CUTOFF_FACTOR,
    DIVERSITY_CUTOFF_STRATEGY,
)
