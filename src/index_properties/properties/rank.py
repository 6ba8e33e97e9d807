"""Rank feature selection for the first and second ranking phase."""

from index_properties.coercion import ValueType
from index_properties.descriptor import Property

FIRST_PHASE = Property(
    "vespa.rank.firstphase",
    ValueType.STRING,
    "",
    "Feature name used for first phase rank",
)

SECOND_PHASE = Property(
    "vespa.rank.secondphase",
    ValueType.STRING,
    "",
    "Feature name used for second phase rank",
)

ALL = (FIRST_PHASE, SECOND_PHASE)
