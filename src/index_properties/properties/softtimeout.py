"""Soft timeout tuning."""

from index_properties.coercion import ValueType
from index_properties.descriptor import Property

ENABLED = Property(
    "vespa.softtimeout.enabled",
    ValueType.BOOLEAN,
    False,
    "Enable the soft timeout",
)

TAIL_COST = Property(
    "vespa.softtimeout.tailcost",
    ValueType.DOUBLE,
    0.1,
    "Share [0-1] of the timeout reserved for work after the search phase",
)

# Queries may override the factor the backend maintains.
FACTOR = Property(
    "vespa.softtimeout.factor",
    ValueType.DOUBLE,
    0.5,
    "Soft timeout factor",
)

ALL = (ENABLED, TAIL_COST, FACTOR)
