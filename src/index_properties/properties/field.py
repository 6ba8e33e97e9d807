"""Per-field weight and filter flags."""

from index_properties.coercion import ValueType
from index_properties.descriptor import EntityProperty

FIELD_WEIGHT = EntityProperty(
    "vespa.fieldweight",
    ValueType.UINT32,
    100,
    "Weight of a field",
)

IS_FILTER_FIELD = EntityProperty(
    "vespa.isfilterfield",
    ValueType.BOOLEAN,
    False,
    "Whether a field is a filter field",
)

ALL = (FIELD_WEIGHT, IS_FILTER_FIELD)
