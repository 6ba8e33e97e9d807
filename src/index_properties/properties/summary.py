"""Features inserted into the summaryfeatures docsum field."""

from index_properties.coercion import ValueType
from index_properties.descriptor import Property

FEATURE = Property(
    "vespa.summary.feature",
    ValueType.STRING_LIST,
    (),
    "Feature names to include in summary features",
)

ALL = (FEATURE,)
