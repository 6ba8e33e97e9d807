"""Feature dumping."""

from index_properties.coercion import ValueType
from index_properties.descriptor import Property

FEATURE = Property(
    "vespa.dump.feature",
    ValueType.STRING_LIST,
    (),
    "Feature names to dump",
)

# When set, only the features listed under FEATURE are dumped.
IGNORE_DEFAULT_FEATURES = Property(
    "vespa.dump.ignoredefaultfeatures",
    ValueType.BOOLEAN,
    False,
    "Ignore default rank features when dumping",
)

ALL = (FEATURE, IGNORE_DEFAULT_FEATURES)
