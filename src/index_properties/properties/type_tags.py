"""Declared types of attributes and query features.

Only tensor types are declared this way, e.g.
``tensor(x{},y[3])`` for ``vespa.type.attribute.embedding``.
"""

from index_properties.coercion import ValueType
from index_properties.descriptor import EntityProperty

ATTRIBUTE = EntityProperty(
    "vespa.type.attribute",
    ValueType.STRING,
    "",
    "Type of an attribute",
)

QUERY_FEATURE = EntityProperty(
    "vespa.type.queryfeature",
    ValueType.STRING,
    "",
    "Type of a query feature",
)

ALL = (ATTRIBUTE, QUERY_FEATURE)
