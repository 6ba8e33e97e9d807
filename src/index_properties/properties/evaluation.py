"""Expression evaluation mode flags."""

from index_properties.coercion import ValueType
from index_properties.descriptor import Property

LAZY_EXPRESSIONS = Property(
    "vespa.eval.lazy_expressions",
    ValueType.BOOLEAN,
    True,
    "Evaluate ranking expressions lazily; affects rank, summary and dump features",
)

ALL = (LAZY_EXPRESSIONS,)
