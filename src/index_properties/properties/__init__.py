"""The built-in property catalogue, one module per category."""

from index_properties.properties import (
    dump,
    evaluation,
    field,
    hitcollector,
    matching,
    matchphase,
    rank,
    softtimeout,
    summary,
    type_tags,
)

__all__ = [
    "dump",
    "evaluation",
    "field",
    "hitcollector",
    "matching",
    "matchphase",
    "rank",
    "softtimeout",
    "summary",
    "type_tags",
]
