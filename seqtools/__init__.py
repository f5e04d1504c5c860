"""Order-preserving sequence helpers and the ``seqtools`` CLI."""

from seqtools.arrays import (
    assign,
    compact,
    drop,
    filter_by,
    find,
    find_last,
    map_by,
    uniq,
    without,
)

__all__ = [
    "assign",
    "compact",
    "drop",
    "filter_by",
    "find",
    "find_last",
    "map_by",
    "uniq",
    "without",
]
