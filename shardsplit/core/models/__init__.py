"""Domain models for shard splitting."""

from .query import ShardQuery
from .split import CompositeSplit, RangeSplit, ShardSplit
from .stats import FieldStats

__all__ = [
    "CompositeSplit",
    "FieldStats",
    "RangeSplit",
    "ShardQuery",
    "ShardSplit",
]
