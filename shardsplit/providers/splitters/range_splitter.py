"""Equal-width range splitting for ordered field types.

Numeric and temporal fields share the same arithmetic once their values are
mapped onto a number line ("ordinals"): integers map to themselves, floats to
themselves, and datetimes to epoch milliseconds. A RangeFieldSplitter is that
arithmetic parameterized by the mapping.

Re-splitting a range issues one stats query for the range itself (to learn its
observed min/max) and one count query per child. Children are half-open and
contiguous: the first keeps the parent's lower bound, the last keeps the
parent's upper bound, so their predicates partition the parent's exactly.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from loguru import logger

from shardsplit.core.models import FieldStats, RangeSplit, ShardQuery
from shardsplit.core.utils import round_half_up
from shardsplit.providers.solr.filters import range_filter

if TYPE_CHECKING:
    from shardsplit.interfaces.stats_gateway import StatsGateway

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class RangeFieldSplitter:
    """Range splitter for one field type.

    Args:
        field_type: Name of the field type this splitter serves
        parse: Converts a raw stats value (min/max) into a bound value
        to_ordinal: Maps a bound value onto the number line
        from_ordinal: Inverse of ``to_ordinal``
        integral: Ordinals are integers (boundaries are rounded up)
    """

    def __init__(
        self,
        field_type: str,
        parse: Callable[[Any], Any],
        to_ordinal: Callable[[Any], int | float],
        from_ordinal: Callable[[int | float], Any],
        integral: bool,
    ) -> None:
        self.field_type = field_type
        self._parse = parse
        self._to_ordinal = to_ordinal
        self._from_ordinal = from_ordinal
        self._integral = integral

    def __repr__(self) -> str:
        return f"RangeFieldSplitter(field_type={self.field_type!r})"

    def range_filter(self, field: str, lower: Any, upper: Any) -> str:
        return range_filter(field, lower, upper)

    def create_split(
        self,
        query: ShardQuery,
        shard_url: str,
        field: str,
        stats: FieldStats,
        lower: Any,
        upper: Any,
        num_hits: int = 0,
    ) -> RangeSplit:
        return RangeSplit(
            shard_url=shard_url,
            query=query,
            field_name=field,
            num_hits=num_hits,
            lower_inclusive=lower,
            upper=upper,
            stats=stats,
            splitter=self,
        )

    def initial_split(
        self, query: ShardQuery, shard_url: str, field: str, stats: FieldStats
    ) -> RangeSplit:
        return self.create_split(
            query, shard_url, field, stats, None, None, num_hits=stats.count
        )

    def re_split(
        self, split: RangeSplit, gateway: "StatsGateway", docs_per_split: int
    ) -> list[RangeSplit]:
        if docs_per_split <= 0:
            return [split]

        num_children = round_half_up(split.num_hits / docs_per_split)
        if num_children <= 1:
            return [split]

        range_stats = gateway.field_stats(split.filter_predicate, split.field_name)
        if range_stats.is_degenerate:
            return [split]

        lo = self._to_ordinal(self._parse(range_stats.min))
        hi = self._to_ordinal(self._parse(range_stats.max))
        if hi <= lo:
            # Single distinct value, nothing to divide
            return [split]

        boundaries = self.boundaries(lo, hi, num_children)
        edges = [
            split.lower_inclusive,
            *(self._from_ordinal(b) for b in boundaries),
            split.upper,
        ]

        children: list[RangeSplit] = []
        for lower, upper in zip(edges, edges[1:]):
            predicate = self.range_filter(split.field_name, lower, upper)
            children.append(
                self.create_split(
                    split.query,
                    split.shard_url,
                    split.field_name,
                    split.stats,
                    lower,
                    upper,
                    num_hits=gateway.count(predicate),
                )
            )

        logger.debug(
            f"Re-split {split} into {len(children)} ranges "
            f"(target {docs_per_split} docs each)"
        )
        return children

    def boundaries(
        self, lo: int | float, hi: int | float, num_children: int
    ) -> list[int | float]:
        """Interior boundaries dividing ``[lo, hi]`` into equal-width ranges.

        Every boundary satisfies ``lo < b <= hi`` and the list is strictly
        increasing, so no child range is empty of the observed span.
        """
        points: list[int | float] = []
        for k in range(1, num_children):
            if self._integral:
                # Integer ceil keeps precision for values beyond 2**53
                b: int | float = lo + ((hi - lo) * k + num_children - 1) // num_children
            else:
                b = lo + (hi - lo) * k / num_children
            if lo < b <= hi and (not points or b > points[-1]):
                points.append(b)
        return points


def _parse_int(value: Any) -> int:
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return int(float(value))
    return int(value)


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _datetime_to_millis(value: datetime) -> int:
    return (value - EPOCH) // timedelta(milliseconds=1)


def _millis_to_datetime(value: int | float) -> datetime:
    return EPOCH + timedelta(milliseconds=int(value))


def int_splitter(field_type: str = "long") -> RangeFieldSplitter:
    return RangeFieldSplitter(field_type, _parse_int, int, int, integral=True)


def float_splitter(field_type: str = "double") -> RangeFieldSplitter:
    return RangeFieldSplitter(field_type, float, float, float, integral=False)


def date_splitter(field_type: str = "date") -> RangeFieldSplitter:
    return RangeFieldSplitter(
        field_type,
        _parse_datetime,
        _datetime_to_millis,
        _millis_to_datetime,
        integral=True,
    )
