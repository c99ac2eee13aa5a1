"""Summary statistics for a finished split computation."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Protocol

from loguru import logger

from shardsplit.core.models import ShardSplit
from shardsplit.core.utils import round_half_up


@dataclass
class OutlierSplit:
    """A split noticeably larger than the average split of its shard."""

    index: int
    filter_predicate: str
    num_hits: int
    pct_over_avg: int


@dataclass
class SplitReport:
    """Informational summary; never alters the returned splits."""

    shard_url: str
    split_field: str
    split_count: int
    total_hits: int
    avg_hits: int
    elapsed_ms: float
    missing_count: int = 0
    outliers: list[OutlierSplit] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict with timestamp."""
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "shard_url": self.shard_url,
            "split_field": self.split_field,
            "summary": {
                "split_count": self.split_count,
                "total_hits": self.total_hits,
                "avg_hits": self.avg_hits,
                "elapsed_ms": self.elapsed_ms,
                "missing_count": self.missing_count,
            },
            "outliers": [
                {
                    "index": o.index,
                    "filter_predicate": o.filter_predicate,
                    "num_hits": o.num_hits,
                    "pct_over_avg": o.pct_over_avg,
                }
                for o in self.outliers
            ],
            "warnings": self.warnings,
        }


class ReportingSink(Protocol):
    """Receives split reports (logging, metrics, ...)."""

    def report(self, report: SplitReport) -> None: ...


class LoggingReportSink:
    """Writes split reports to the loguru logger."""

    def report(self, report: SplitReport) -> None:
        logger.info(
            f"Took {report.elapsed_ms:.0f} ms to find {report.split_count} splits for "
            f"{report.split_field} with avg size: {report.avg_hits}, "
            f"total: {report.total_hits}"
        )
        for outlier in report.outliers:
            logger.warning(
                f"Size of split {outlier.index} {outlier.filter_predicate} is "
                f"{outlier.pct_over_avg}% larger than the avg split size "
                f"{report.avg_hits}; this could lead to sub-optimal job execution times."
            )


def build_split_report(
    shard_url: str,
    split_field: str,
    splits: list[ShardSplit],
    elapsed_ms: float,
    outlier_factor: float,
    missing_count: int = 0,
    warnings: list[str] | None = None,
) -> SplitReport:
    """Summarize splits and flag those above ``avg * outlier_factor``."""
    total = sum(s.num_hits for s in splits)
    avg = round_half_up(total / len(splits)) if splits else 0

    outliers: list[OutlierSplit] = []
    if avg > 0:
        high = round_half_up(avg * outlier_factor)
        for i, split in enumerate(splits):
            if split.num_hits > high:
                pct = round_half_up((split.num_hits / avg - 1.0) * 100)
                outliers.append(
                    OutlierSplit(
                        index=i,
                        filter_predicate=split.filter_predicate,
                        num_hits=split.num_hits,
                        pct_over_avg=pct,
                    )
                )

    return SplitReport(
        shard_url=shard_url,
        split_field=split_field,
        split_count=len(splits),
        total_hits=total,
        avg_hits=avg,
        elapsed_ms=elapsed_ms,
        missing_count=missing_count,
        outliers=outliers,
        warnings=list(warnings or []),
    )
