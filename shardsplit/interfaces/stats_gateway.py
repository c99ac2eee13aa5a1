"""StatsGateway protocol - statistics queries against one shard."""

from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Protocol

from shardsplit.core.models import FieldStats, ShardQuery


class StatsGateway(Protocol):
    """Executes zero-row statistics queries scoped to one shard.

    A gateway is bound to a shard and a base query. Every call conjoins the
    optional ``filter_query`` with the base query. Implementations raise
    BackendQueryError on any failure and never retry.
    """

    def field_stats(
        self, filter_query: str | None, field: str, distributed: bool = False
    ) -> FieldStats:
        """Return count/min/max/missing of ``field`` for the filtered base query."""
        ...

    def count(self, filter_query: str | None) -> int:
        """Return the number of documents matching the filtered base query."""
        ...

    def close(self) -> None:
        """Release the underlying connection."""
        ...


# (shard_url, base_query) -> context manager yielding a gateway; the context
# exit releases the connection.
GatewayFactory = Callable[[str, ShardQuery], AbstractContextManager[StatsGateway]]
