"""HTTP stats gateway for a single Solr shard.

Every request is a zero-row query executed on the shard core only
(``distrib=false``) with the base query, the optional split filter, and the
stats component enabled for the split field.
"""

from types import TracebackType
from typing import Any

import httpx
from loguru import logger

from shardsplit.core.config.solr_config import SolrConfig
from shardsplit.core.exceptions import BackendQueryError
from shardsplit.core.models import FieldStats, ShardQuery


class SolrStatsGateway:
    """StatsGateway backed by a Solr shard's request handler.

    Usable as a context manager; the HTTP client is closed on exit when the
    gateway created it.
    """

    def __init__(
        self,
        shard_url: str,
        base_query: ShardQuery,
        config: SolrConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.shard_url = shard_url.rstrip("/")
        self.base_query = base_query
        self._config = config or SolrConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=self._config.timeout,
            verify=self._config.verify_ssl,
            auth=self._config.auth(),
        )

    def __enter__(self) -> "SolrStatsGateway":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def field_stats(
        self, filter_query: str | None, field: str, distributed: bool = False
    ) -> FieldStats:
        params = self.base_query.with_filter(filter_query).for_stats(distributed).to_params()
        params += [("stats", "true"), ("stats.field", field)]

        data = self._select(params)
        try:
            stats_fields = data["stats"]["stats_fields"]
        except (KeyError, TypeError) as e:
            raise BackendQueryError(
                f"No stats returned for field '{field}' from {self.shard_url}",
                shard_url=self.shard_url,
            ) from e
        return FieldStats.from_response(stats_fields.get(field))

    def count(self, filter_query: str | None) -> int:
        params = self.base_query.with_filter(filter_query).for_stats().to_params()
        data = self._select(params)
        try:
            return int(data["response"]["numFound"])
        except (KeyError, TypeError, ValueError) as e:
            raise BackendQueryError(
                f"Malformed count response from {self.shard_url}",
                shard_url=self.shard_url,
            ) from e

    def _select(self, params: list[tuple[str, str]]) -> dict[str, Any]:
        url = f"{self.shard_url}{self._config.request_handler}"
        params = params + [("wt", "json")]
        logger.trace(f"GET {url} {params}")
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise BackendQueryError(
                f"Query against {self.shard_url} failed with HTTP "
                f"{e.response.status_code}: {e.response.text[:200]}",
                shard_url=self.shard_url,
            ) from e
        except httpx.HTTPError as e:
            raise BackendQueryError(
                f"Query against {self.shard_url} failed: {e}",
                shard_url=self.shard_url,
            ) from e
        except ValueError as e:
            raise BackendQueryError(
                f"Undecodable response from {self.shard_url}: {e}",
                shard_url=self.shard_url,
            ) from e
