"""Solr backend support: filter syntax and the HTTP stats gateway."""

from .filters import format_value, missing_filter, or_filter, range_filter
from .solr_gateway import SolrStatsGateway

__all__ = [
    "SolrStatsGateway",
    "format_value",
    "missing_filter",
    "or_filter",
    "range_filter",
]
