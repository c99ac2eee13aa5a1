"""Interfaces for shardsplit collaborators."""

from .field_splitter import FieldTypeSplitter
from .stats_gateway import GatewayFactory, StatsGateway

__all__ = ["FieldTypeSplitter", "GatewayFactory", "StatsGateway"]
