"""Configuration for shardsplit."""

from .config import Config
from .logging_config import FileLoggingConfig, LoggingConfig
from .solr_config import SolrConfig
from .splitting_config import SplittingConfig

__all__ = [
    "Config",
    "FileLoggingConfig",
    "LoggingConfig",
    "SolrConfig",
    "SplittingConfig",
]
