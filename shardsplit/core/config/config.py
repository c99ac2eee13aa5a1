"""Aggregated configuration for shardsplit."""

from pydantic import BaseModel, Field

from .logging_config import LoggingConfig
from .solr_config import SolrConfig
from .splitting_config import SplittingConfig


class Config(BaseModel):
    """Bundle of every configuration section.

    Each section reads its own SHARDSPLIT_<SECTION>_* environment variables
    when instantiated with defaults.
    """

    splitting: SplittingConfig = Field(default_factory=SplittingConfig)
    solr: SolrConfig = Field(default_factory=SolrConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
