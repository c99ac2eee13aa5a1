"""Tests for splitting and Solr configuration."""

import pytest
from pydantic import ValidationError

from shardsplit.core.config import Config, LoggingConfig, SolrConfig, SplittingConfig


class TestSplittingConfig:
    """Balancing knobs and their validation."""

    def test_defaults(self, clean_environment):
        config = SplittingConfig()
        assert config.balance_passes == 3
        assert config.merge_tolerance == 1.18
        assert config.resplit_factor == 1.8
        assert config.outlier_factor == 1.40
        assert config.missing_warning_factor == 2.0
        assert config.always_count_missing is False

    def test_env_override(self, clean_environment, monkeypatch):
        """SHARDSPLIT_SPLITTING_* variables override defaults."""
        monkeypatch.setenv("SHARDSPLIT_SPLITTING_BALANCE_PASSES", "5")
        monkeypatch.setenv("SHARDSPLIT_SPLITTING_MERGE_TOLERANCE", "1.25")
        monkeypatch.setenv("SHARDSPLIT_SPLITTING_ALWAYS_COUNT_MISSING", "true")

        config = SplittingConfig()

        assert config.balance_passes == 5
        assert config.merge_tolerance == 1.25
        assert config.always_count_missing is True

    def test_explicit_values_win_over_env(self, clean_environment, monkeypatch):
        monkeypatch.setenv("SHARDSPLIT_SPLITTING_BALANCE_PASSES", "5")
        assert SplittingConfig(balance_passes=1).balance_passes == 1

    def test_resplit_must_exceed_merge_band(self, clean_environment):
        """Overlapping bands would let splits oscillate between merge and re-split."""
        with pytest.raises(ValidationError, match="must be greater than"):
            SplittingConfig(merge_tolerance=1.9, resplit_factor=1.8)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("balance_passes", -1),
            ("balance_passes", 21),
            ("merge_tolerance", 0.9),
            ("resplit_factor", 1.0),
            ("outlier_factor", 1.0),
            ("missing_warning_factor", 0.0),
        ],
    )
    def test_out_of_range_rejected(self, clean_environment, field, value):
        with pytest.raises(ValidationError):
            SplittingConfig(**{field: value})

    def test_zero_passes_allowed(self, clean_environment):
        assert SplittingConfig(balance_passes=0).balance_passes == 0

    def test_repr(self, clean_environment):
        assert repr(SplittingConfig()) == (
            "SplittingConfig(balance_passes=3, merge_tolerance=1.18, resplit_factor=1.8)"
        )


class TestSolrConfig:
    """HTTP settings for the Solr gateway."""

    def test_defaults(self, clean_environment):
        config = SolrConfig()
        assert config.timeout == 30.0
        assert config.verify_ssl is True
        assert config.request_handler == "/select"
        assert config.auth() is None

    def test_basic_auth_from_env(self, clean_environment, monkeypatch):
        monkeypatch.setenv("SHARDSPLIT_SOLR_USERNAME", "solr")
        monkeypatch.setenv("SHARDSPLIT_SOLR_PASSWORD", "SolrRocks")

        config = SolrConfig()

        assert config.auth() == ("solr", "SolrRocks")
        assert "SolrRocks" not in repr(config)

    def test_username_without_password(self, clean_environment):
        assert SolrConfig(username="solr").auth() == ("solr", "")

    @pytest.mark.parametrize(
        "handler,expected",
        [("select", "/select"), ("/export", "/export"), ("//query ", "/query")],
    )
    def test_request_handler_normalized(self, clean_environment, handler, expected):
        assert SolrConfig(request_handler=handler).request_handler == expected

    def test_empty_request_handler(self, clean_environment):
        with pytest.raises(ValidationError, match="request_handler cannot be empty"):
            SolrConfig(request_handler="  ")

    def test_timeout_must_be_positive(self, clean_environment):
        with pytest.raises(ValidationError):
            SolrConfig(timeout=0)


class TestConfig:
    def test_sections(self, clean_environment):
        config = Config()
        assert isinstance(config.splitting, SplittingConfig)
        assert isinstance(config.solr, SolrConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_sections_read_env(self, clean_environment, monkeypatch):
        monkeypatch.setenv("SHARDSPLIT_SPLITTING_BALANCE_PASSES", "7")
        assert Config().splitting.balance_passes == 7
