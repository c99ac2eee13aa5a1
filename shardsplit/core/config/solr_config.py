"""Solr connection configuration for shardsplit."""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SolrConfig(BaseSettings):
    """HTTP settings used by SolrStatsGateway.

    Environment Variables:
        SHARDSPLIT_SOLR_TIMEOUT=30
        SHARDSPLIT_SOLR_USERNAME=solr
        SHARDSPLIT_SOLR_PASSWORD=...
    """

    model_config = SettingsConfigDict(
        env_prefix="SHARDSPLIT_SOLR_",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    timeout: float = Field(
        default=30.0, gt=0.0, description="Per-request timeout in seconds"
    )
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    username: str | None = Field(default=None, description="Basic auth username")
    password: SecretStr | None = Field(default=None, description="Basic auth password")
    request_handler: str = Field(
        default="/select", description="Request handler path appended to the shard URL"
    )

    @field_validator("request_handler")
    def validate_request_handler(cls, v: str) -> str:  # noqa: N805
        """Normalize handler path to a single leading slash."""
        v = v.strip()
        if not v:
            raise ValueError("request_handler cannot be empty")
        return "/" + v.lstrip("/")

    def auth(self) -> tuple[str, str] | None:
        """Basic auth tuple for httpx, or None when no username is set."""
        if not self.username:
            return None
        password = self.password.get_secret_value() if self.password else ""
        return (self.username, password)
