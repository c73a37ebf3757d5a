"""
Client Configuration

Credentials and transport settings for the D1 query API, validated with
Pydantic. Values are supplied programmatically by the embedding
application.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"


class D1APIOptions(BaseModel):
    """Immutable connection options for one D1 database."""

    model_config = ConfigDict(frozen=True)

    # Hex string, 32 characters long
    account_id: str = Field(..., description="Cloudflare account identifier")
    # Alphanumeric string, 40 characters long
    api_key: SecretStr = Field(..., description="API token sent as a bearer token")
    # UUID, 36 characters long
    database_id: str = Field(..., description="D1 database identifier")
    base_url: str = Field(DEFAULT_BASE_URL, description="API root URL")
    timeout: float | None = Field(None, description="Request timeout in seconds, None to wait forever")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @property
    def query_url(self) -> str:
        """Endpoint for the configured database."""
        return (
            f"{self.base_url}/accounts/{self.account_id}"
            f"/d1/database/{self.database_id}/query"
        )
