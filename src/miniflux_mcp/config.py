"""Configuration management for Miniflux MCP.

All configuration comes from environment variables. Credential presence is
not enforced here: the client checks it at construction time so that each
missing piece produces its own ConfigurationError in a fixed order.
"""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

AuthType = Literal["api_key", "password"]


class Config(BaseSettings):
    """Client and server configuration loaded from environment variables."""

    miniflux_url: str = Field(default="", alias="MINIFLUX_URL")
    miniflux_auth_type: AuthType = Field(default="api_key", alias="MINIFLUX_AUTH_TYPE")
    miniflux_api_key: SecretStr | None = Field(default=None, alias="MINIFLUX_API_KEY")
    miniflux_username: str | None = Field(default=None, alias="MINIFLUX_USERNAME")
    miniflux_password: SecretStr | None = Field(default=None, alias="MINIFLUX_PASSWORD")
    request_timeout: float = Field(default=30.0, alias="MINIFLUX_TIMEOUT")
    server_host: str = Field(default="127.0.0.1", alias="MCP_SERVER_HOST")
    server_port: int = Field(default=8000, alias="MCP_SERVER_PORT")

    model_config = SettingsConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


def load_config() -> Config:
    """Load config from environment. Raises on malformed values."""
    return Config()
