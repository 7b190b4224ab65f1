"""Authentication schemes accepted by the Miniflux API."""

import base64
from dataclasses import dataclass, field

from .config import Config
from .errors import ConfigurationError


@dataclass(frozen=True)
class ApiKeyAuth:
    """API token sent verbatim in the ``X-Auth-Token`` header."""

    token: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        return {"X-Auth-Token": self.token}


@dataclass(frozen=True)
class BasicAuth:
    """HTTP Basic authentication with a username and password."""

    username: str
    password: str = field(repr=False)

    def headers(self) -> dict[str, str]:
        credentials = base64.b64encode(f"{self.username}:{self.password}".encode()).decode("ascii")
        return {"Authorization": f"Basic {credentials}"}


Auth = ApiKeyAuth | BasicAuth


def resolve_auth(config: Config) -> Auth:
    """Validate the configured credentials and pick the auth scheme.

    Checks run in a fixed order: base URL, then the API key for ``api_key``
    mode, or the username followed by the password for ``password`` mode.

    Raises:
        ConfigurationError: On the first missing setting.
    """
    if not config.miniflux_url:
        raise ConfigurationError("Miniflux base URL is required")

    if config.miniflux_auth_type == "password":
        if not config.miniflux_username:
            raise ConfigurationError("Miniflux username is required")
        password = config.miniflux_password.get_secret_value() if config.miniflux_password else ""
        if not password:
            raise ConfigurationError("Miniflux password is required")
        return BasicAuth(username=config.miniflux_username, password=password)

    token = config.miniflux_api_key.get_secret_value() if config.miniflux_api_key else ""
    if not token:
        raise ConfigurationError("Miniflux API key is required")
    return ApiKeyAuth(token=token)
