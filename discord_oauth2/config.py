import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

__all__ = (
    "ClientConfig",
    "load_client_config",
)

CLIENT_ID_ENV = "DISCORD_CLIENT_ID"
CLIENT_SECRET_ENV = "DISCORD_CLIENT_SECRET"
REDIRECT_URIS_ENV = "DISCORD_REDIRECT_URIS"


@dataclass(frozen=True)
class ClientConfig:
    client_id: int
    client_secret: str = field(repr=False)
    redirect_uris: Tuple[str, ...] = ()


def _require(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ConfigurationError(f"environment variable {name} is not set")
    return value


def load_client_config(dotenv_path: Optional[str] = None) -> ClientConfig:
    """Read the application's identity from the environment.

    ``DISCORD_REDIRECT_URIS`` is a comma-separated list and may be left unset.
    Values already in the environment win over the ``.env`` file, which is
    looked up from the current working directory unless ``dotenv_path`` is given.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    client_id = _require(CLIENT_ID_ENV)
    if not client_id.isdigit():
        raise ConfigurationError(f"environment variable {CLIENT_ID_ENV} must be a numeric application ID")

    redirect_uris = os.environ.get(REDIRECT_URIS_ENV, "")
    return ClientConfig(
        client_id=int(client_id),
        client_secret=_require(CLIENT_SECRET_ENV),
        redirect_uris=tuple(uri.strip() for uri in redirect_uris.split(",") if uri.strip()),
    )
