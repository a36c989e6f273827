from __future__ import annotations

import logging
from typing import Iterable, Tuple, Union
from urllib.parse import urlsplit

from .errors import InvalidRedirectUri
from .request import (
    AccessTokenExchangeBuilder,
    AuthorizationUrlBuilder,
    BotAuthorizationUrlBuilder,
    ClientCredentialsGrantBuilder,
    RefreshTokenExchangeBuilder,
    WebhookTokenExchangeBuilder,
)

__all__ = (
    "OAuth2Client",
)

_log = logging.getLogger(__name__)


class OAuth2Client:
    """Holds the identity of an application and creates request builders for it.

    Builders only keep a reference to the client, so it has to outlive every
    builder and request created from it. The client is never mutated after
    creation.

    Parameters
    -----------
    client_id: Union[:class:`int`, :class:`str`]
        The application ID provided by Discord.
    client_secret: :class:`str`
        The client secret provided by Discord.
    redirect_uris: Iterable[:class:`str`]
        The redirect URIs registered for the application. Builders only
        accept these, and default to the first one.

    Raises
    -------
    InvalidRedirectUri
        A redirect URI isn't an absolute ``http`` or ``https`` URL.
    ValueError
        ``client_id`` isn't a snowflake.
    """

    __slots__ = (
        "_client_id",
        "_client_secret",
        "_redirect_uris",
    )

    def __init__(
        self,
        client_id: Union[int, str],
        client_secret: str,
        redirect_uris: Iterable[str] = (),
    ) -> None:
        self._client_id: int = int(client_id)
        self._client_secret: str = client_secret
        self._redirect_uris: Tuple[str, ...] = tuple(redirect_uris)

        for uri in self._redirect_uris:
            parts = urlsplit(uri)
            if parts.scheme not in ("http", "https") or not parts.netloc:
                raise InvalidRedirectUri(uri, "is not an absolute http(s) URL")

        _log.debug("Created OAuth2 client %s with %d redirect URI(s)", self._client_id, len(self._redirect_uris))

    @classmethod
    def from_env(cls) -> OAuth2Client:
        """Create a client from ``DISCORD_CLIENT_ID``, ``DISCORD_CLIENT_SECRET``
        and ``DISCORD_REDIRECT_URIS``, also looking in a ``.env`` file.

        Raises
        -------
        ConfigurationError
            A required variable isn't set.
        """
        from .config import load_client_config

        config = load_client_config()
        return cls(config.client_id, config.client_secret, config.redirect_uris)

    def __repr__(self) -> str:
        return f"<OAuth2Client client_id={self._client_id} redirect_uris={self._redirect_uris!r}>"

    @property
    def client_id(self) -> int:
        """:class:`int`: The application ID."""
        return self._client_id

    @property
    def client_secret(self) -> str:
        """:class:`str`: The client secret."""
        return self._client_secret

    @property
    def redirect_uris(self) -> Tuple[str, ...]:
        """Tuple[:class:`str`, ...]: The registered redirect URIs."""
        return self._redirect_uris

    def authorization_url(self) -> AuthorizationUrlBuilder:
        """Start building the URL a user visits to authorize the application."""
        return AuthorizationUrlBuilder(self)

    def bot_authorization_url(self) -> BotAuthorizationUrlBuilder:
        """Start building the URL used to add the application's bot to a guild."""
        return BotAuthorizationUrlBuilder(self)

    def client_credentials_grant(self) -> ClientCredentialsGrantBuilder:
        """Start building a client credentials grant for the application's owner."""
        return ClientCredentialsGrantBuilder(self)

    def access_token_exchange(self, code: str) -> AccessTokenExchangeBuilder:
        """Start building an exchange of an authorization code

        Parameters
        -----------
        code: :class:`str`
            The authorization code from the OAuth2 redirect
        """
        return AccessTokenExchangeBuilder(self, code)

    def refresh_token_exchange(self, refresh_token: str) -> RefreshTokenExchangeBuilder:
        """Start building an exchange of a refresh token

        Parameters
        -----------
        refresh_token: :class:`str`
            The refresh token to use
        """
        return RefreshTokenExchangeBuilder(self, refresh_token)

    def webhook_token_exchange(self, code: str) -> WebhookTokenExchangeBuilder:
        """Start building an exchange of an authorization code granted with the
        :attr:`~discord_oauth2.Scope.WEBHOOK_INCOMING` scope
        """
        return WebhookTokenExchangeBuilder(self, code)
