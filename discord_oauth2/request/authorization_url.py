# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..enums import GrantType, Prompt
from ..errors import MissingScopes
from ..scope import Scope, join
from .base import AUTHORIZE_URL, Builder, RedirectUriMixin, Request

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = (
    "AuthorizationUrlBody",
    "AuthorizationUrl",
    "AuthorizationUrlBuilder",
)

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorizationUrlBody:
    """Query parameters of an authorization URL.

    Attributes
    ----------
    grant_type: :class:`~discord_oauth2.GrantType`
        Always :attr:`~discord_oauth2.GrantType.AUTHORIZATION_CODE`.
    client_id: :class:`int`
        ID of the application.
    redirect_uri: :class:`str`
        Where Discord sends the user back to with the authorization code.
    response_type: :class:`str`
        Always ``code``.
    scope: :class:`str`
        Space-delimited list of scopes to request.
    state: Optional[:class:`str`]
        Opaque value handed back unchanged, used to protect against CSRF.
    prompt: Optional[:class:`~discord_oauth2.Prompt`]
        Whether to ask a user that already authorized the application again.
    """

    grant_type: GrantType
    client_id: int
    redirect_uri: str
    response_type: str
    scope: str
    state: Optional[str] = None
    prompt: Optional[Prompt] = None

    def query(self) -> List[Tuple[str, Optional[str]]]:
        return [
            ("grant_type", self.grant_type.value),
            ("client_id", str(self.client_id)),
            ("redirect_uri", self.redirect_uri),
            ("response_type", self.response_type),
            ("state", self.state),
            ("prompt", self.prompt.value if self.prompt is not None else None),
            ("scope", self.scope),
        ]


# opened by the user's browser, so there are no headers to send
AuthorizationUrl = Request[AuthorizationUrlBody]


class AuthorizationUrlBuilder(RedirectUriMixin, Builder):
    """Build the URL a user visits to authorize the application.

    At least one scope has to be set. The redirect URI defaults to the first
    one the client was created with.

    Examples
    ---------
    .. code-block:: python3

        client = OAuth2Client(123, "abcdef01234567890", ["https://example.com/callback"])
        url = (
            client.authorization_url()
            .scopes([Scope.IDENTIFY, Scope.GUILDS])
            .prompt(Prompt.CONSENT)
            .state("4f1c")
            .build()
            .url()
        )
    """

    def __init__(self, client) -> None:
        super().__init__(client)
        self._prompt: Optional[Prompt] = None
        self._state: Optional[str] = None

    def prompt(self, prompt: Prompt) -> Self:
        """Set whether the user is asked for consent again."""
        self._prompt = prompt
        return self

    def state(self, state: str) -> Self:
        """Set the state that Discord hands back with the authorization code."""
        self._state = state
        return self

    def webhook(self) -> Self:
        """Request the :attr:`~discord_oauth2.Scope.WEBHOOK_INCOMING` scope, so
        the user picks a channel to create a webhook in.

        Exchange the resulting code with
        :meth:`~discord_oauth2.OAuth2Client.webhook_token_exchange`.
        """
        self._scopes = [Scope.WEBHOOK_INCOMING]
        return self

    def build(self) -> AuthorizationUrl:
        """Build the authorization URL.

        Raises
        -------
        MissingScopes
            No scopes were set.
        InvalidRedirectUri
            The redirect URI isn't one the client was created with.
        MissingRedirectUri
            No redirect URI was set and the client has none registered.
        """
        if not self._scopes:
            raise MissingScopes()

        body = AuthorizationUrlBody(
            grant_type=GrantType.AUTHORIZATION_CODE,
            client_id=self._client.client_id,
            redirect_uri=self._resolve_redirect_uri(),  # type: ignore
            response_type="code",
            scope=join(self._scopes),
            state=self._state,
            prompt=self._prompt,
        )
        _log.debug("Built authorization URL for client %s with scope %r", body.client_id, body.scope)
        return Request(body=body, headers=(), url_base=AUTHORIZE_URL)
