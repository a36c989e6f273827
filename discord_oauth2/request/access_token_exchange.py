# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, List, Optional, Tuple, Type

from ..enums import GrantType
from ..response import AccessTokenExchangeResponse
from ..scope import join
from .base import FORM_HEADERS, TOKEN_URL, Builder, RedirectUriMixin, TokenRequest

if TYPE_CHECKING:
    from ..client import OAuth2Client

__all__ = (
    "AccessTokenExchangeRequestBody",
    "AccessTokenExchangeRequest",
    "AccessTokenExchangeBuilder",
)

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessTokenExchangeRequestBody:
    """Fields of an authorization code exchange.

    Attributes
    ----------
    client_id: :class:`int`
        ID of the application.
    client_secret: :class:`str`
        Secret of the application.
    code: :class:`str`
        Authorization code handed to the redirect URI.
    grant_type: :class:`~discord_oauth2.GrantType`
        Always :attr:`~discord_oauth2.GrantType.AUTHORIZATION_CODE`.
    redirect_uri: :class:`str`
        Must match the redirect URI of the authorization URL.
    scope: :class:`str`
        Space-delimited list of scopes, empty to leave it out.
    """

    client_id: int
    client_secret: str
    code: str
    grant_type: GrantType
    redirect_uri: str
    scope: str

    def query(self) -> List[Tuple[str, Optional[str]]]:
        return [
            ("grant_type", self.grant_type.value),
            ("code", self.code),
            ("redirect_uri", self.redirect_uri),
            ("scope", self.scope),
        ]

    def form(self) -> List[Tuple[str, Optional[str]]]:
        fields = self.query()
        fields[1:1] = [("client_id", str(self.client_id)), ("client_secret", self.client_secret)]
        return fields


AccessTokenExchangeRequest = TokenRequest[AccessTokenExchangeRequestBody, AccessTokenExchangeResponse]


class AccessTokenExchangeBuilder(RedirectUriMixin, Builder):
    """Exchange the authorization code handed to the redirect URI for an
    access token and refresh token pair.

    The redirect URI defaults to the first one the client was created with and
    has to match the one used for the authorization URL.
    """

    response_cls: ClassVar[Type[AccessTokenExchangeResponse]] = AccessTokenExchangeResponse

    def __init__(self, client: OAuth2Client, code: str) -> None:
        super().__init__(client)
        self._code: str = code

    def build(self) -> AccessTokenExchangeRequest:
        """Build the exchange request.

        Raises
        -------
        InvalidRedirectUri
            The redirect URI isn't one the client was created with.
        MissingRedirectUri
            No redirect URI was set and the client has none registered.
        """
        body = AccessTokenExchangeRequestBody(
            client_id=self._client.client_id,
            client_secret=self._client.client_secret,
            code=self._code,
            grant_type=GrantType.AUTHORIZATION_CODE,
            redirect_uri=self._resolve_redirect_uri(),  # type: ignore
            scope=join(self._scopes),
        )
        _log.debug("Built %s for client %s", self.__class__.__name__, body.client_id)
        return TokenRequest(
            body=body,
            headers=FORM_HEADERS,
            url_base=TOKEN_URL,
            response_cls=self.response_cls,
        )
