# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..enums import GrantType
from ..response import ClientCredentialsGrantResponse
from ..scope import Scope, join
from .base import FORM_HEADERS, TOKEN_URL, Builder, TokenRequest

__all__ = (
    "ClientCredentialsGrantRequestBody",
    "ClientCredentialsGrantRequest",
    "ClientCredentialsGrantBuilder",
)

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientCredentialsGrantRequestBody:
    """Fields of a client credentials grant.

    Attributes
    ----------
    client_id: :class:`int`
        ID of the application.
    client_secret: :class:`str`
        Secret of the application.
    grant_type: :class:`~discord_oauth2.GrantType`
        Always :attr:`~discord_oauth2.GrantType.CLIENT_CREDENTIALS`.
    scope: :class:`str`
        Space-delimited list of scopes to request.
    """

    client_id: int
    client_secret: str
    grant_type: GrantType
    scope: str

    def query(self) -> List[Tuple[str, Optional[str]]]:
        return [
            ("grant_type", self.grant_type.value),
            ("scope", self.scope),
        ]

    def form(self) -> List[Tuple[str, Optional[str]]]:
        return [
            ("grant_type", self.grant_type.value),
            ("client_id", str(self.client_id)),
            ("client_secret", self.client_secret),
            ("scope", self.scope),
        ]


ClientCredentialsGrantRequest = TokenRequest[ClientCredentialsGrantRequestBody, ClientCredentialsGrantResponse]


class ClientCredentialsGrantBuilder(Builder):
    """Create a client credentials grant request.

    This can be used to quickly create a Bearer access token for the bot's
    owner. By default only the :attr:`~discord_oauth2.Scope.IDENTIFY` scope is
    requested.

    Examples
    ---------
    Create a URL that can be POSTed to that will create an access token for
    the bot's owner: ::

        client = OAuth2Client(123, "abcdef01234567890", ["https://example.com"])
        request = client.client_credentials_grant().build()
        print(f"grant url: {request.url()}")
    """

    default_scopes = (Scope.IDENTIFY,)

    def build(self) -> ClientCredentialsGrantRequest:
        """Build a client credentials grant request."""
        body = ClientCredentialsGrantRequestBody(
            client_id=self._client.client_id,
            client_secret=self._client.client_secret,
            grant_type=GrantType.CLIENT_CREDENTIALS,
            scope=join(self._scopes),
        )
        _log.debug("Built client credentials grant for client %s with scope %r", body.client_id, body.scope)
        return TokenRequest(
            body=body,
            headers=FORM_HEADERS,
            url_base=TOKEN_URL,
            response_cls=ClientCredentialsGrantResponse,
        )
