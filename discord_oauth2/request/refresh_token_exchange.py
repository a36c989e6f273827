# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..enums import GrantType
from ..response import RefreshTokenExchangeResponse
from ..scope import join
from .base import FORM_HEADERS, TOKEN_URL, Builder, RedirectUriMixin, TokenRequest

if TYPE_CHECKING:
    from ..client import OAuth2Client

__all__ = (
    "RefreshTokenExchangeRequestBody",
    "RefreshTokenExchangeRequest",
    "RefreshTokenExchangeBuilder",
)

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshTokenExchangeRequestBody:
    client_id: int
    client_secret: str
    grant_type: GrantType
    refresh_token: str
    redirect_uri: Optional[str]
    scope: str

    def query(self) -> List[Tuple[str, Optional[str]]]:
        return [
            ("grant_type", self.grant_type.value),
            ("refresh_token", self.refresh_token),
            ("redirect_uri", self.redirect_uri),
            ("scope", self.scope),
        ]

    def form(self) -> List[Tuple[str, Optional[str]]]:
        fields = self.query()
        fields[1:1] = [("client_id", str(self.client_id)), ("client_secret", self.client_secret)]
        return fields


RefreshTokenExchangeRequest = TokenRequest[RefreshTokenExchangeRequestBody, RefreshTokenExchangeResponse]


class RefreshTokenExchangeBuilder(RedirectUriMixin, Builder):
    """Exchange a refresh token for a new access token and refresh token pair.

    Unlike the code exchange, the redirect URI is left out unless one is
    selected, and no scopes are sent by default.
    """

    def __init__(self, client: OAuth2Client, refresh_token: str) -> None:
        super().__init__(client)
        self._refresh_token: str = refresh_token

    def build(self) -> RefreshTokenExchangeRequest:
        """Build the refresh request.

        Raises
        -------
        InvalidRedirectUri
            The selected redirect URI isn't one the client was created with.
        """
        body = RefreshTokenExchangeRequestBody(
            client_id=self._client.client_id,
            client_secret=self._client.client_secret,
            grant_type=GrantType.REFRESH_TOKEN,
            refresh_token=self._refresh_token,
            redirect_uri=self._resolve_redirect_uri(required=False),
            scope=join(self._scopes),
        )
        _log.debug("Built refresh token exchange for client %s", body.client_id)
        return TokenRequest(
            body=body,
            headers=FORM_HEADERS,
            url_base=TOKEN_URL,
            response_cls=RefreshTokenExchangeResponse,
        )
