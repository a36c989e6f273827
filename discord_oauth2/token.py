from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Union

from . import utils
from .enums import TokenType
from .response import AccessTokenExchangeResponse, ClientCredentialsGrantResponse

__all__ = (
    "OAuth2Token",
)

TokenResponse = Union[AccessTokenExchangeResponse, ClientCredentialsGrantResponse]


class OAuth2Token:
    """Tracks when a decoded token response expires.

    ``expires_in`` is relative to when the response was received, so the
    receipt time is recorded here and defaults to now.

    Parameters
    -----------
    response: Union[:class:`AccessTokenExchangeResponse`, :class:`ClientCredentialsGrantResponse`]
        The decoded token response. Refresh and webhook responses work too.
    received_at: Optional[:class:`datetime.datetime`]
        When the response was received. Must be timezone aware.

    Raises
    -------
    ValueError
        ``received_at`` is a naive datetime.
    """

    def __init__(self, response: TokenResponse, *, received_at: Optional[datetime] = None) -> None:
        if received_at is not None and received_at.utcoffset() is None:
            raise ValueError("received_at must be a timezone aware datetime")

        self._response: TokenResponse = response
        self._received_at: datetime = received_at or utils.utcnow()
        try:
            self._expires_at: datetime = self._received_at + timedelta(seconds=response.expires_in)
        except OverflowError:
            # lifetimes past the year 9999 never expire in practice
            self._expires_at = datetime.max.replace(tzinfo=self._received_at.tzinfo)

    def __repr__(self) -> str:
        return f"<OAuth2Token token_type={self.token_type!r} expires_at={self._expires_at.isoformat()}>"

    @property
    def response(self) -> TokenResponse:
        return self._response

    @property
    def access_token(self) -> str:
        return self._response.access_token

    @property
    def token_type(self) -> str:
        return self._response.token_type.value

    @property
    def refresh_token(self) -> Optional[str]:
        # client credentials grants don't hand out refresh tokens
        return getattr(self._response, "refresh_token", None)

    @property
    def expires_at(self) -> datetime:
        return self._expires_at

    @property
    def expired(self) -> bool:
        return utils.utcnow() >= self._expires_at

    def get_auth_header(self) -> Dict[str, str]:
        return {"Authorization": f"{self.token_type} {self.access_token}"}

    @property
    def is_bearer(self) -> bool:
        return self._response.token_type is TokenType.BEARER

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._response.to_dict())
