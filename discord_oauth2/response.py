"""
discord_oauth2.response
~~~~~~~~~~~~~~~~~~~~~~~

Typed mirrors of the JSON returned by Discord's token endpoint.

These only check the shape of a payload. Working out when a token expires,
storing it and refreshing it is left to the caller, see
:class:`~discord_oauth2.OAuth2Token` for a helper.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar, Union

from .enums import TokenType, UnknownEnumValue, try_enum
from .errors import ResponseDecodeError
from .scope import ScopeLike, split

if TYPE_CHECKING:
    from .types.oauth2 import (
        ClientCredentialsToken as ClientCredentialsTokenPayload,
        IncomingWebhook as IncomingWebhookPayload,
        Token as TokenPayload,
        WebhookToken as WebhookTokenPayload,
    )

__all__ = (
    "IncomingWebhook",
    "ClientCredentialsGrantResponse",
    "AccessTokenExchangeResponse",
    "RefreshTokenExchangeResponse",
    "WebhookTokenExchangeResponse",
)

_log = logging.getLogger(__name__)

R = TypeVar("R", bound="_TokenResponse")
TokenTypeLike = Union[TokenType, UnknownEnumValue]


def _fail(field: Optional[str], message: str) -> ResponseDecodeError:
    _log.debug("Failed to decode token response: %s (%s)", message, field)
    return ResponseDecodeError(field, message)


def _get(data: Dict[str, Any], key: str, kind: type, prefix: str = "") -> Any:
    field = prefix + key
    try:
        value = data[key]
    except KeyError:
        raise _fail(field, "missing field") from None

    # bool is a subclass of int but never a valid number here
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is not bool):
        raise _fail(field, f"expected {kind.__name__}, got {type(value).__name__}")
    return value


def _get_snowflake(data: Dict[str, Any], key: str, prefix: str = "") -> int:
    field = prefix + key
    if key not in data:
        raise _fail(field, "missing field")
    return _to_snowflake(data[key], field)


def _get_optional_snowflake(data: Dict[str, Any], key: str, prefix: str = "") -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    return _to_snowflake(value, prefix + key)


def _to_snowflake(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise _fail(field, f"expected snowflake, got {type(value).__name__}")
    try:
        return int(value)
    except ValueError:
        raise _fail(field, f"expected snowflake, got {value!r}") from None


def _get_optional_str(data: Dict[str, Any], key: str, prefix: str = "") -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise _fail(prefix + key, f"expected str, got {type(value).__name__}")
    return value


def _get_expires_in(data: Dict[str, Any]) -> int:
    expires_in = _get(data, "expires_in", int)
    if expires_in < 0:
        raise _fail("expires_in", f"expected a non-negative number of seconds, got {expires_in}")
    return expires_in


@dataclass(frozen=True)
class IncomingWebhook:
    """Webhook that the user created while authorizing with the
    :attr:`~discord_oauth2.Scope.WEBHOOK_INCOMING` scope.

    Attributes
    ----------
    id: :class:`int`
        The webhook's ID.
    type: :class:`int`
        The webhook type, ``1`` for incoming webhooks.
    channel_id: :class:`int`
        The channel the webhook posts to.
    token: :class:`str`
        The webhook's secure token.
    url: :class:`str`
        The URL used to execute the webhook.
    guild_id: Optional[:class:`int`]
        The guild the channel belongs to.
    name: Optional[:class:`str`]
        The default name of the webhook.
    avatar: Optional[:class:`str`]
        The default avatar hash of the webhook.
    application_id: Optional[:class:`int`]
        The application that created the webhook.
    """

    id: int
    type: int
    channel_id: int
    token: str
    url: str
    guild_id: Optional[int] = None
    name: Optional[str] = None
    avatar: Optional[str] = None
    application_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: IncomingWebhookPayload, *, prefix: str = "") -> IncomingWebhook:
        return cls(
            id=_get_snowflake(data, "id", prefix),  # type: ignore
            type=_get(data, "type", int, prefix),  # type: ignore
            channel_id=_get_snowflake(data, "channel_id", prefix),  # type: ignore
            token=_get(data, "token", str, prefix),  # type: ignore
            url=_get(data, "url", str, prefix),  # type: ignore
            guild_id=_get_optional_snowflake(data, "guild_id", prefix),  # type: ignore
            name=_get_optional_str(data, "name", prefix),  # type: ignore
            avatar=_get_optional_str(data, "avatar", prefix),  # type: ignore
            application_id=_get_optional_snowflake(data, "application_id", prefix),  # type: ignore
        )

    def to_dict(self) -> IncomingWebhookPayload:
        payload: Dict[str, Any] = {
            "id": str(self.id),
            "type": self.type,
            "channel_id": str(self.channel_id),
            "token": self.token,
            "url": self.url,
        }
        if self.guild_id is not None:
            payload["guild_id"] = str(self.guild_id)
        if self.name is not None:
            payload["name"] = self.name
        if self.avatar is not None:
            payload["avatar"] = self.avatar
        if self.application_id is not None:
            payload["application_id"] = str(self.application_id)
        return payload  # type: ignore


class _TokenResponse(ABC):
    access_token: str
    expires_in: int
    token_type: TokenTypeLike
    scope: str

    @classmethod
    def from_json(cls: Type[R], data: Union[bytes, str]) -> R:
        """Decodes the raw body of a token endpoint response.

        Raises
        -------
        ResponseDecodeError
            The body isn't a JSON object, or a field is missing or has the wrong type.
        """
        try:
            payload = json.loads(data)
        except ValueError as exc:  # JSONDecodeError and UnicodeDecodeError
            raise _fail(None, f"invalid JSON: {exc}") from exc
        return cls.from_dict(payload)

    @classmethod
    def from_dict(cls: Type[R], data: Any) -> R:
        if not isinstance(data, dict):
            raise _fail(None, f"expected a JSON object, got {type(data).__name__}")
        return cls(**cls._decode(data))

    @classmethod
    @abstractmethod
    def _decode(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @property
    def scopes(self) -> List[ScopeLike]:
        """List[Union[:class:`~discord_oauth2.Scope`, :class:`~discord_oauth2.UnknownEnumValue`]]: The approved scopes, split out of :attr:`scope`."""
        return split(self.scope)


@dataclass(frozen=True)
class ClientCredentialsGrantResponse(_TokenResponse):
    """Response to a client credentials grant.

    Attributes
    ----------
    access_token: :class:`str`
        Access token to be used when making requests to the API on the bot owner's behalf.
    expires_in: :class:`int`
        Number of seconds from issuing that the access token is valid.
    token_type: Union[:class:`~discord_oauth2.TokenType`, :class:`~discord_oauth2.UnknownEnumValue`]
        Type of token provided. This is :attr:`~discord_oauth2.TokenType.BEARER` today.
    scope: :class:`str`
        Space-delimited list of scopes that the token has had approved.
    """

    access_token: str
    expires_in: int
    token_type: TokenTypeLike
    scope: str

    @classmethod
    def _decode(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "access_token": _get(data, "access_token", str),
            "expires_in": _get_expires_in(data),
            "token_type": try_enum(TokenType, _get(data, "token_type", str)),
            "scope": _get(data, "scope", str),
        }

    def to_dict(self) -> ClientCredentialsTokenPayload:
        return {
            "access_token": self.access_token,
            "expires_in": self.expires_in,
            "token_type": self.token_type.value,
            "scope": self.scope,
        }


@dataclass(frozen=True)
class AccessTokenExchangeResponse(_TokenResponse):
    """Response to exchanging an authorization code.

    Attributes
    ----------
    access_token: :class:`str`
        Access token to be used when making requests to the API on the user's behalf.
    expires_in: :class:`int`
        Number of seconds from issuing that the access token is valid.

        After this duration, the refresh token must be exchanged for another
        access token and refresh token pair.
    refresh_token: :class:`str`
        Refresh token to use to exchange for another access token and refresh token pair.
    scope: :class:`str`
        Space-delimited list of scopes that the token has had approved.
    token_type: Union[:class:`~discord_oauth2.TokenType`, :class:`~discord_oauth2.UnknownEnumValue`]
        Type of token provided.
    """

    access_token: str
    expires_in: int
    refresh_token: str
    scope: str
    token_type: TokenTypeLike

    @classmethod
    def _decode(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "access_token": _get(data, "access_token", str),
            "expires_in": _get_expires_in(data),
            "refresh_token": _get(data, "refresh_token", str),
            "scope": _get(data, "scope", str),
            "token_type": try_enum(TokenType, _get(data, "token_type", str)),
        }

    def to_dict(self) -> TokenPayload:
        return {
            "access_token": self.access_token,
            "expires_in": self.expires_in,
            "refresh_token": self.refresh_token,
            "scope": self.scope,
            "token_type": self.token_type.value,
        }


@dataclass(frozen=True)
class RefreshTokenExchangeResponse(AccessTokenExchangeResponse):
    """Response to exchanging a refresh token. Same shape as
    :class:`AccessTokenExchangeResponse`.
    """


@dataclass(frozen=True)
class WebhookTokenExchangeResponse(AccessTokenExchangeResponse):
    """Response to exchanging an authorization code that was granted with the
    :attr:`~discord_oauth2.Scope.WEBHOOK_INCOMING` scope.

    Attributes
    ----------
    webhook: :class:`IncomingWebhook`
        Webhook that the user created via authorization.
    """

    webhook: IncomingWebhook

    @classmethod
    def _decode(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = super()._decode(data)
        fields["webhook"] = IncomingWebhook.from_dict(_get(data, "webhook", dict), prefix="webhook.")
        return fields

    def to_dict(self) -> WebhookTokenPayload:
        payload: Dict[str, Any] = dict(super().to_dict())
        payload["webhook"] = self.webhook.to_dict()
        return payload  # type: ignore
