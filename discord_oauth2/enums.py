# SPDX-License-Identifier: MIT

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar, Union

__all__ = (
    "GrantType",
    "Prompt",
    "TokenType",
    "UnknownEnumValue",
    "try_enum",
)

E = TypeVar("E", bound="Enum")


class UnknownEnumValue(str):
    """Stands in for an enum member the library doesn't know about yet.

    Discord may add new scopes or token types at any time. Instead of failing
    to decode those, :func:`try_enum` returns one of these. It is the raw wire
    token itself, so it compares equal to it, serializes to it and is sent
    back unchanged.

    Attributes
    ----------
    name: :class:`str`
        ``unknown_`` followed by the raw value.
    value: :class:`str`
        The raw wire token.
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        return f"unknown_{self.value}"

    @property
    def value(self) -> str:
        return str.__str__(self)

    def __repr__(self) -> str:
        return f"<UnknownEnumValue name={self.name!r} value={self.value!r}>"


def try_enum(cls: Type[E], val: str) -> Union[E, UnknownEnumValue]:
    """Decodes ``val`` into a member of ``cls``.

    Unrecognised values become an :class:`UnknownEnumValue` rather than raising.
    Only meant for enums the remote service can extend, such as
    :class:`TokenType` and :class:`~discord_oauth2.Scope`.
    """
    try:
        return cls(val)
    except ValueError:
        return UnknownEnumValue(val)


class _WireEnum(str, Enum):
    # the member value is the wire token, used both for serialization and
    # when rendering urls by hand
    def __str__(self) -> str:
        return self.value


class GrantType(_WireEnum):
    """Type of approved grant."""

    AUTHORIZATION_CODE = "authorization_code"
    CLIENT_CREDENTIALS = "client_credentials"
    REFRESH_TOKEN = "refresh_token"


class Prompt(_WireEnum):
    """Whether to prompt the user again when they have already authorized the
    application.

    ``str(prompt)`` returns the same token that is sent over the wire.
    """

    CONSENT = "consent"
    """Always ask the user for consent."""
    NONE = "none"
    """Don't ask the user for consent."""


class TokenType(_WireEnum):
    """Type of token. Decode it with :func:`try_enum`, Discord may add more."""

    BEARER = "Bearer"
