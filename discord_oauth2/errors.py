# SPDX-License-Identifier: MIT

from __future__ import annotations

from typing import Optional

__all__ = (
    "OAuth2Exception",
    "ConfigurationError",
    "InvalidRedirectUri",
    "MissingRedirectUri",
    "ValidationError",
    "MissingScopes",
    "ResponseDecodeError",
)


class OAuth2Exception(Exception):
    """Base exception class for discord_oauth2.

    Ideally speaking, this could be caught to handle any exceptions raised from this library.
    """

    pass


class ConfigurationError(OAuth2Exception):
    """Exception that's raised when the client or a builder is configured with
    something Discord would reject, or a required setting is missing from the
    environment.
    """

    pass


class InvalidRedirectUri(ConfigurationError):
    """Exception that's raised when a redirect URI is malformed or isn't one of
    the URIs the :class:`~discord_oauth2.OAuth2Client` was created with.

    Attributes
    ----------
    redirect_uri: :class:`str`
        The offending redirect URI.
    """

    def __init__(self, redirect_uri: str, reason: str = "is not a registered redirect URI") -> None:
        self.redirect_uri: str = redirect_uri
        super().__init__(f"{redirect_uri!r} {reason}")


class MissingRedirectUri(ConfigurationError):
    """Exception that's raised when a builder needs a redirect URI but none was
    selected and the client has none registered.
    """

    def __init__(self) -> None:
        super().__init__("no redirect URI was selected and the client has none registered")


class ValidationError(OAuth2Exception):
    """Exception that's raised when a request would be invalid for Discord."""

    pass


class MissingScopes(ValidationError):
    """Exception that's raised when building an authorization URL without any scopes."""

    def __init__(self) -> None:
        super().__init__("at least one scope is required")


class ResponseDecodeError(OAuth2Exception):
    """Exception that's raised when a token endpoint response can't be decoded.

    Attributes
    ----------
    field: Optional[:class:`str`]
        The first field that was missing or had the wrong type. Nested fields
        are dotted, e.g. ``webhook.id``. ``None`` when the payload itself isn't
        a JSON object.
    """

    def __init__(self, field: Optional[str], message: str) -> None:
        self.field: Optional[str] = field
        if field is not None:
            message = f"{field}: {message}"
        super().__init__(message)
