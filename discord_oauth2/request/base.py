# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, List, Optional, Sequence, Tuple, Type, TypeVar, Union

from ..errors import InvalidRedirectUri, MissingRedirectUri
from ..utils import urlencode

if TYPE_CHECKING:
    from typing_extensions import Self

    from ..client import OAuth2Client
    from ..response import _TokenResponse
    from ..scope import ScopeLike

__all__ = (
    "DISCORD_API_URL",
    "TOKEN_URL",
    "AUTHORIZE_URL",
    "FORM_HEADERS",
    "Request",
    "TokenRequest",
)

_log = logging.getLogger(__name__)

DISCORD_API_URL = "https://discord.com/api/v10"
TOKEN_URL = f"{DISCORD_API_URL}/oauth2/token"
AUTHORIZE_URL = "https://discord.com/oauth2/authorize"

Headers = Tuple[Tuple[str, str], ...]
FORM_HEADERS: Headers = (("Content-Type", "application/x-www-form-urlencoded"),)

B = TypeVar("B")
R = TypeVar("R", bound="_TokenResponse")


@dataclass(frozen=True)
class Request(Generic[B]):
    """A fully assembled request, ready to be handed to an HTTP client.

    Attributes
    ----------
    body:
        The flow specific fields of the request.
    headers: Tuple[Tuple[:class:`str`, :class:`str`], ...]
        Headers to send.
    url_base: :class:`str`
        Base of the URL. Use :meth:`url` for the full URL with query parameters.
    """

    body: B
    headers: Headers
    url_base: str

    def query(self) -> List[Tuple[str, Optional[str]]]:
        """The ``(name, value)`` pairs rendered by :meth:`url`, in wire order."""
        return self.body.query()  # type: ignore

    def url(self) -> str:
        """Retrieve a URL with the body urlencoded as query parameters.

        Empty optional fields are left out entirely rather than sent as ``key=``.
        """
        return f"{self.url_base}?{urlencode(self.query())}"


@dataclass(frozen=True)
class TokenRequest(Request[B], Generic[B, R]):
    """A request to Discord's token endpoint.

    It's meant to be POSTed with :attr:`headers`, either to :meth:`url` or to
    :attr:`url_base` with :meth:`form` as the body.
    """

    response_cls: Type[R]

    def form(self) -> str:
        """The form-encoded POST body, which unlike :meth:`url` carries the client credentials."""
        return urlencode(self.body.form())  # type: ignore

    def parse_response(self, data: Union[bytes, str]) -> R:
        """Decodes the raw response body into the response type of this flow.

        Raises
        -------
        ResponseDecodeError
            A field is missing or has the wrong type.
        """
        return self.response_cls.from_json(data)


class Builder(ABC):
    """Shared configuration of every request builder.

    A builder only borrows its :class:`~discord_oauth2.OAuth2Client`, the
    client has to outlive the builder and the requests built from it.
    Configuration methods return the builder so calls can be chained, and
    nothing is validated until :meth:`build` is called.
    """

    default_scopes: ClassVar[Tuple[ScopeLike, ...]] = ()

    def __init__(self, client: OAuth2Client) -> None:
        self._client: OAuth2Client = client
        self._scopes: List[ScopeLike] = list(self.default_scopes)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} client_id={self._client.client_id} scopes={self._scopes!r}>"

    def scopes(self, scopes: Sequence[ScopeLike]) -> Self:
        """Set the scopes for the request, replacing the default ones.

        Order is kept and duplicates are not removed.
        """
        self._scopes = list(scopes)
        return self

    @abstractmethod
    def build(self) -> Any:
        raise NotImplementedError


class RedirectUriMixin:
    _client: OAuth2Client
    _redirect_uri: Optional[str] = None

    def redirect_uri(self, redirect_uri: str) -> Self:
        """Select one of the client's registered redirect URIs.

        It's checked against the registered URIs when :meth:`build` is called.
        """
        self._redirect_uri = redirect_uri
        return self

    def _resolve_redirect_uri(self, *, required: bool = True) -> Optional[str]:
        registered = self._client.redirect_uris
        if self._redirect_uri is None:
            if not required:
                return None
            if not registered:
                raise MissingRedirectUri()
            return registered[0]

        if self._redirect_uri not in registered:
            _log.debug("Rejected unregistered redirect URI for client %s", self._client.client_id)
            raise InvalidRedirectUri(self._redirect_uri)
        return self._redirect_uri
