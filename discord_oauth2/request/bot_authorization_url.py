# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..scope import Scope, ScopeLike, join
from .base import AUTHORIZE_URL, Builder, Request

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = (
    "BotAuthorizationUrlBody",
    "BotAuthorizationUrl",
    "BotAuthorizationUrlBuilder",
)

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BotAuthorizationUrlBody:
    """Query parameters of a bot authorization URL.

    Attributes
    ----------
    client_id: :class:`int`
        ID of the application whose bot is added.
    permissions: :class:`int`
        Permission bitfield the bot is granted in the guild.
    scope: :class:`str`
        Space-delimited list of scopes, always starting with ``bot``.
    guild_id: Optional[:class:`int`]
        Guild that is pre-selected for the user.
    disable_guild_select: :class:`bool`
        Whether the user is stopped from picking another guild.
    """

    client_id: int
    permissions: int
    scope: str
    guild_id: Optional[int] = None
    disable_guild_select: bool = False

    def query(self) -> List[Tuple[str, Optional[str]]]:
        return [
            ("client_id", str(self.client_id)),
            ("permissions", str(self.permissions)),
            ("guild_id", str(self.guild_id) if self.guild_id is not None else None),
            ("disable_guild_select", "true" if self.disable_guild_select else None),
            ("scope", self.scope),
        ]


# opened by the user's browser, so there are no headers to send
BotAuthorizationUrl = Request[BotAuthorizationUrlBody]


class BotAuthorizationUrlBuilder(Builder):
    """Build the URL used to add the application's bot to a guild.

    The :attr:`~discord_oauth2.Scope.BOT` scope is always requested first,
    :meth:`scopes` only adds to it. No redirect URI or code exchange is
    involved.

    Examples
    ---------
    .. code-block:: python3

        client = OAuth2Client(123, "abcdef01234567890")
        url = (
            client.bot_authorization_url()
            .permissions(8)
            .guild_id(290926798626357999)
            .disable_guild_select()
            .build()
            .url()
        )
    """

    default_scopes = (Scope.BOT,)

    def __init__(self, client) -> None:
        super().__init__(client)
        self._permissions: int = 0
        self._guild_id: Optional[int] = None
        self._disable_guild_select: bool = False

    def scopes(self, scopes: Sequence[ScopeLike]) -> Self:
        """Set the scopes requested next to :attr:`~discord_oauth2.Scope.BOT`.

        ``bot`` stays first and isn't repeated if it's passed again.
        """
        self._scopes = [Scope.BOT, *(scope for scope in scopes if scope is not Scope.BOT)]
        return self

    def permissions(self, permissions: int) -> Self:
        """Set the permission bitfield the bot is granted in the guild."""
        self._permissions = permissions
        return self

    def guild_id(self, guild_id: int) -> Self:
        """Pre-select the guild the bot is added to."""
        self._guild_id = guild_id
        return self

    def disable_guild_select(self, disable: bool = True) -> Self:
        """Stop the user from picking another guild than :meth:`guild_id`."""
        self._disable_guild_select = disable
        return self

    def build(self) -> BotAuthorizationUrl:
        """Build the bot authorization URL.

        Nothing can be invalid here, so this never raises.
        """
        body = BotAuthorizationUrlBody(
            client_id=self._client.client_id,
            permissions=self._permissions,
            scope=join(self._scopes),
            guild_id=self._guild_id,
            disable_guild_select=self._disable_guild_select,
        )
        _log.debug("Built bot authorization URL for client %s with scope %r", body.client_id, body.scope)
        return Request(body=body, headers=(), url_base=AUTHORIZE_URL)
