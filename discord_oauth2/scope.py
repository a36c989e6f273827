# SPDX-License-Identifier: MIT

from __future__ import annotations

from typing import Iterable, List, Union

from .enums import UnknownEnumValue, _WireEnum, try_enum

__all__ = (
    "Scope",
    "join",
    "split",
)


class Scope(_WireEnum):
    """OAuth2 scopes that can be requested.

    Read about Discord's `scope documentation <https://discord.com/developers/docs/topics/oauth2#shared-resources-oauth2-scopes>`_
    and :rfc:`6749#section-3.3` on access token scopes.
    """

    ACTIVITIES_READ = "activities.read"
    ACTIVITIES_WRITE = "activities.write"
    APPLICATIONS_BUILDS_READ = "applications.builds.read"
    APPLICATIONS_BUILDS_UPLOAD = "applications.builds.upload"
    APPLICATIONS_COMMANDS = "applications.commands"
    APPLICATIONS_COMMANDS_UPDATE = "applications.commands.update"
    APPLICATIONS_COMMANDS_PERMISSIONS_UPDATE = "applications.commands.permissions.update"
    APPLICATIONS_ENTITLEMENTS = "applications.entitlements"
    APPLICATIONS_STORE_UPDATE = "applications.store.update"
    BOT = "bot"
    CONNECTIONS = "connections"
    DM_CHANNELS_READ = "dm_channels.read"
    EMAIL = "email"
    GDM_JOIN = "gdm.join"
    GUILDS = "guilds"
    GUILDS_JOIN = "guilds.join"
    GUILDS_MEMBERS_READ = "guilds.members.read"
    IDENTIFY = "identify"
    MESSAGES_READ = "messages.read"
    RELATIONSHIPS_READ = "relationships.read"
    ROLE_CONNECTIONS_WRITE = "role_connections.write"
    RPC = "rpc"
    RPC_ACTIVITIES_WRITE = "rpc.activities.write"
    RPC_NOTIFICATIONS_READ = "rpc.notifications.read"
    RPC_VOICE_READ = "rpc.voice.read"
    RPC_VOICE_WRITE = "rpc.voice.write"
    VOICE = "voice"
    WEBHOOK_INCOMING = "webhook.incoming"


ScopeLike = Union[Scope, UnknownEnumValue]


def join(scopes: Iterable[ScopeLike]) -> str:
    """Joins scopes into the space-delimited form Discord expects.

    Order is kept as given and duplicates are not removed.

    Examples
    ---------
    .. code-block:: python3

        >>> join([Scope.GUILDS, Scope.IDENTIFY])
        'guilds identify'
    """
    return " ".join(str(scope.value) for scope in scopes)


def split(scope: str) -> List[ScopeLike]:
    """The inverse of :func:`join`. Unknown scopes are kept as
    :class:`~discord_oauth2.UnknownEnumValue`."""
    return [try_enum(Scope, part) for part in scope.split(" ") if part]
