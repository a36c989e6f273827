from __future__ import annotations

from typing import Optional, TypedDict

from typing_extensions import NotRequired

from .snowflake import Snowflake


class ClientCredentialsToken(TypedDict):
    access_token: str
    expires_in: int
    token_type: str
    scope: str


class Token(TypedDict):
    access_token: str
    expires_in: int
    refresh_token: str
    scope: str
    token_type: str


class IncomingWebhook(TypedDict):
    id: Snowflake
    type: int
    channel_id: Snowflake
    token: str
    url: str
    guild_id: NotRequired[Optional[Snowflake]]
    name: NotRequired[Optional[str]]
    avatar: NotRequired[Optional[str]]
    application_id: NotRequired[Optional[Snowflake]]


class WebhookToken(Token):
    webhook: IncomingWebhook
