"""
discord_oauth2.request.webhook_token_exchange
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Create requests and parse responses when exchanging an authorization code
that was granted with the :attr:`~discord_oauth2.Scope.WEBHOOK_INCOMING` scope.
Refer to `Discord's documentation <https://discord.com/developers/docs/topics/oauth2#webhooks>`_
for additional information.

The request is the same as a regular authorization code exchange, only the
response carries the created webhook.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

from ..response import WebhookTokenExchangeResponse
from .access_token_exchange import AccessTokenExchangeBuilder, AccessTokenExchangeRequestBody
from .base import TokenRequest

__all__ = (
    "WebhookTokenExchangeRequest",
    "WebhookTokenExchangeBuilder",
)


WebhookTokenExchangeRequest = TokenRequest[AccessTokenExchangeRequestBody, WebhookTokenExchangeResponse]


class WebhookTokenExchangeBuilder(AccessTokenExchangeBuilder):
    """An :class:`AccessTokenExchangeBuilder` whose requests decode into
    :class:`~discord_oauth2.WebhookTokenExchangeResponse`.

    The authorization URL can be built with
    :meth:`AuthorizationUrlBuilder.webhook() <discord_oauth2.AuthorizationUrlBuilder.webhook>`.
    """

    response_cls = WebhookTokenExchangeResponse
