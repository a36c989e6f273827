# SPDX-License-Identifier: MIT

import json
import unittest

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from discord_oauth2 import (
    AccessTokenExchangeResponse,
    ClientCredentialsGrantResponse,
    IncomingWebhook,
    OAuth2Client,
    RefreshTokenExchangeResponse,
    ResponseDecodeError,
    Scope,
    TokenType,
    UnknownEnumValue,
    WebhookTokenExchangeResponse,
)
from discord_oauth2.response import _TokenResponse

console = Console()

CLIENT_CREDENTIALS = {
    "access_token": "6qrZcUqja7812RVdnEKjpzOL4CvHBFG",
    "expires_in": 604800,
    "token_type": "Bearer",
    "scope": "identify connections",
}

ACCESS_TOKEN = {
    "access_token": "6qrZcUqja7812RVdnEKjpzOL4CvHBFG",
    "expires_in": 604800,
    "refresh_token": "D43f5y0ahjqew82jZ4NViEr2YafMKhue",
    "scope": "identify",
    "token_type": "Bearer",
}

WEBHOOK = {
    "id": "347114750880120863",
    "type": 1,
    "guild_id": "290926798626357999",
    "channel_id": "347113199436890111",
    "name": "testwebhook",
    "avatar": None,
    "token": "secret",
    "url": "https://discord.com/api/webhooks/347114750880120863/secret",
    "application_id": "310954232226357250",
}


def encode(payload):
    return json.dumps(payload).encode("utf-8")


class ResponseTestSuite(unittest.TestCase):
    """Decoding token endpoint responses."""

    def setUp(self):
        console.print(Panel(Text(f"Running: {self._testMethodName}", style="bold cyan")))

    def test_client_credentials_response(self):
        response = ClientCredentialsGrantResponse.from_json(encode(CLIENT_CREDENTIALS))
        self.assertEqual(response.access_token, "6qrZcUqja7812RVdnEKjpzOL4CvHBFG")
        self.assertEqual(response.expires_in, 604800)
        self.assertIs(response.token_type, TokenType.BEARER)
        self.assertEqual(response.scope, "identify connections")
        self.assertEqual(response.scopes, [Scope.IDENTIFY, Scope.CONNECTIONS])

        self.assertEqual(CLIENT_CREDENTIALS, response.to_dict())
        self.assertEqual(CLIENT_CREDENTIALS, json.loads(response.to_json()))
        self.assertEqual(response, ClientCredentialsGrantResponse.from_json(response.to_json()))

    def test_missing_field_is_named(self):
        payload = dict(CLIENT_CREDENTIALS)
        del payload["access_token"]
        with self.assertRaises(ResponseDecodeError) as ctx:
            ClientCredentialsGrantResponse.from_json(encode(payload))
        self.assertEqual("access_token", ctx.exception.field)
        self.assertIn("access_token", str(ctx.exception))

    def test_first_failing_field_is_reported(self):
        payload = dict(ACCESS_TOKEN)
        del payload["refresh_token"]
        del payload["token_type"]
        with self.assertRaises(ResponseDecodeError) as ctx:
            AccessTokenExchangeResponse.from_dict(payload)
        self.assertEqual("refresh_token", ctx.exception.field)

    def test_type_mismatch(self):
        for field, value in (
            ("expires_in", "604800"),
            ("expires_in", 1.5),
            ("expires_in", True),
            ("access_token", 12),
            ("scope", None),
            ("token_type", 0),
        ):
            with self.subTest(field=field, value=value):
                payload = dict(CLIENT_CREDENTIALS, **{field: value})
                with self.assertRaises(ResponseDecodeError) as ctx:
                    ClientCredentialsGrantResponse.from_dict(payload)
                self.assertEqual(field, ctx.exception.field)

    def test_negative_expires_in(self):
        with self.assertRaises(ResponseDecodeError) as ctx:
            ClientCredentialsGrantResponse.from_dict(dict(CLIENT_CREDENTIALS, expires_in=-1))
        self.assertEqual("expires_in", ctx.exception.field)

        response = ClientCredentialsGrantResponse.from_dict(dict(CLIENT_CREDENTIALS, expires_in=0))
        self.assertEqual(0, response.expires_in)

    def test_unknown_token_type_is_kept(self):
        response = ClientCredentialsGrantResponse.from_dict(dict(CLIENT_CREDENTIALS, token_type="DPoP"))
        self.assertIsInstance(response.token_type, UnknownEnumValue)
        self.assertEqual("DPoP", response.token_type.value)
        self.assertEqual("DPoP", response.to_dict()["token_type"])

    def test_not_an_object(self):
        for raw in (b"[]", b"null", b"\"token\"", b"{not json", b"\xff\xfe"):
            with self.subTest(raw=raw):
                with self.assertRaises(ResponseDecodeError) as ctx:
                    ClientCredentialsGrantResponse.from_json(raw)
                self.assertIsNone(ctx.exception.field)

    def test_extra_fields_are_ignored(self):
        response = AccessTokenExchangeResponse.from_dict(dict(ACCESS_TOKEN, id_token="x"))
        self.assertEqual(ACCESS_TOKEN, response.to_dict())

    def test_access_and_refresh_responses(self):
        access = AccessTokenExchangeResponse.from_json(encode(ACCESS_TOKEN))
        refresh = RefreshTokenExchangeResponse.from_json(json.dumps(ACCESS_TOKEN))
        self.assertEqual("D43f5y0ahjqew82jZ4NViEr2YafMKhue", access.refresh_token)
        self.assertIsInstance(refresh, RefreshTokenExchangeResponse)
        self.assertEqual(access.to_dict(), refresh.to_dict())
        self.assertEqual(ACCESS_TOKEN, refresh.to_dict())

    def test_webhook_response(self):
        payload = dict(ACCESS_TOKEN, scope="webhook.incoming", webhook=WEBHOOK)
        response = WebhookTokenExchangeResponse.from_json(encode(payload))
        self.assertEqual([Scope.WEBHOOK_INCOMING], response.scopes)
        self.assertIsInstance(response.webhook, IncomingWebhook)
        self.assertEqual(347114750880120863, response.webhook.id)
        self.assertEqual(347113199436890111, response.webhook.channel_id)
        self.assertEqual(290926798626357999, response.webhook.guild_id)
        self.assertIsNone(response.webhook.avatar)

        expected = dict(payload, webhook={k: v for k, v in WEBHOOK.items() if v is not None})
        self.assertEqual(expected, response.to_dict())

    def test_webhook_nested_errors(self):
        webhook = dict(WEBHOOK)
        del webhook["token"]
        with self.assertRaises(ResponseDecodeError) as ctx:
            WebhookTokenExchangeResponse.from_dict(dict(ACCESS_TOKEN, webhook=webhook))
        self.assertEqual("webhook.token", ctx.exception.field)

        with self.assertRaises(ResponseDecodeError) as ctx:
            WebhookTokenExchangeResponse.from_dict(dict(ACCESS_TOKEN, webhook=dict(WEBHOOK, id="abc")))
        self.assertEqual("webhook.id", ctx.exception.field)

        with self.assertRaises(ResponseDecodeError) as ctx:
            WebhookTokenExchangeResponse.from_dict(ACCESS_TOKEN)
        self.assertEqual("webhook", ctx.exception.field)

    def test_request_parses_its_response(self):
        client = OAuth2Client(1, "a", ["https://example.com"])
        response = client.client_credentials_grant().build().parse_response(encode(CLIENT_CREDENTIALS))
        self.assertIsInstance(response, ClientCredentialsGrantResponse)

        payload = encode(dict(ACCESS_TOKEN, webhook=WEBHOOK))
        response = client.webhook_token_exchange("abc").build().parse_response(payload)
        self.assertIsInstance(response, WebhookTokenExchangeResponse)

    def test_base_response_is_abstract(self):
        with self.assertRaises(TypeError):
            _TokenResponse()

    def test_responses_are_immutable(self):
        response = AccessTokenExchangeResponse.from_dict(ACCESS_TOKEN)
        with self.assertRaises(AttributeError):
            response.access_token = "other"


if __name__ == "__main__":
    unittest.main()
