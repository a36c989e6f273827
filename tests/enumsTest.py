# SPDX-License-Identifier: MIT

import json
import unittest
from urllib.parse import quote

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from discord_oauth2 import GrantType, Prompt, Scope, TokenType, UnknownEnumValue, try_enum
from discord_oauth2.scope import join, split

console = Console()


class EnumTestSuite(unittest.TestCase):
    """Wire tokens of the enums and the scope helpers."""

    def setUp(self):
        console.print(Panel(Text(f"Running: {self._testMethodName}", style="bold cyan")))

    def test_grant_types(self):
        self.assertEqual("authorization_code", GrantType.AUTHORIZATION_CODE.value)
        self.assertEqual("client_credentials", GrantType.CLIENT_CREDENTIALS.value)
        self.assertEqual("refresh_token", GrantType.REFRESH_TOKEN.value)

    def test_prompts(self):
        self.assertEqual("consent", Prompt.CONSENT.value)
        self.assertEqual("consent", str(Prompt.CONSENT))
        self.assertEqual("none", Prompt.NONE.value)
        self.assertEqual("none", str(Prompt.NONE))
        self.assertEqual("prompt=consent", f"prompt={Prompt.CONSENT}")

    def test_token_types(self):
        self.assertEqual("Bearer", TokenType.BEARER.value)
        self.assertEqual("Bearer", str(TokenType.BEARER))

    def test_round_trip(self):
        for cls in (GrantType, Prompt, TokenType, Scope):
            for member in cls:
                self.assertIs(cls(member.value), member)
                # serialization uses the same token
                self.assertEqual(json.dumps(member), json.dumps(member.value))
                self.assertIs(cls(json.loads(json.dumps(member))), member)

    def test_closed_enums_reject_unknown_tokens(self):
        with self.assertRaises(ValueError):
            GrantType("password")
        with self.assertRaises(ValueError):
            Prompt("login")
        with self.assertRaises(ValueError):
            Prompt("Consent")

    def test_extensible_enums_keep_unknown_tokens(self):
        self.assertIs(try_enum(TokenType, "Bearer"), TokenType.BEARER)

        token_type = try_enum(TokenType, "DPoP")
        self.assertIsInstance(token_type, UnknownEnumValue)
        self.assertEqual(token_type.value, "DPoP")
        self.assertEqual(token_type.name, "unknown_DPoP")
        self.assertEqual(str(token_type), "DPoP")

        scope = try_enum(Scope, "guilds.channels.read")
        self.assertIsInstance(scope, UnknownEnumValue)
        self.assertEqual(scope.value, "guilds.channels.read")

    def test_unknown_values_serialize_to_the_raw_token(self):
        token_type = try_enum(TokenType, "DPoP")
        self.assertEqual('"DPoP"', json.dumps(token_type))
        self.assertEqual("DPoP", json.loads(json.dumps(token_type)))
        self.assertEqual("DPoP", token_type)
        self.assertEqual(hash("DPoP"), hash(token_type))
        self.assertIs(type(token_type.value), str)

        scope = try_enum(Scope, "a b")
        self.assertEqual("a%20b", quote(scope, safe=""))
        self.assertEqual("identify a b", join([Scope.IDENTIFY, scope]))
        self.assertEqual("<UnknownEnumValue name='unknown_a b' value='a b'>", repr(scope))

    def test_token_types_are_case_sensitive(self):
        self.assertIsInstance(try_enum(TokenType, "bearer"), UnknownEnumValue)

    def test_join(self):
        self.assertEqual("", join([]))
        self.assertEqual("identify", join([Scope.IDENTIFY]))
        self.assertEqual("guilds identify", join([Scope.GUILDS, Scope.IDENTIFY]))
        self.assertEqual("identify guilds", join([Scope.IDENTIFY, Scope.GUILDS]))

    def test_join_keeps_duplicates_and_unknown_scopes(self):
        self.assertEqual("email email", join([Scope.EMAIL, Scope.EMAIL]))
        unknown = try_enum(Scope, "future.scope")
        self.assertEqual("bot future.scope", join([Scope.BOT, unknown]))

    def test_join_accepts_any_iterable(self):
        self.assertEqual("rpc voice", join(scope for scope in (Scope.RPC, Scope.VOICE)))

    def test_split(self):
        self.assertEqual([], split(""))
        self.assertEqual([Scope.GUILDS, Scope.IDENTIFY], split("guilds identify"))
        self.assertEqual([Scope.WEBHOOK_INCOMING], split("webhook.incoming"))

        scopes = split("identify new.scope")
        self.assertIs(scopes[0], Scope.IDENTIFY)
        self.assertIsInstance(scopes[1], UnknownEnumValue)
        self.assertEqual("new.scope", scopes[1])


if __name__ == "__main__":
    unittest.main()
