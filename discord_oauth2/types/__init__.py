"""
discord_oauth2.types
~~~~~~~~~~~~~~~~~~~~

Typings for the Discord OAuth2 wire format.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""
