"""
Discord OAuth2
~~~~~~~~~~~~~~

Builds the requests of Discord's OAuth2 flows and decodes the token
endpoint's responses. Sending the requests is left to whichever HTTP client
the application already uses.

:copyright: (c) 2025 Mahirox36
:license: MIT, see LICENSE for more details.
"""

__title__ = "discord_oauth2"
__license__ = "MIT"
__version__ = "0.1.0"

import logging

from .client import *
from .enums import *
from .errors import *
from .request import *
from .response import *
from .scope import *
from .token import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
