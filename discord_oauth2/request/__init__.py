"""Request builders for each OAuth2 flow."""

from .base import *
from .authorization_url import *
from .bot_authorization_url import *
from .client_credentials_grant import *
from .access_token_exchange import *
from .refresh_token_exchange import *
from .webhook_token_exchange import *
