"""
Application-wide constants for authclient.

Defaults shared by the transport, the token store and the request pipeline.
"""

from pathlib import Path

# Network constants
DEFAULT_TIMEOUT_SECONDS = 10.0  # 10000 ms
MAX_TIMEOUT_SECONDS = 300.0
DEFAULT_REFRESH_URL = "/auth/refresh"

# HTTP status codes
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_INTERNAL_ERROR = 500

# Status reported for business failures carried in a 2xx envelope
BUSINESS_FAILURE_STATUS = HTTP_STATUS_BAD_REQUEST

# Status reported when the transport failed before any response arrived
FALLBACK_ERROR_STATUS = HTTP_STATUS_INTERNAL_ERROR
FALLBACK_ERROR_MESSAGE = "Request failed"

# Token storage keys
TOKEN_KEY = "auth_token"
REFRESH_TOKEN_KEY = "refresh_token"

DEFAULT_TOKEN_DIR = Path.home() / ".authclient"
DEFAULT_TOKEN_FILE = DEFAULT_TOKEN_DIR / "tokens.json"
TOKEN_FILE_MODE = 0o600

# Header names
AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer"

# Number of characters left visible when masking a token for display
TOKEN_MASK_VISIBLE_CHARS = 4
