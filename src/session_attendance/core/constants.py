"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_HOURS = 12
TOKEN_ALGORITHM = "HS256"

SESSION_CODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_SESSION_CODE_SUFFIX_LENGTH = 5
DEFAULT_SESSION_CODE_MAX_ATTEMPTS = 20
DEFAULT_SESSION_CODE_RETRY_BACKOFF = 0.0

DEFAULT_DB_POOL_SIZE = 5
DEFAULT_DB_POOL_TIMEOUT = 30.0

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
