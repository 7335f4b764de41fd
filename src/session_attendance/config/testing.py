import os

SECRET_KEY = "test-secret-key-long-enough-for-hs256-signing"
JWT_SECRET = SECRET_KEY
TOKEN_TTL_HOURS = 12

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "session_attendance_test"),
}
DB_POOL_SIZE = 2
DB_POOL_TIMEOUT = 5.0

SESSION_CODE_SUFFIX_LENGTH = 5
SESSION_CODE_MAX_ATTEMPTS = 20
SESSION_CODE_RETRY_BACKOFF = 0.0

CORS_ORIGINS = ["*"]

LOG_LEVEL = "WARNING"
LOG_FILE = None

HOST = "127.0.0.1"
PORT = 4000

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
