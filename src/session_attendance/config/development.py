import os

from . import env_flag, env_list

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me-before-deploying")
JWT_SECRET = os.getenv("JWT_SECRET", SECRET_KEY)
TOKEN_TTL_HOURS = float(os.getenv("TOKEN_TTL_HOURS", "12"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "session_attendance"),
}
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_POOL_TIMEOUT = float(os.getenv("DB_POOL_TIMEOUT", "30"))

SESSION_CODE_SUFFIX_LENGTH = int(os.getenv("SESSION_CODE_SUFFIX_LENGTH", "5"))
SESSION_CODE_MAX_ATTEMPTS = int(os.getenv("SESSION_CODE_MAX_ATTEMPTS", "20"))
SESSION_CODE_RETRY_BACKOFF = float(os.getenv("SESSION_CODE_RETRY_BACKOFF", "0"))

CORS_ORIGINS = env_list("CORS_ORIGINS", "*")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))

DEBUG = True

# Apply schema.sql on startup (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Insert demo professors/students/courses when the users table is empty
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "1")
