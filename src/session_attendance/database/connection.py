from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling
from mysql.connector.errors import PoolError

from ..core.constants import DEFAULT_DB_POOL_SIZE, DEFAULT_DB_POOL_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_DB_POOL_SIZE
    pool_timeout: float = DEFAULT_DB_POOL_TIMEOUT

    @classmethod
    def from_dict(
        cls,
        db_config: dict,
        *,
        pool_size: int = DEFAULT_DB_POOL_SIZE,
        pool_timeout: float = DEFAULT_DB_POOL_TIMEOUT,
    ) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "session_attendance")),
            pool_size=int(pool_size),
            pool_timeout=float(pool_timeout),
        )


class _BorrowedConnection:
    """A pooled connection that frees its pool slot when closed."""

    def __init__(self, cnx, release):
        self._cnx = cnx
        self._release = release

    def close(self) -> None:
        release, self._release = self._release, None
        if release is None:
            return
        try:
            self._cnx.close()
        finally:
            release()

    def __getattr__(self, name):
        return getattr(self._cnx, name)


class DatabaseConnection:
    """Singleton-like factory handing out pooled MySQL connections.

    The pool is created on first use so that building the app does not need a
    reachable server. ``MySQLConnectionPool.get_connection`` fails at once
    when every connection is out, so callers queue on a semaphore sized to the
    pool and wait up to ``pool_timeout`` seconds for a slot. Closing a
    borrowed connection returns it to the pool.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(config.pool_size)

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._lock:
            if self._pool is None:
                logger.info(
                    "Opening MySQL pool %s@%s:%s/%s (size=%s)",
                    self._config.user,
                    self._config.host,
                    self._config.port,
                    self._config.database,
                    self._config.pool_size,
                )
                self._pool = pooling.MySQLConnectionPool(
                    pool_name="session_attendance",
                    pool_size=self._config.pool_size,
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                    charset="utf8mb4",
                    collation="utf8mb4_unicode_ci",
                    time_zone="+00:00",
                )
            return self._pool

    def connect(self):
        if not self._slots.acquire(timeout=self._config.pool_timeout):
            logger.error("No free database connection after %.1fs", self._config.pool_timeout)
            raise PoolError("Timed out waiting for a free database connection")
        try:
            cnx = self._get_pool().get_connection()
        except Exception:
            self._slots.release()
            raise
        return _BorrowedConnection(cnx, self._slots.release)
