import logging
import os
from contextlib import contextmanager
from collections.abc import Iterator

from psycopg2.extensions import connection
from psycopg2.pool import ThreadedConnectionPool

logger = logging.getLogger(__name__)

_pool: ThreadedConnectionPool | None = None


def _get_pool() -> ThreadedConnectionPool:
    global _pool
    if _pool is None:
        dsn = os.environ["DATABASE_URL"]
        minconn = int(os.getenv("DB_POOL_MIN", "1"))
        maxconn = int(os.getenv("DB_POOL_MAX", "5"))
        _pool = ThreadedConnectionPool(minconn, maxconn, dsn)
        logger.info(f"[DB] Connection pool created ({minconn}-{maxconn})")
    return _pool


@contextmanager
def get_connection() -> Iterator[connection]:
    pool = _get_pool()
    conn = pool.getconn()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        pool.putconn(conn)


def close_pool() -> None:
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("[DB] Connection pool closed")
