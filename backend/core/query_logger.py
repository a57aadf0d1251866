# backend/core/query_logger.py

import logging
import time
import weakref
from contextlib import contextmanager
from typing import Any, Dict, Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine

from .config import Settings

logger = logging.getLogger("sqlalchemy.engine")
query_logger = logging.getLogger("query_performance")

_engine_stats: "weakref.WeakKeyDictionary[Engine, QueryStats]" = weakref.WeakKeyDictionary()


class QueryStats:
    """Running counters for statements executed on an engine"""

    def __init__(self, slow_query_threshold: float = 1.0):
        self.slow_query_threshold = slow_query_threshold
        self.reset()

    def reset(self):
        self.total_queries = 0
        self.slow_queries = 0
        self.total_time = 0.0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "total_queries": self.total_queries,
            "slow_queries": self.slow_queries,
            "total_time": round(self.total_time, 3),
        }


def setup_query_logging(engine: Engine, settings: Settings) -> QueryStats:
    """
    Attach statement timing and SQLite pragmas to an engine.

    Args:
        engine: SQLAlchemy engine instance
        settings: application settings (slow query threshold, SQL echo)

    Returns:
        The QueryStats collector bound to the engine
    """
    stats = QueryStats(settings.slow_query_threshold_seconds)

    @event.listens_for(engine, "connect")
    def setup_sqlite_pragma(dbapi_conn, connection_record):
        """Enable foreign keys on SQLite connections"""
        if engine.dialect.name == "sqlite":
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()
        logger.debug("New database connection established")

    @event.listens_for(engine, "before_cursor_execute")
    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_start_time", []).append(time.perf_counter())

    @event.listens_for(engine, "after_cursor_execute")
    def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        elapsed = time.perf_counter() - conn.info["query_start_time"].pop(-1)
        stats.total_queries += 1
        stats.total_time += elapsed

        if elapsed > stats.slow_query_threshold:
            stats.slow_queries += 1
            query_logger.warning(
                "SLOW QUERY (%.3fs): %s", elapsed, statement[:200]
            )

    _engine_stats[engine] = stats
    return stats


def get_query_stats(engine: Engine) -> Optional[QueryStats]:
    return _engine_stats.get(engine)


@contextmanager
def log_query_performance(engine: Engine, operation_name: str):
    """
    Context manager to log the statement count and wall time of an operation

    Example:
        with log_query_performance(engine, "sync_all_table_statuses"):
            ...
    """
    stats = get_query_stats(engine)
    start_queries = stats.total_queries if stats else 0
    start_time = time.perf_counter()

    try:
        yield
    finally:
        elapsed = time.perf_counter() - start_time
        query_count = (stats.total_queries - start_queries) if stats else 0
        query_logger.info(
            "Operation '%s': %d queries in %.3fs", operation_name, query_count, elapsed
        )
