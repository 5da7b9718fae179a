from sqlalchemy import create_engine, pool, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from fastapi import Request
from typing import Any, Dict, List, Optional, Union
import logging

from movie_reviews.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class StoreError(Exception):
    """Any failure reported while talking to the relational store"""

    def __init__(self, message: str, original: Optional[BaseException] = None):
        super().__init__(message)
        self.original = original


def _connect_args(url, timeout: int) -> Dict[str, Any]:
    """Driver-level timeouts so a stuck query surfaces as a store error"""
    backend = make_url(url).get_backend_name()
    if backend == "mysql":
        return {"connect_timeout": timeout, "read_timeout": timeout, "write_timeout": timeout}
    if backend == "postgresql":
        return {"connect_timeout": timeout, "options": f"-c statement_timeout={timeout * 1000}"}
    if backend == "sqlite":
        return {"check_same_thread": False, "timeout": timeout}
    return {}


def _attach_pool_logging(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def receive_connect(dbapi_conn, connection_record):
        """Log when a new connection is created"""
        logger.debug("Database connection established")

    @event.listens_for(engine, "checkout")
    def receive_checkout(dbapi_conn, connection_record, connection_proxy):
        """Log when a connection is checked out from the pool"""
        logger.debug(f"Connection checked out from pool. Pool status: {engine.pool.status()}")


class Database:
    """
    Owns the engine and its bounded connection pool.

    Built once at startup, handed to request handlers through get_db and
    disposed at shutdown. Every call checks out a single connection and
    returns it to the pool before returning.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.database_url
        engine = create_engine(
            url,
            poolclass=pool.QueuePool,
            pool_size=settings.pool_size,
            max_overflow=0,  # Hard bound: no overflow connections
            pool_timeout=settings.query_timeout,  # Seconds to wait for a free connection
            pool_recycle=3600,
            pool_pre_ping=True,
            echo=settings.db_echo,
            connect_args=_connect_args(url, settings.query_timeout),
        )
        _attach_pool_logging(engine)
        return cls(engine)

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @staticmethod
    def _clause(statement: Union[str, Any]):
        return text(statement) if isinstance(statement, str) else statement

    def fetch_all(self, statement, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Run a query and return its rows as column -> value dicts.

        Args:
            statement: SQL template with named bind parameters, or a Core select
            params: Values for the bind parameters

        Raises:
            StoreError: If the store rejects or cannot run the query
            (including values the driver cannot bind, such as oversized integers)
        """
        try:
            with self.engine.connect() as conn:
                result = conn.execute(self._clause(statement), params or {})
                return [dict(row) for row in result.mappings()]
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError("Query failed", original=e) from e

    def execute(self, statement, params: Optional[Dict[str, Any]] = None) -> int:
        """Run a data-changing statement in its own transaction, returning the row count"""
        try:
            with self.engine.begin() as conn:
                result = conn.execute(self._clause(statement), params or {})
                return result.rowcount
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError("Statement failed", original=e) from e

    def dispose(self) -> None:
        """Close every pooled connection"""
        self.engine.dispose()
        logger.info("Database connection pool disposed")


# Dependency for FastAPI routes
def get_db(request: Request) -> Database:
    """
    Database dependency for FastAPI.
    Returns the pool-owning Database created by the application lifespan.

    Usage:
        @router.get("/endpoint")
        def endpoint(db: Database = Depends(get_db)):
            # Use db here
    """
    return request.app.state.db
