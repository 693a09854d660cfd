import os
import logging
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)

# Keep SQLAlchemy's own engine logging quiet unless explicitly enabled
logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

# Any SQLAlchemy URL; falls back to a local SQLite file for development
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///./users.db')
USERS_TABLE_NAME = 'users'

_engine_cache: Engine | None = None
_session_factory: sessionmaker | None = None


def reset_engine():
    """Dispose the cached engine so the next call builds a fresh one."""
    global _engine_cache, _session_factory
    if _engine_cache is not None:
        _engine_cache.dispose()
    _engine_cache = None
    _session_factory = None


def get_engine() -> Engine:
    """Get the process-wide SQLAlchemy engine, creating it on first use.

    The engine owns the connection pool and is shared by every request.
    SQLite connections are opened with ``check_same_thread=False`` because
    route handlers run on FastAPI's thread pool.

    Returns:
        SQLAlchemy Engine bound to DATABASE_URL
    """
    global _engine_cache

    if _engine_cache is not None:
        return _engine_cache

    connect_args = {}
    if DATABASE_URL.startswith('sqlite'):
        connect_args['check_same_thread'] = False

    _engine_cache = create_engine(
        DATABASE_URL,
        connect_args=connect_args,
        pool_pre_ping=True,  # Drop stale pooled connections before use
    )
    logger.info("[DATABASE] Engine created", extra={"dialect": _engine_cache.dialect.name})
    return _engine_cache


def get_session_factory() -> sessionmaker:
    """Get the sessionmaker bound to the shared engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _session_factory


def new_session() -> Session:
    return get_session_factory()()
