import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from beerstock.core.config import get_database_url

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()

# Internal lazy globals
_engine = None
_SessionLocal = None
_database_url = None


def _build_engine(database_url: str):
    url = make_url(database_url)
    if url.drivername.startswith("postgres"):
        return create_engine(
            database_url,
            pool_size=20,
            max_overflow=40,
            pool_pre_ping=True,  # Detects and refreshes stale connections
            pool_recycle=3600,
            connect_args={
                "application_name": "beerstock",  # Visible in pg_stat_activity
                "connect_timeout": 10,
            },
        )
    if url.drivername.startswith("sqlite") and url.database in (None, "", ":memory:"):
        # One shared in-memory database across the process so DDL persists
        # across connections and sessions.
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url)


def get_engine():
    """Return a cached SQLAlchemy engine, creating it from DATABASE_URL on
    first call. The engine is rebuilt if DATABASE_URL changes, which lets
    tests point the app at a fresh database."""
    global _engine, _SessionLocal, _database_url
    database_url = get_database_url()
    if _engine is None or _database_url != database_url:
        if _engine is not None:
            _engine.dispose()
        _engine = _build_engine(database_url)
        _SessionLocal = None
        _database_url = database_url
        logger.debug(
            "SQLAlchemy engine created",
            extra={"context": {"dialect": _engine.dialect.name}},
        )
    return _engine


def get_sessionmaker():
    """Return a cached sessionmaker bound to the lazy engine."""
    global _SessionLocal
    engine = get_engine()
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return _SessionLocal


def SessionLocal():
    """Calling SessionLocal() returns a new Session bound to the current engine."""
    return get_sessionmaker()()


def create_tables():
    """Create all tables in database using the lazy engine."""
    # Import models so Base.metadata is populated
    from beerstock.db import base  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def drop_tables():
    from beerstock.db import base  # noqa: F401

    Base.metadata.drop_all(bind=get_engine())


def check_database_connection() -> bool:
    """Run ``SELECT 1`` against the configured database."""
    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(
            "Database connection failed",
            extra={"context": {"error": str(e)}},
            exc_info=True,
        )
        return False
