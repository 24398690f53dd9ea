"""Database engine and session management for the SQL payment repository."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Base class for all ORM models
Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine.

    SQLite engines are opened with check_same_thread disabled because the
    API serves requests from a thread pool; in-memory SQLite additionally
    shares one connection so every session sees the same database.

    Args:
        database_url: SQLAlchemy connection URL
        echo: Log SQL statements

    Returns:
        Configured SQLAlchemy engine
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    return create_engine(
        database_url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,
        echo=echo,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine) -> None:
    """
    Create all tables.

    Intended for tests and local runs; deployed databases are migrated with
    Alembic.
    """
    # Import models so they register on Base.metadata
    from payment_gateway.repositories import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
