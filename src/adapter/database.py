"""
Store handle construction.

The engine and session factory are built explicitly (at application
startup or by tests) and disposed by whoever created them.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(db_uri: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; SQLite connections get FK enforcement for cascades"""
    engine = create_async_engine(db_uri, echo=echo, future=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
