"""Async Session Factory — DB sessions for scripts and test fixtures outside FastAPI.

Invariants:
    - Never shares an engine with DatabaseSessionManager (callers own disposal)

Design Decisions:
    - Separate from infrastructure/database.py: no pooling options, no error
      translation, returns the engine so the caller can dispose it
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_session_factory(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an engine and async session factory for the given database URL."""
    engine = create_async_engine(database_url, echo=False)
    return engine, async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
