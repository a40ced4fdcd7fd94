"""Database Package — SQLAlchemy Base and a standalone async session factory.

Invariants:
    - All sessions are async (AsyncSession)
"""
