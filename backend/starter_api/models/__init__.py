"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before
      create_all() or alembic autogenerate runs
"""

from starter_api.models.post import Post  # noqa: F401
