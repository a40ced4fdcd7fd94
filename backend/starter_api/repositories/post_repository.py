"""Post Repository — SQL persistence for the Post placeholder entity.

Invariants:
    - create/update/delete return DataResult; IntegrityError and DataError never escape
    - Known errors are returned unlogged: respond() logs them at the boundary
    - Failed writes are rolled back before the KnownDataError is returned
    - update/delete of a missing id → RECORD_NOT_FOUND, not None

Design Decisions:
    - Field dicts over schema objects: repositories stay independent of the
      API's Pydantic models
"""

from typing import Any

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from starter_api.core.data_result import DataResult, Ok
from starter_api.core.domain_types import PostId
from starter_api.core.repository_protocols import PostRepository
from starter_api.infrastructure.database import get_db
from starter_api.infrastructure.translate_db_error import (
    KNOWN_DRIVER_ERRORS, record_not_found, translate_known_error,
)
from starter_api.models.post import Post

_MODEL = "post"


class SqlPostRepository:
    """PostRepository over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, post_data: dict[str, Any]) -> DataResult[Post]:
        post = Post(**post_data)
        self._db.add(post)
        return await self._commit(post, "create")

    async def get(self, post_id: PostId) -> Post | None:
        return await self._db.get(Post, post_id)

    async def list(self, published_only: bool = False) -> list[Post]:
        query = select(Post).order_by(Post.id)
        if published_only:
            query = query.where(Post.published.is_(True))
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def update(
        self, post_id: PostId, fields: dict[str, Any],
    ) -> DataResult[Post]:
        post = await self._db.get(Post, post_id)
        if post is None:
            return record_not_found(_MODEL, "update")
        for name, value in fields.items():
            setattr(post, name, value)
        return await self._commit(post, "update")

    async def delete(self, post_id: PostId) -> DataResult[PostId]:
        post = await self._db.get(Post, post_id)
        if post is None:
            return record_not_found(_MODEL, "delete")
        await self._db.delete(post)
        result = await self._commit(post, "delete")
        match result:
            case Ok():
                return Ok(post_id)
            case _:
                return result

    async def _commit(self, post: Post, operation: str) -> DataResult[Post]:
        try:
            await self._db.commit()
        except KNOWN_DRIVER_ERRORS as e:
            await self._db.rollback()
            return translate_known_error(e, _MODEL, operation)
        if operation != "delete":
            await self._db.refresh(post)
        return Ok(post)


def get_post_repository(db: AsyncSession = Depends(get_db)) -> PostRepository:
    """FastAPI dependency providing the post repository."""
    return SqlPostRepository(db)
