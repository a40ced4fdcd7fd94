"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Write operations return DataResult: known data errors are values, not exceptions
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, callers await them at the edge
"""

from typing import Any, Protocol

from starter_api.core.data_result import DataResult
from starter_api.core.domain_types import PostId


class PostLike(Protocol):
    """Structural contract for Post objects handed across layers."""
    id: int
    title: str
    body: str | None
    published: bool


class PostRepository(Protocol):
    """Contract for post persistence — implemented by shell."""
    async def create(self, post_data: dict[str, Any]) -> DataResult[PostLike]: ...
    async def get(self, post_id: PostId) -> PostLike | None: ...
    async def list(self, published_only: bool = False) -> list[PostLike]: ...
    async def update(
        self, post_id: PostId, fields: dict[str, Any],
    ) -> DataResult[PostLike]: ...
    async def delete(self, post_id: PostId) -> DataResult[PostId]: ...
