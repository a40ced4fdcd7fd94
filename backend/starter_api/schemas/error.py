"""Error Schemas — documented shape of the normalized error envelope."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Normalized known data-access error."""
    statusCode: int = Field(examples=[400])
    message: str = Field(
        examples=["Unique constraint failed on the fields: (`title`) Invalid `post.create()` invocation"],
    )
