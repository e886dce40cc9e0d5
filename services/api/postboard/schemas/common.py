"""Common schemas used across the API.

Every JSON endpoint answers with one of two wrappers:
- ApiResponse: { success, data, timestamp, requestId } or, on failure,
  { success: false, timestamp, requestId, error }
- PaginatedResponse: { items, total, page, pageSize, hasMore }
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard response envelope.

    `data` is omitted from the payload when `success` is false, and `error`
    is omitted when it is not set. `status_code` is the HTTP status the route
    should answer with; it is never serialized.
    """

    success: bool
    data: T | None = None
    timestamp: int = Field(description="Epoch milliseconds")
    request_id: str = Field(alias="requestId")
    error: str | None = None
    status_code: int = Field(default=200, exclude=True)

    model_config = {"populate_by_name": True}

    @model_serializer(mode="wrap")
    def _omit_absent_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload = handler(self)
        if not self.success:
            payload.pop("data", None)
        if self.error is None:
            payload.pop("error", None)
        return payload


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of an ordered collection."""

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(alias="pageSize", ge=1)
    has_more: bool = Field(alias="hasMore")

    model_config = {"populate_by_name": True}
