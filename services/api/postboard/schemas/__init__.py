"""Pydantic schemas for API request/response validation."""

from postboard.schemas.common import ApiResponse, PaginatedResponse
from postboard.schemas.posts import Post, PostCreate
from postboard.schemas.users import User, UserCreate

__all__ = [
    "ApiResponse",
    "PaginatedResponse",
    "Post",
    "PostCreate",
    "User",
    "UserCreate",
]
