"""Mock records used to seed the stores and to build test data."""

from datetime import datetime, timezone
from typing import Any

from postboard.schemas.posts import Post
from postboard.schemas.users import User
from postboard.services.identifiers import PostId, UserId

MOCK_USER_ID = UserId("user-123")
MOCK_POST_ID = PostId("post-456")


def create_mock_user(**overrides: Any) -> User:
    """Build the mock user; keyword arguments replace individual fields."""
    fields: dict[str, Any] = {
        "id": MOCK_USER_ID,
        "email": "test@example.com",
        "name": "Test User",
        "created_at": datetime.now(timezone.utc),
        "metadata": {},
    }
    fields.update(overrides)
    return User(**fields)


def create_mock_post(**overrides: Any) -> Post:
    """Build the mock post (authored by the mock user, unpublished)."""
    fields: dict[str, Any] = {
        "id": MOCK_POST_ID,
        "author_id": MOCK_USER_ID,
        "title": "Test Post",
        "content": "Test content",
        "tags": ["test"],
        "published_at": None,
    }
    fields.update(overrides)
    return Post(**fields)
