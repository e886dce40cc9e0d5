"""In-memory store for users and posts.

Handles:
- Keyed collections that keep insertion order
- Building and seeding the user/post stores for one application instance

Records live only as long as the process. Nothing is shared between worker
processes, and there is no locking: routes are `async def` and run on the
event loop thread, so inserts never interleave.
"""

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from postboard.schemas.posts import Post
from postboard.schemas.users import User
from postboard.services.fixtures import create_mock_post, create_mock_user
from postboard.services.identifiers import PostId, UserId

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger("uvicorn.error")


class Repository(Protocol[K, V]):
    """Capability required by the handlers. Any backend providing it will do."""

    def insert(self, entity: V) -> V: ...

    def get(self, key: K) -> V | None: ...

    def list(self) -> list[V]: ...

    def has(self, key: K) -> bool: ...

    def __len__(self) -> int: ...


class InMemoryRepository(Generic[K, V]):
    """Dict-backed repository keyed by `key(entity)`."""

    def __init__(self, key: Callable[[V], K]) -> None:
        self._key = key
        self._records: dict[K, V] = {}

    def insert(self, entity: V) -> V:
        """Store entity, replacing any record with the same key."""
        self._records[self._key(entity)] = entity
        return entity

    def get(self, key: K) -> V | None:
        return self._records.get(key)

    def list(self) -> list[V]:
        """All records in insertion order."""
        return list(self._records.values())

    def has(self, key: K) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)


@dataclass
class Repositories:
    """The stores handed to the route handlers."""

    users: Repository[UserId, User]
    posts: Repository[PostId, Post]


def _user_key(user: User) -> UserId:
    return user.id


def _post_key(post: Post) -> PostId:
    return post.id


def create_repositories(seed: bool = True) -> Repositories:
    """Build empty user/post stores, optionally seeded with the mock records.

    Args:
        seed: Insert `user-123` and `post-456` when True.

    Returns:
        Fresh Repositories instance.
    """
    repositories = Repositories(
        users=InMemoryRepository(key=_user_key),
        posts=InMemoryRepository(key=_post_key),
    )
    if seed:
        repositories.users.insert(create_mock_user())
        repositories.posts.insert(create_mock_post())
        logger.info(
            "Seeded in-memory stores (users=%d, posts=%d)",
            len(repositories.users),
            len(repositories.posts),
        )
    return repositories
