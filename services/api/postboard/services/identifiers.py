"""Identifier helpers for users and posts.

UserId and PostId are tagged strings: identical to `str` at runtime, distinct
for type checkers so a post id cannot be passed where a user id is expected.

`is_user_id` / `is_post_id` are presence checks only. A value that passes
them is well-formed, not necessarily present in a store.
"""

from collections.abc import Mapping
from typing import Any, NewType
from uuid import uuid4

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)

USER_ID_PREFIX = "user"
POST_ID_PREFIX = "post"

_USER_FIELDS = ("id", "email", "name")


def is_user_id(value: object) -> bool:
    """Return True if value is a non-empty string."""
    return isinstance(value, str) and len(value) > 0


def is_post_id(value: object) -> bool:
    """Return True if value is a non-empty string."""
    return isinstance(value, str) and len(value) > 0


def _new_token() -> str:
    return uuid4().hex


def new_user_id() -> UserId:
    """Generate a fresh user id, e.g. `user-3f2b...`."""
    return UserId(f"{USER_ID_PREFIX}-{_new_token()}")


def new_post_id() -> PostId:
    """Generate a fresh post id, e.g. `post-9ac1...`."""
    return PostId(f"{POST_ID_PREFIX}-{_new_token()}")


def is_user(obj: Any) -> bool:
    """Structural check: does obj carry the id, email and name of a user?

    Accepts mappings (decoded JSON) and objects with matching attributes.
    """
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        return all(field in obj for field in _USER_FIELDS)
    if isinstance(obj, (str, bytes, int, float, bool)):
        return False
    return all(hasattr(obj, field) for field in _USER_FIELDS)
