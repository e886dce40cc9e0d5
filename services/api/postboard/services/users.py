"""User handlers.

Each function backs one /api/users route and returns an envelope; failures
are reported as error envelopes, never raised.
"""

import logging
from datetime import datetime, timezone

from postboard.schemas.common import ApiResponse, PaginatedResponse
from postboard.schemas.users import User, UserCreate
from postboard.services.envelope import create_error_response, create_success_response
from postboard.services.identifiers import UserId, is_user_id, new_user_id
from postboard.services.pagination import paginate, resolve_page
from postboard.stores.memory import Repository

logger = logging.getLogger("uvicorn.error")

INVALID_USER_ID = "Invalid user ID"
USER_NOT_FOUND = "User not found"


def list_users(
    users: Repository[UserId, User],
    page: str | None,
    page_size: str | None,
    *,
    default_page_size: int,
    max_page_size: int,
) -> PaginatedResponse[User]:
    """List users in insertion order, one page at a time."""
    resolved_page, resolved_size = resolve_page(
        page,
        page_size,
        default_page_size=default_page_size,
        max_page_size=max_page_size,
    )
    return paginate(users.list(), resolved_page, resolved_size)


def get_user(users: Repository[UserId, User], user_id: str) -> ApiResponse[User]:
    """Look up a single user.

    Returns:
        Success envelope with the user, or an error envelope
        ("Invalid user ID" / "User not found").
    """
    if not is_user_id(user_id):
        return create_error_response(INVALID_USER_ID, status_code=400)

    user = users.get(UserId(user_id))
    if user is None:
        logger.info("User %s not found", user_id)
        return create_error_response(USER_NOT_FOUND, status_code=404)

    return create_success_response(user)


def create_user(users: Repository[UserId, User], payload: UserCreate) -> ApiResponse[User]:
    """Register a new user with a fresh id and creation timestamp."""
    user = User(
        id=new_user_id(),
        email=payload.email,
        name=payload.name,
        created_at=datetime.now(timezone.utc),
        metadata=dict(payload.metadata),
    )
    users.insert(user)
    logger.info("Created user %s", user.id)
    return create_success_response(user)
