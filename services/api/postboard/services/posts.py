"""Post handlers.

Same contract as the user handlers. Lookups validate the id before touching
the store, and creation requires the author to exist at that moment.
"""

import logging
from datetime import datetime, timezone

from postboard.schemas.common import ApiResponse, PaginatedResponse
from postboard.schemas.posts import Post, PostCreate
from postboard.schemas.users import User
from postboard.services.envelope import create_error_response, create_success_response
from postboard.services.identifiers import PostId, UserId, is_post_id, is_user_id, new_post_id
from postboard.services.pagination import paginate, resolve_page
from postboard.stores.memory import Repository

logger = logging.getLogger("uvicorn.error")

INVALID_POST_ID = "Invalid post ID"
POST_NOT_FOUND = "Post not found"
AUTHOR_NOT_FOUND = "Author not found"


def list_posts(
    posts: Repository[PostId, Post],
    page: str | None,
    page_size: str | None,
    *,
    default_page_size: int,
    max_page_size: int,
) -> PaginatedResponse[Post]:
    """List posts in insertion order, one page at a time."""
    resolved_page, resolved_size = resolve_page(
        page,
        page_size,
        default_page_size=default_page_size,
        max_page_size=max_page_size,
    )
    return paginate(posts.list(), resolved_page, resolved_size)


def get_post(posts: Repository[PostId, Post], post_id: str) -> ApiResponse[Post]:
    """Look up a single post."""
    if not is_post_id(post_id):
        return create_error_response(INVALID_POST_ID, status_code=400)

    post = posts.get(PostId(post_id))
    if post is None:
        logger.info("Post %s not found", post_id)
        return create_error_response(POST_NOT_FOUND, status_code=404)

    return create_success_response(post)


def create_post(
    users: Repository[UserId, User],
    posts: Repository[PostId, Post],
    payload: PostCreate,
) -> ApiResponse[Post]:
    """Create a post for an existing author.

    The post is published immediately when `payload.publish` is set;
    otherwise `published_at` stays None. Nothing is stored when the author
    is unknown.
    """
    if not is_user_id(payload.author_id) or not users.has(UserId(payload.author_id)):
        logger.info("Rejected post: author %s not found", payload.author_id)
        return create_error_response(AUTHOR_NOT_FOUND, status_code=422)

    post = Post(
        id=new_post_id(),
        author_id=UserId(payload.author_id),
        title=payload.title,
        content=payload.content,
        tags=list(payload.tags),
        published_at=datetime.now(timezone.utc) if payload.publish else None,
    )
    posts.insert(post)
    logger.info("Created post %s by %s", post.id, post.author_id)
    return create_success_response(post)
