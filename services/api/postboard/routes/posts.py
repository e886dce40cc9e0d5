"""Posts endpoints.

GET  /api/posts         - Paginated list of posts
GET  /api/posts/{id}    - Single post envelope
POST /api/posts         - Create a post for an existing author
"""

from fastapi import APIRouter, Depends, Path, Query, Response

from postboard.routes.deps import get_app_settings, get_repositories
from postboard.schemas import ApiResponse, PaginatedResponse, Post, PostCreate
from postboard.services import posts as post_service
from postboard.settings import Settings
from postboard.stores.memory import Repositories

router = APIRouter()


@router.get("", response_model=PaginatedResponse[Post])
async def list_posts(
    page: str | None = Query(default=None, description="1-based page number"),
    page_size: str | None = Query(default=None, alias="pageSize", description="Items per page"),
    repositories: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_app_settings),
) -> PaginatedResponse[Post]:
    """Get one page of posts."""
    return post_service.list_posts(
        repositories.posts,
        page,
        page_size,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


@router.get("/{post_id}", response_model=ApiResponse[Post])
async def get_post(
    response: Response,
    post_id: str = Path(description="Post ID", examples=["post-456"]),
    repositories: Repositories = Depends(get_repositories),
) -> ApiResponse[Post]:
    """Get a post by id."""
    envelope = post_service.get_post(repositories.posts, post_id)
    response.status_code = envelope.status_code
    return envelope


@router.post("", response_model=ApiResponse[Post])
async def create_post(
    payload: PostCreate,
    response: Response,
    repositories: Repositories = Depends(get_repositories),
) -> ApiResponse[Post]:
    """Create a post.

    Fails with "Author not found" (422) when `authorId` is not a known user.
    """
    envelope = post_service.create_post(repositories.users, repositories.posts, payload)
    response.status_code = envelope.status_code
    return envelope
