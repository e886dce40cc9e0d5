"""Users endpoints.

GET  /api/users         - Paginated list of users
GET  /api/users/{id}    - Single user envelope
POST /api/users         - Create a user

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, Path, Query, Response

from postboard.routes.deps import get_app_settings, get_repositories
from postboard.schemas import ApiResponse, PaginatedResponse, User, UserCreate
from postboard.services import users as user_service
from postboard.settings import Settings
from postboard.stores.memory import Repositories

router = APIRouter()


@router.get("", response_model=PaginatedResponse[User])
async def list_users(
    page: str | None = Query(
        default=None,
        description="1-based page number; invalid values fall back to 1",
        examples=["1"],
    ),
    page_size: str | None = Query(
        default=None,
        alias="pageSize",
        description="Items per page, clamped to the configured maximum",
        examples=["20"],
    ),
    repositories: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_app_settings),
) -> PaginatedResponse[User]:
    """Get one page of users."""
    return user_service.list_users(
        repositories.users,
        page,
        page_size,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


@router.get("/{user_id}", response_model=ApiResponse[User])
async def get_user(
    response: Response,
    user_id: str = Path(description="User ID", examples=["user-123"]),
    repositories: Repositories = Depends(get_repositories),
) -> ApiResponse[User]:
    """Get a user by id.

    Returns:
        Envelope with the user, or an error envelope with status 400/404.
    """
    envelope = user_service.get_user(repositories.users, user_id)
    response.status_code = envelope.status_code
    return envelope


@router.post("", response_model=ApiResponse[User])
async def create_user(
    payload: UserCreate,
    response: Response,
    repositories: Repositories = Depends(get_repositories),
) -> ApiResponse[User]:
    """Create a user. The id and creation timestamp are assigned here."""
    envelope = user_service.create_user(repositories.users, payload)
    response.status_code = envelope.status_code
    return envelope
