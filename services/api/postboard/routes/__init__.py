"""API routes."""

from fastapi import APIRouter

from postboard.routes import posts, ui, users

api_router = APIRouter()

# Landing page and API info
api_router.include_router(ui.router, tags=["ui"])

# Users service
api_router.include_router(users.router, prefix="/api/users", tags=["users"])

# Posts service
api_router.include_router(posts.router, prefix="/api/posts", tags=["posts"])
