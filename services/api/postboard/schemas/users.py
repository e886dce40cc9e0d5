"""Schemas for the users endpoints (/api/users)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, EmailStr, Field

from postboard.services.identifiers import UserId


class User(BaseModel):
    """A registered user."""

    id: UserId
    email: str
    name: str
    created_at: datetime = Field(alias="createdAt")
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}


class UserCreate(BaseModel):
    """Request body for POST /api/users."""

    email: EmailStr
    name: str = Field(min_length=1)
    metadata: dict[str, Any] = Field(default_factory=dict)
