"""
Auth schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class LoginCredentials(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=6, max_length=128)


class Session(BaseModel):
    user_id: int
    email: str
    access_token: str
    token_type: str = "bearer"


class UserResponse(BaseModel):
    id: int
    email: str
    is_active: bool
    created_at: datetime
