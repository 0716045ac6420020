"""Pydantic schemas for registration and login."""
from __future__ import annotations

from pydantic import BaseModel, Field

from ..users.schemas import UserCreateIn


class LoginIn(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminRegisterIn(UserCreateIn):
    admin_secret: str
