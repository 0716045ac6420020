"""Pydantic schemas for research groups and memberships."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GroupCreateIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    is_public: bool = True


class GroupUpdateIn(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    is_public: Optional[bool] = None


class GroupOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str]
    is_public: bool
    creator_id: str
    created_at: datetime


class MemberIn(BaseModel):
    user_id: Optional[str] = None
    role: str = Field(default="member", min_length=1, max_length=50)


def group_out(group) -> dict:
    return GroupOut.model_validate(group).model_dump(mode="json")
