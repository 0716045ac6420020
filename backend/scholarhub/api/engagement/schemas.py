"""Pydantic schemas for comments and reactions."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommentCreateIn(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)
    parent_id: Optional[str] = None
    publication_id: Optional[str] = None
    project_id: Optional[str] = None
    group_id: Optional[str] = None


class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    content: str
    user_id: str
    parent_id: Optional[str]
    publication_id: Optional[str]
    project_id: Optional[str]
    group_id: Optional[str]
    created_at: datetime


class ReactionTargetIn(BaseModel):
    publication_id: Optional[str] = None
    project_id: Optional[str] = None
    comment_id: Optional[str] = None


class ReactionIn(ReactionTargetIn):
    type: str = Field(..., min_length=1, max_length=30)


class ReactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    user_id: str
    publication_id: Optional[str]
    project_id: Optional[str]
    comment_id: Optional[str]
    created_at: datetime


def comment_out(comment) -> dict:
    return CommentOut.model_validate(comment).model_dump(mode="json")


def reaction_out(reaction) -> dict:
    return ReactionOut.model_validate(reaction).model_dump(mode="json")
