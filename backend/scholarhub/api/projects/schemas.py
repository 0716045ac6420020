"""Pydantic schemas for projects and collaborators."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreateIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = None
    status: str = Field(default="active", min_length=1, max_length=50)
    group_id: Optional[str] = None


class ProjectUpdateIn(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    description: Optional[str] = None
    status: Optional[str] = Field(default=None, min_length=1, max_length=50)
    group_id: Optional[str] = None


class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str]
    status: str
    group_id: Optional[str]
    creator_id: str
    created_at: datetime
    updated_at: datetime


class CollaboratorIn(BaseModel):
    user_id: str
    role: str = Field(default="collaborator", min_length=1, max_length=50)


def project_out(project) -> dict:
    return ProjectOut.model_validate(project).model_dump(mode="json")
