"""Pydantic request/response schemas for Users API."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ProfileFields(BaseModel):
    bio: Optional[str] = None
    research_interests: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    profile_picture: Optional[str] = None
    linkedin_url: Optional[str] = None
    google_scholar_url: Optional[str] = None
    research_gate_url: Optional[str] = None
    twitter_url: Optional[str] = None
    facebook_url: Optional[str] = None
    instagram_url: Optional[str] = None
    personal_website: Optional[str] = None
    education: Optional[str] = None
    awards: Optional[str] = None
    office_hours: Optional[str] = None
    office_location: Optional[str] = None
    college: Optional[str] = None
    school: Optional[str] = None
    current_city: Optional[str] = None
    current_state: Optional[str] = None
    alma_college: Optional[str] = None
    alma_school: Optional[str] = None
    alma_city: Optional[str] = None
    alma_state: Optional[str] = None


class UserCreateIn(ProfileFields):
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    department: str = Field(..., min_length=1, max_length=200)
    designation: str = Field(..., min_length=1, max_length=200)


class UserUpdateIn(ProfileFields):
    username: Optional[str] = Field(default=None, min_length=3, max_length=100)
    password: Optional[str] = Field(default=None, min_length=6)
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    department: Optional[str] = Field(default=None, min_length=1, max_length=200)
    designation: Optional[str] = Field(default=None, min_length=1, max_length=200)


class UserOut(ProfileFields):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: str
    email: EmailStr
    department: str
    designation: str
    is_admin: bool
    contact_email: Optional[str] = None
    created_at: Optional[datetime] = None


def user_out(user) -> dict:
    return UserOut.model_validate(user).model_dump(mode="json")
