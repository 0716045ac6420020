"""User ORM model (account plus academic profile)."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..base import Base, new_id, utcnow

PROFILE_FIELDS = (
    "bio",
    "research_interests",
    "contact_email",
    "profile_picture",
    "linkedin_url",
    "google_scholar_url",
    "research_gate_url",
    "twitter_url",
    "facebook_url",
    "instagram_url",
    "personal_website",
    "education",
    "awards",
    "office_hours",
    "office_location",
    "college",
    "school",
    "current_city",
    "current_state",
    "alma_college",
    "alma_school",
    "alma_city",
    "alma_state",
)


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    department: Mapped[str] = mapped_column(String(200), nullable=False)
    designation: Mapped[str] = mapped_column(String(200), nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    bio: Mapped[Optional[str]] = mapped_column(Text, default=None)
    research_interests: Mapped[Optional[str]] = mapped_column(Text, default=None)
    contact_email: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    profile_picture: Mapped[Optional[str]] = mapped_column(String(1000), default=None)

    # Social links
    linkedin_url: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    google_scholar_url: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    research_gate_url: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    twitter_url: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    facebook_url: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    instagram_url: Mapped[Optional[str]] = mapped_column(String(1000), default=None)

    personal_website: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    education: Mapped[Optional[str]] = mapped_column(Text, default=None)
    awards: Mapped[Optional[str]] = mapped_column(Text, default=None)
    office_hours: Mapped[Optional[str]] = mapped_column(String(200), default=None)
    office_location: Mapped[Optional[str]] = mapped_column(String(200), default=None)

    # Current institution
    college: Mapped[Optional[str]] = mapped_column(String(200), default=None)
    school: Mapped[Optional[str]] = mapped_column(String(200), default=None)
    current_city: Mapped[Optional[str]] = mapped_column(String(100), default=None)
    current_state: Mapped[Optional[str]] = mapped_column(String(100), default=None)

    # Alma mater
    alma_college: Mapped[Optional[str]] = mapped_column(String(200), default=None)
    alma_school: Mapped[Optional[str]] = mapped_column(String(200), default=None)
    alma_city: Mapped[Optional[str]] = mapped_column(String(100), default=None)
    alma_state: Mapped[Optional[str]] = mapped_column(String(100), default=None)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
