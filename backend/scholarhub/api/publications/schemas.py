"""Pydantic request/response schemas for Publications API."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PublicationCreateIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    type: str = Field(..., min_length=1, max_length=100)
    authors: str = Field(..., min_length=1)
    venue: str = Field(..., min_length=1, max_length=500)
    year: int = Field(..., ge=1000, le=9999)
    doi: Optional[str] = None
    abstract: str = Field(..., min_length=1)
    keywords: str = Field(..., min_length=1)
    pdf_url: Optional[str] = None
    research_area: Optional[str] = None


class PublicationUpdateIn(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    authors: Optional[str] = Field(default=None, min_length=1)
    venue: Optional[str] = Field(default=None, min_length=1, max_length=500)
    year: Optional[int] = Field(default=None, ge=1000, le=9999)
    doi: Optional[str] = None
    abstract: Optional[str] = Field(default=None, min_length=1)
    keywords: Optional[str] = Field(default=None, min_length=1)
    pdf_url: Optional[str] = None
    research_area: Optional[str] = None


class PublicationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    type: str
    authors: str
    venue: str
    year: int
    doi: Optional[str]
    abstract: str
    keywords: str
    pdf_url: Optional[str]
    user_id: str
    citations: Optional[int]
    research_area: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class SummaryQuery(BaseModel):
    format: str = "pdf"
    filter: str = "year"


def publication_out(pub) -> dict:
    return PublicationOut.model_validate(pub).model_dump(mode="json")
