"""Domain dataclass for Publication entities (DB-agnostic)."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Publication:
    id: str
    title: str
    type: str
    authors: str
    venue: str
    year: int
    abstract: str
    keywords: str
    user_id: str
    doi: Optional[str] = None
    pdf_url: Optional[str] = None
    citations: Optional[int] = None
    research_area: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
