"""SQLAlchemy-backed Publication repository returning dataclasses."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import Session

from ..base import new_id
from ..models.publication import PublicationModel
from ...domain.publication import Publication

EDITABLE_FIELDS = {
    "title", "type", "authors", "venue", "year", "doi",
    "abstract", "keywords", "pdf_url", "research_area", "citations",
}


def _to_dc(m: PublicationModel) -> Publication:
    return Publication(
        id=m.id,
        title=m.title,
        type=m.type,
        authors=m.authors,
        venue=m.venue,
        year=m.year,
        abstract=m.abstract,
        keywords=m.keywords,
        user_id=m.user_id,
        doi=m.doi,
        pdf_url=m.pdf_url,
        citations=m.citations,
        research_area=m.research_area,
        created_at=m.created_at,
        updated_at=m.updated_at,
    )


class PublicationRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, limit: int | None = None) -> Iterable[Publication]:
        stmt: Select = select(PublicationModel).order_by(PublicationModel.created_at.desc())
        if limit:
            stmt = stmt.limit(limit)
        return [_to_dc(m) for m in self.session.scalars(stmt).all()]

    def list_by_user(self, user_id: str) -> list[Publication]:
        stmt = (
            select(PublicationModel)
            .where(PublicationModel.user_id == user_id)
            .order_by(PublicationModel.created_at.desc())
        )
        return [_to_dc(m) for m in self.session.scalars(stmt).all()]

    def search(self, query: str) -> list[Publication]:
        # wildcards in the query match literally
        escaped = query.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{escaped}%"
        stmt = (
            select(PublicationModel)
            .where(
                or_(
                    PublicationModel.title.ilike(pattern, escape="\\"),
                    PublicationModel.authors.ilike(pattern, escape="\\"),
                    PublicationModel.keywords.ilike(pattern, escape="\\"),
                )
            )
            .order_by(PublicationModel.created_at.desc())
        )
        return [_to_dc(m) for m in self.session.scalars(stmt).all()]

    def get(self, publication_id: str) -> Optional[Publication]:
        m = self.session.get(PublicationModel, publication_id)
        return _to_dc(m) if m else None

    def create(self, user_id: str, **fields: Any) -> Publication:
        m = PublicationModel(
            id=new_id(),
            user_id=user_id,
            title=fields["title"],
            type=fields["type"],
            authors=fields["authors"],
            venue=fields["venue"],
            year=fields["year"],
            abstract=fields["abstract"],
            keywords=fields["keywords"],
            doi=fields.get("doi") or None,
            pdf_url=fields.get("pdf_url") or None,
            research_area=fields.get("research_area") or None,
            citations=None,
        )
        self.session.add(m)
        self.session.commit()
        self.session.refresh(m)
        return _to_dc(m)

    def update(self, publication_id: str, **fields: Any) -> Optional[Publication]:
        m = self.session.get(PublicationModel, publication_id)
        if not m:
            return None
        for k, v in fields.items():
            if k in EDITABLE_FIELDS:
                setattr(m, k, v)
        self.session.commit()
        self.session.refresh(m)
        return _to_dc(m)

    def delete(self, publication_id: str) -> bool:
        m = self.session.get(PublicationModel, publication_id)
        if not m:
            return False
        self.session.delete(m)
        self.session.commit()
        return True
