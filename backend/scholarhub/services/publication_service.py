"""Publication service encapsulating ownership rules and summary export."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from loguru import logger
from sqlalchemy.orm import Session

from ..db.repositories.publication_repo import PublicationRepository
from ..domain.publication import Publication
from ..errors import ForbiddenError, NotFoundError
from ..summary import SummaryArtifact, generate_publication_summary


class PublicationService:
    def __init__(self, session: Session) -> None:
        self.repo = PublicationRepository(session)

    def list_publications(self) -> Iterable[Publication]:
        return self.repo.list()

    def list_by_user(self, user_id: str) -> list[Publication]:
        return self.repo.list_by_user(user_id)

    def search(self, query: str) -> list[Publication]:
        query = (query or "").strip()
        if not query:
            return []
        return self.repo.search(query)

    def get_publication(self, publication_id: str) -> Optional[Publication]:
        return self.repo.get(publication_id)

    def create_publication(self, user_id: str, **fields: Any) -> Publication:
        pub = self.repo.create(user_id, **fields)
        logger.info("publication created: id={} user={}", pub.id, user_id)
        return pub

    def update_publication(
        self, actor_id: str, actor_is_admin: bool, publication_id: str, **fields: Any
    ) -> Publication:
        self._require_editable(actor_id, actor_is_admin, publication_id)
        pub = self.repo.update(publication_id, **fields)
        logger.info("publication updated: id={} fields={}", publication_id, sorted(fields))
        return pub  # type: ignore[return-value]

    def delete_publication(self, actor_id: str, actor_is_admin: bool, publication_id: str) -> bool:
        self._require_editable(actor_id, actor_is_admin, publication_id)
        deleted = self.repo.delete(publication_id)
        logger.info("publication deleted: id={}", publication_id)
        return deleted

    def summarize(self, user_id: str, format: str, filter: str) -> SummaryArtifact:
        return generate_publication_summary(self.repo.list_by_user(user_id), format, filter)

    def _require_editable(self, actor_id: str, actor_is_admin: bool, publication_id: str) -> Publication:
        pub = self.repo.get(publication_id)
        if not pub:
            raise NotFoundError(f"publication {publication_id} not found")
        if pub.user_id != actor_id and not actor_is_admin:
            raise ForbiddenError("publication belongs to another user")
        return pub
