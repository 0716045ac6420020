"""Comments and reactions on publications, projects, groups and comments."""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from loguru import logger
from sqlalchemy.orm import Session

from ..db.models.comment import Comment, Reaction
from ..db.models.group import ResearchGroup
from ..db.models.project import Project
from ..db.models.publication import PublicationModel
from ..db.repositories.engagement_repo import CommentRepository, ReactionRepository
from ..errors import BadRequestError, ForbiddenError, NotFoundError

COMMENT_TARGETS = {
    "publication_id": PublicationModel,
    "project_id": Project,
    "group_id": ResearchGroup,
}
REACTION_TARGETS = {
    "publication_id": PublicationModel,
    "project_id": Project,
    "comment_id": Comment,
}


def single_target(targets: Dict[str, Optional[str]], allowed: Dict[str, type]) -> Tuple[str, str]:
    """Return the one ``(column, id)`` pair set in ``targets``."""
    chosen = [(k, v) for k, v in targets.items() if k in allowed and v]
    if len(chosen) != 1:
        raise BadRequestError(f"exactly one of {', '.join(sorted(allowed))} is required")
    return chosen[0]


class EngagementService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.comments = CommentRepository(session)
        self.reactions = ReactionRepository(session)

    def _require_target(self, column: str, value: str, allowed: Dict[str, type]) -> None:
        if self.session.get(allowed[column], value) is None:
            raise NotFoundError(f"{column.removesuffix('_id')} {value} not found")

    # --- comments --------------------------------------------------------

    def add_comment(self, user_id: str, content: str, parent_id: str | None = None, **targets: Optional[str]) -> Comment:
        if parent_id:
            parent = self.comments.get(parent_id)
            if not parent:
                raise NotFoundError(f"comment {parent_id} not found")
            thread = {k: getattr(parent, k) for k in COMMENT_TARGETS}
            given = {k: v for k, v in targets.items() if v}
            if any(thread.get(k) != v for k, v in given.items()):
                raise BadRequestError("a reply must target the same item as its parent comment")
            # replies always live on the thread's target
            targets = thread
        column, value = single_target(targets, COMMENT_TARGETS)
        self._require_target(column, value, COMMENT_TARGETS)
        comment = self.comments.create(user_id=user_id, content=content, parent_id=parent_id, **{column: value})
        logger.info("comment added: id={} {}={}", comment.id, column, value)
        return comment

    def get_comment(self, comment_id: str) -> Comment:
        comment = self.comments.get(comment_id)
        if not comment:
            raise NotFoundError(f"comment {comment_id} not found")
        return comment

    def list_comments(self, **filters: Optional[str]) -> list[Comment]:
        column, value = single_target(filters, {**COMMENT_TARGETS, "parent_id": Comment})
        return self.comments.list_by(column, value)

    def delete_comment(self, actor_id: str, actor_is_admin: bool, comment_id: str) -> bool:
        comment = self.get_comment(comment_id)
        if comment.user_id != actor_id and not actor_is_admin:
            raise ForbiddenError("comment belongs to another user")
        logger.info("comment deleted: id={}", comment_id)
        return self.comments.delete(comment_id)

    # --- reactions -------------------------------------------------------

    def react(self, user_id: str, type: str, **targets: Optional[str]) -> Reaction:
        column, value = single_target(targets, REACTION_TARGETS)
        self._require_target(column, value, REACTION_TARGETS)
        reaction = self.reactions.upsert(user_id=user_id, type=type, column=column, value=value)
        logger.info("reaction {} by {} on {}={}", type, user_id, column, value)
        return reaction

    def unreact(self, user_id: str, **targets: Optional[str]) -> bool:
        column, value = single_target(targets, REACTION_TARGETS)
        return self.reactions.remove(user_id, column, value)

    def reactions_for(self, **targets: Optional[str]) -> list[Reaction]:
        column, value = single_target(targets, REACTION_TARGETS)
        return self.reactions.list_by_target(column, value)

    def reactions_by(self, user_id: str) -> list[Reaction]:
        return self.reactions.list_by_user(user_id)
