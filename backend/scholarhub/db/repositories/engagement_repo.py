"""Comments and reactions."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..models.comment import Comment, Reaction


class CommentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: str) -> Optional[Comment]:
        return self.session.get(Comment, comment_id)

    def list_by(self, column: str, value: str) -> list[Comment]:
        stmt = select(Comment).where(getattr(Comment, column) == value).order_by(Comment.created_at)
        return list(self.session.scalars(stmt).all())

    def create(self, *, user_id: str, content: str, **target: Optional[str]) -> Comment:
        entity = Comment(user_id=user_id, content=content, **target)
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, comment_id: str) -> bool:
        entity = self.get(comment_id)
        if not entity:
            return False
        self.session.delete(entity)
        self.session.commit()
        return True


class ReactionRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def find(self, user_id: str, column: str, value: str) -> Optional[Reaction]:
        stmt = select(Reaction).where(Reaction.user_id == user_id, getattr(Reaction, column) == value)
        return self.session.scalars(stmt).first()

    def upsert(self, *, user_id: str, type: str, column: str, value: str) -> Reaction:
        entity = self.find(user_id, column, value)
        if entity is None:
            entity = Reaction(user_id=user_id, type=type, **{column: value})
            self.session.add(entity)
        else:
            entity.type = type
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def remove(self, user_id: str, column: str, value: str) -> bool:
        res = self.session.execute(
            delete(Reaction).where(Reaction.user_id == user_id, getattr(Reaction, column) == value)
        )
        self.session.commit()
        return bool(res.rowcount)

    def list_by_target(self, column: str, value: str) -> list[Reaction]:
        stmt = select(Reaction).where(getattr(Reaction, column) == value).order_by(Reaction.created_at)
        return list(self.session.scalars(stmt).all())

    def list_by_user(self, user_id: str) -> list[Reaction]:
        stmt = select(Reaction).where(Reaction.user_id == user_id).order_by(Reaction.created_at.desc())
        return list(self.session.scalars(stmt).all())
