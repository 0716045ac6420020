"""Repository for user data access (CRUD)."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..base import new_id
from ..models.user import User


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Iterable[User]:
        stmt = select(User).order_by(User.created_at.desc())
        return self.session.scalars(stmt).all()

    def get(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        return self.session.scalars(stmt).first()

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        return self.session.scalars(stmt).first()

    def create(self, **fields: Any) -> User:
        entity = User(id=new_id(), **fields)
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def update(self, user_id: str, **fields: Any) -> Optional[User]:
        entity = self.get(user_id)
        if not entity:
            return None
        for k, v in fields.items():
            if hasattr(entity, k):
                setattr(entity, k, v)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, user_id: str) -> bool:
        entity = self.get(user_id)
        if not entity:
            return False
        self.session.delete(entity)
        self.session.commit()
        return True
