"""User service encapsulating account and profile rules."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from loguru import logger
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from ..db.models.user import User
from ..db.repositories.user_repo import UserRepository
from ..errors import ConflictError, ForbiddenError, NotFoundError, UnauthorizedError

REQUIRED_FIELDS = {"username", "password", "name", "email", "department", "designation"}


class UserService:
    def __init__(self, session: Session) -> None:
        self.repo = UserRepository(session)

    def list_users(self) -> Iterable[User]:
        return self.repo.list()

    def get_user(self, user_id: str) -> Optional[User]:
        return self.repo.get(user_id)

    def require_user(self, user_id: str) -> User:
        user = self.repo.get(user_id)
        if not user:
            raise NotFoundError(f"user {user_id} not found")
        return user

    def register(self, *, password: str, is_admin: bool = False, **fields: Any) -> User:
        self._ensure_unique(username=fields.get("username"), email=fields.get("email"))
        user = self.repo.create(
            password_hash=generate_password_hash(password),
            is_admin=is_admin,
            **fields,
        )
        logger.info("user registered: id={} admin={}", user.id, is_admin)
        return user

    def authenticate(self, username: str, password: str) -> User:
        user = self.repo.get_by_username(username)
        if not user or not check_password_hash(user.password_hash, password):
            raise UnauthorizedError("invalid username or password")
        return user

    def update_user(self, actor_id: str, actor_is_admin: bool, user_id: str, **fields: Any) -> User:
        self.require_user(user_id)
        if actor_id != user_id and not actor_is_admin:
            raise ForbiddenError("cannot edit another user's profile")
        fields = {k: v for k, v in fields.items() if v is not None or k not in REQUIRED_FIELDS}
        self._ensure_unique(username=fields.get("username"), email=fields.get("email"), exclude_id=user_id)
        password = fields.pop("password", None)
        if password:
            fields["password_hash"] = generate_password_hash(password)
        user = self.repo.update(user_id, **fields)
        logger.info("user updated: id={} fields={}", user_id, sorted(k for k in fields if k != "password_hash"))
        return user  # type: ignore[return-value]

    def delete_user(self, actor_id: str, actor_is_admin: bool, user_id: str) -> bool:
        if actor_id != user_id and not actor_is_admin:
            raise ForbiddenError("cannot delete another user")
        deleted = self.repo.delete(user_id)
        if deleted:
            logger.info("user deleted: id={}", user_id)
        return deleted

    def _ensure_unique(self, *, username: str | None, email: str | None, exclude_id: str | None = None) -> None:
        if username:
            other = self.repo.get_by_username(username)
            if other and other.id != exclude_id:
                raise ConflictError("username already exists")
        if email:
            other = self.repo.get_by_email(email)
            if other and other.id != exclude_id:
                raise ConflictError("email already exists")
