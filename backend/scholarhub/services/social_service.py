"""Follow graph and friend request rules."""
from __future__ import annotations

from loguru import logger
from sqlalchemy.orm import Session

from ..db.models.social import FriendRequest
from ..db.models.user import User
from ..db.repositories.social_repo import SocialRepository
from ..db.repositories.user_repo import UserRepository
from ..errors import BadRequestError, ConflictError, ForbiddenError, NotFoundError


class SocialService:
    def __init__(self, session: Session) -> None:
        self.repo = SocialRepository(session)
        self.users = UserRepository(session)

    def _require_user(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if not user:
            raise NotFoundError(f"user {user_id} not found")
        return user

    def follow(self, follower_id: str, following_id: str) -> None:
        if follower_id == following_id:
            raise BadRequestError("cannot follow yourself")
        self._require_user(following_id)
        if self.repo.is_following(follower_id, following_id):
            return
        self.repo.follow(follower_id, following_id)
        logger.info("follow: {} -> {}", follower_id, following_id)

    def unfollow(self, follower_id: str, following_id: str) -> bool:
        self._require_user(following_id)
        return self.repo.unfollow(follower_id, following_id)

    def is_following(self, follower_id: str, following_id: str) -> bool:
        return self.repo.is_following(follower_id, following_id)

    def followers(self, user_id: str) -> list[User]:
        self._require_user(user_id)
        return self.repo.followers_of(user_id)

    def following(self, user_id: str) -> list[User]:
        self._require_user(user_id)
        return self.repo.following_of(user_id)

    def send_friend_request(self, sender_id: str, receiver_id: str) -> FriendRequest:
        if sender_id == receiver_id:
            raise BadRequestError("cannot send a friend request to yourself")
        self._require_user(receiver_id)
        if self.repo.pending_between(sender_id, receiver_id):
            raise ConflictError("a pending friend request already exists")
        req = self.repo.create_request(sender_id, receiver_id)
        logger.info("friend request sent: id={} {} -> {}", req.id, sender_id, receiver_id)
        return req

    def respond(self, actor_id: str, request_id: str, accept: bool) -> FriendRequest:
        req = self.repo.get_request(request_id)
        if not req:
            raise NotFoundError(f"friend request {request_id} not found")
        if req.receiver_id != actor_id:
            raise ForbiddenError("only the receiver can answer a friend request")
        if req.status != "pending":
            raise ConflictError(f"friend request already {req.status}")
        status = "accepted" if accept else "rejected"
        updated = self.repo.set_request_status(request_id, status)
        logger.info("friend request {}: id={}", status, request_id)
        return updated  # type: ignore[return-value]

    def friend_requests(self, user_id: str) -> dict:
        return {
            "sent": self.repo.sent_requests(user_id),
            "received": self.repo.received_requests(user_id),
        }
