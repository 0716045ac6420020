"""Follow edges and friend requests."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.orm import Session

from ..models.social import Follower, FriendRequest
from ..models.user import User


class SocialRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    # --- follows -------------------------------------------------------

    def is_following(self, follower_id: str, following_id: str) -> bool:
        stmt = select(Follower.id).where(
            Follower.follower_id == follower_id, Follower.following_id == following_id
        )
        return self.session.scalars(stmt).first() is not None

    def follow(self, follower_id: str, following_id: str) -> None:
        self.session.add(Follower(follower_id=follower_id, following_id=following_id))
        self.session.commit()

    def unfollow(self, follower_id: str, following_id: str) -> bool:
        res = self.session.execute(
            delete(Follower).where(
                Follower.follower_id == follower_id, Follower.following_id == following_id
            )
        )
        self.session.commit()
        return bool(res.rowcount)

    def followers_of(self, user_id: str) -> list[User]:
        stmt = (
            select(User)
            .join(Follower, Follower.follower_id == User.id)
            .where(Follower.following_id == user_id)
            .order_by(Follower.created_at.desc())
        )
        return list(self.session.scalars(stmt).all())

    def following_of(self, user_id: str) -> list[User]:
        stmt = (
            select(User)
            .join(Follower, Follower.following_id == User.id)
            .where(Follower.follower_id == user_id)
            .order_by(Follower.created_at.desc())
        )
        return list(self.session.scalars(stmt).all())

    # --- friend requests -------------------------------------------------

    def get_request(self, request_id: str) -> Optional[FriendRequest]:
        return self.session.get(FriendRequest, request_id)

    def pending_between(self, a: str, b: str) -> Optional[FriendRequest]:
        stmt = select(FriendRequest).where(
            FriendRequest.status == "pending",
            or_(
                and_(FriendRequest.sender_id == a, FriendRequest.receiver_id == b),
                and_(FriendRequest.sender_id == b, FriendRequest.receiver_id == a),
            ),
        )
        return self.session.scalars(stmt).first()

    def create_request(self, sender_id: str, receiver_id: str) -> FriendRequest:
        entity = FriendRequest(sender_id=sender_id, receiver_id=receiver_id, status="pending")
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def set_request_status(self, request_id: str, status: str) -> Optional[FriendRequest]:
        entity = self.get_request(request_id)
        if not entity:
            return None
        entity.status = status
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def sent_requests(self, user_id: str) -> list[tuple[FriendRequest, User]]:
        stmt = (
            select(FriendRequest, User)
            .join(User, User.id == FriendRequest.receiver_id)
            .where(FriendRequest.sender_id == user_id)
            .order_by(FriendRequest.created_at.desc())
        )
        return [(r, u) for r, u in self.session.execute(stmt).all()]

    def received_requests(self, user_id: str) -> list[tuple[FriendRequest, User]]:
        stmt = (
            select(FriendRequest, User)
            .join(User, User.id == FriendRequest.sender_id)
            .where(FriendRequest.receiver_id == user_id)
            .order_by(FriendRequest.created_at.desc())
        )
        return [(r, u) for r, u in self.session.execute(stmt).all()]
