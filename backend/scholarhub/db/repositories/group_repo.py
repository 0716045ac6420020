"""Research groups and memberships."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..models.group import GroupMembership, ResearchGroup
from ..models.user import User

GROUP_FIELDS = {"name", "description", "is_public"}


class ResearchGroupRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Iterable[ResearchGroup]:
        stmt = select(ResearchGroup).order_by(ResearchGroup.created_at.desc())
        return self.session.scalars(stmt).all()

    def get(self, group_id: str) -> Optional[ResearchGroup]:
        return self.session.get(ResearchGroup, group_id)

    def create(self, *, creator_id: str, name: str, description: str | None, is_public: bool) -> ResearchGroup:
        entity = ResearchGroup(creator_id=creator_id, name=name, description=description, is_public=is_public)
        self.session.add(entity)
        self.session.flush()
        self.session.add(GroupMembership(group_id=entity.id, user_id=creator_id, role="admin"))
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def update(self, group_id: str, **fields: Any) -> Optional[ResearchGroup]:
        entity = self.get(group_id)
        if not entity:
            return None
        for k, v in fields.items():
            if k in GROUP_FIELDS:
                setattr(entity, k, v)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, group_id: str) -> bool:
        entity = self.get(group_id)
        if not entity:
            return False
        self.session.delete(entity)
        self.session.commit()
        return True

    # --- memberships -----------------------------------------------------

    def membership_role(self, group_id: str, user_id: str) -> Optional[str]:
        m = self.session.get(GroupMembership, (group_id, user_id))
        return m.role if m else None

    def add_member(self, group_id: str, user_id: str, role: str = "member") -> GroupMembership:
        m = self.session.get(GroupMembership, (group_id, user_id))
        if m is None:
            m = GroupMembership(group_id=group_id, user_id=user_id, role=role)
            self.session.add(m)
        else:
            m.role = role
        self.session.commit()
        return m

    def remove_member(self, group_id: str, user_id: str) -> bool:
        res = self.session.execute(
            delete(GroupMembership).where(
                GroupMembership.group_id == group_id, GroupMembership.user_id == user_id
            )
        )
        self.session.commit()
        return bool(res.rowcount)

    def members(self, group_id: str) -> list[tuple[User, str]]:
        stmt = (
            select(User, GroupMembership.role)
            .join(GroupMembership, GroupMembership.user_id == User.id)
            .where(GroupMembership.group_id == group_id)
            .order_by(GroupMembership.joined_at)
        )
        return [(u, role) for u, role in self.session.execute(stmt).all()]
