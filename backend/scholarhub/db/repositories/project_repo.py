"""Projects and collaborators."""
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..models.project import Project, ProjectCollaborator
from ..models.user import User

PROJECT_FIELDS = {"title", "description", "status", "group_id"}


class ProjectRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, project_id: str) -> Optional[Project]:
        return self.session.get(Project, project_id)

    def list(self, *, creator_id: str | None = None, group_id: str | None = None) -> list[Project]:
        stmt = select(Project).order_by(Project.created_at.desc())
        if creator_id:
            stmt = stmt.where(Project.creator_id == creator_id)
        if group_id:
            stmt = stmt.where(Project.group_id == group_id)
        return list(self.session.scalars(stmt).all())

    def create(self, *, creator_id: str, **fields: Any) -> Project:
        entity = Project(creator_id=creator_id, **{k: v for k, v in fields.items() if k in PROJECT_FIELDS})
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def update(self, project_id: str, **fields: Any) -> Optional[Project]:
        entity = self.get(project_id)
        if not entity:
            return None
        for k, v in fields.items():
            if k in PROJECT_FIELDS:
                setattr(entity, k, v)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, project_id: str) -> bool:
        entity = self.get(project_id)
        if not entity:
            return False
        self.session.delete(entity)
        self.session.commit()
        return True

    # --- collaborators ---------------------------------------------------

    def add_collaborator(self, project_id: str, user_id: str, role: str = "collaborator") -> ProjectCollaborator:
        c = self.session.get(ProjectCollaborator, (project_id, user_id))
        if c is None:
            c = ProjectCollaborator(project_id=project_id, user_id=user_id, role=role)
            self.session.add(c)
        else:
            c.role = role
        self.session.commit()
        return c

    def remove_collaborator(self, project_id: str, user_id: str) -> bool:
        res = self.session.execute(
            delete(ProjectCollaborator).where(
                ProjectCollaborator.project_id == project_id, ProjectCollaborator.user_id == user_id
            )
        )
        self.session.commit()
        return bool(res.rowcount)

    def collaborators(self, project_id: str) -> list[tuple[User, str]]:
        stmt = (
            select(User, ProjectCollaborator.role)
            .join(ProjectCollaborator, ProjectCollaborator.user_id == User.id)
            .where(ProjectCollaborator.project_id == project_id)
            .order_by(ProjectCollaborator.joined_at)
        )
        return [(u, role) for u, role in self.session.execute(stmt).all()]
