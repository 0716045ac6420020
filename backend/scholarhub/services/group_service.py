"""Research group and project rules."""
from __future__ import annotations

from typing import Any, Iterable, Optional

from loguru import logger
from sqlalchemy.orm import Session

from ..db.models.group import ResearchGroup
from ..db.models.project import Project
from ..db.models.user import User
from ..db.repositories.group_repo import ResearchGroupRepository
from ..db.repositories.project_repo import ProjectRepository
from ..db.repositories.user_repo import UserRepository
from ..errors import ForbiddenError, NotFoundError

GROUP_ADMIN = "admin"


class ResearchGroupService:
    def __init__(self, session: Session) -> None:
        self.repo = ResearchGroupRepository(session)
        self.projects = ProjectRepository(session)
        self.users = UserRepository(session)

    def list_groups(self) -> Iterable[ResearchGroup]:
        return self.repo.list()

    def require_group(self, group_id: str) -> ResearchGroup:
        group = self.repo.get(group_id)
        if not group:
            raise NotFoundError(f"research group {group_id} not found")
        return group

    def create_group(self, creator_id: str, *, name: str, description: str | None = None, is_public: bool = True) -> ResearchGroup:
        group = self.repo.create(creator_id=creator_id, name=name, description=description, is_public=is_public)
        logger.info("research group created: id={} creator={}", group.id, creator_id)
        return group

    def update_group(self, actor_id: str, actor_is_admin: bool, group_id: str, **fields: Any) -> ResearchGroup:
        self._require_manager(actor_id, actor_is_admin, group_id)
        group = self.repo.update(group_id, **fields)
        logger.info("research group updated: id={} fields={}", group_id, sorted(fields))
        return group  # type: ignore[return-value]

    def delete_group(self, actor_id: str, actor_is_admin: bool, group_id: str) -> bool:
        group = self.require_group(group_id)
        if group.creator_id != actor_id and not actor_is_admin:
            raise ForbiddenError("only the creator can delete a research group")
        logger.info("research group deleted: id={}", group_id)
        return self.repo.delete(group_id)

    def members(self, group_id: str) -> list[tuple[User, str]]:
        self.require_group(group_id)
        return self.repo.members(group_id)

    def add_member(
        self,
        actor_id: str,
        actor_is_admin: bool,
        group_id: str,
        user_id: Optional[str] = None,
        role: str = "member",
    ) -> tuple[str, str]:
        """Join the group yourself, or (as a group admin) add someone else.

        Returns ``(user_id, role)`` as stored. Re-joining a group you already
        belong to leaves the existing role untouched.
        """
        group = self.require_group(group_id)
        target = user_id or actor_id
        if target == actor_id and role == "member":
            current = self.repo.membership_role(group_id, actor_id)
            if current is not None:
                return actor_id, current
        if target != actor_id or role != "member":
            self._require_manager(actor_id, actor_is_admin, group_id)
        elif not group.is_public and not actor_is_admin:
            raise ForbiddenError("private groups can only be joined by invitation")
        if not self.users.get(target):
            raise NotFoundError(f"user {target} not found")
        self.repo.add_member(group_id, target, role)
        logger.info("group member added: group={} user={} role={}", group_id, target, role)
        return target, role

    def remove_member(self, actor_id: str, actor_is_admin: bool, group_id: str, user_id: str) -> bool:
        self.require_group(group_id)
        if user_id != actor_id:
            self._require_manager(actor_id, actor_is_admin, group_id)
        return self.repo.remove_member(group_id, user_id)

    def projects_of(self, group_id: str) -> list[Project]:
        self.require_group(group_id)
        return self.projects.list(group_id=group_id)

    def _require_manager(self, actor_id: str, actor_is_admin: bool, group_id: str) -> ResearchGroup:
        group = self.require_group(group_id)
        if actor_is_admin or group.creator_id == actor_id:
            return group
        if self.repo.membership_role(group_id, actor_id) == GROUP_ADMIN:
            return group
        raise ForbiddenError("group admin rights required")


class ProjectService:
    def __init__(self, session: Session) -> None:
        self.repo = ProjectRepository(session)
        self.groups = ResearchGroupRepository(session)
        self.users = UserRepository(session)

    def list_projects(self, user_id: str | None = None) -> list[Project]:
        return self.repo.list(creator_id=user_id)

    def require_project(self, project_id: str) -> Project:
        project = self.repo.get(project_id)
        if not project:
            raise NotFoundError(f"project {project_id} not found")
        return project

    def create_project(self, creator_id: str, **fields: Any) -> Project:
        group_id = fields.get("group_id")
        if group_id and not self.groups.get(group_id):
            raise NotFoundError(f"research group {group_id} not found")
        project = self.repo.create(creator_id=creator_id, **fields)
        logger.info("project created: id={} creator={} group={}", project.id, creator_id, group_id)
        return project

    def update_project(self, actor_id: str, actor_is_admin: bool, project_id: str, **fields: Any) -> Project:
        self._require_owner(actor_id, actor_is_admin, project_id)
        group_id = fields.get("group_id")
        if group_id and not self.groups.get(group_id):
            raise NotFoundError(f"research group {group_id} not found")
        project = self.repo.update(project_id, **fields)
        logger.info("project updated: id={} fields={}", project_id, sorted(fields))
        return project  # type: ignore[return-value]

    def delete_project(self, actor_id: str, actor_is_admin: bool, project_id: str) -> bool:
        self._require_owner(actor_id, actor_is_admin, project_id)
        logger.info("project deleted: id={}", project_id)
        return self.repo.delete(project_id)

    def collaborators(self, project_id: str) -> list[tuple[User, str]]:
        self.require_project(project_id)
        return self.repo.collaborators(project_id)

    def add_collaborator(
        self, actor_id: str, actor_is_admin: bool, project_id: str, user_id: str, role: str = "collaborator"
    ) -> None:
        self._require_owner(actor_id, actor_is_admin, project_id)
        if not self.users.get(user_id):
            raise NotFoundError(f"user {user_id} not found")
        self.repo.add_collaborator(project_id, user_id, role)
        logger.info("collaborator added: project={} user={} role={}", project_id, user_id, role)

    def remove_collaborator(self, actor_id: str, actor_is_admin: bool, project_id: str, user_id: str) -> bool:
        if user_id != actor_id:
            self._require_owner(actor_id, actor_is_admin, project_id)
        else:
            self.require_project(project_id)
        return self.repo.remove_collaborator(project_id, user_id)

    def _require_owner(self, actor_id: str, actor_is_admin: bool, project_id: str) -> Project:
        project = self.require_project(project_id)
        if project.creator_id != actor_id and not actor_is_admin:
            raise ForbiddenError("project belongs to another user")
        return project
