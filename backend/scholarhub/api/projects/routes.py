"""Projects blueprint (CRUD and collaborators)."""
from __future__ import annotations

from flask import Blueprint, request

from ...auth.jwt import current_is_admin, current_user_id, require_bearer
from ...db.session import db
from ...errors import ok
from ...services.group_service import ProjectService
from ..users.schemas import user_out
from .schemas import CollaboratorIn, ProjectCreateIn, ProjectUpdateIn, project_out


bp = Blueprint("projects", __name__)


def _service() -> ProjectService:
    return ProjectService(db.session())


@bp.get("/")
def list_projects():
    user_id = request.args.get("user_id")
    return ok([project_out(p) for p in _service().list_projects(user_id)])


@bp.post("/")
@require_bearer
def create_project():
    payload = ProjectCreateIn.model_validate_json(request.data)
    project = _service().create_project(current_user_id(), **payload.model_dump())
    return ok(project_out(project), 201)


@bp.get("/<project_id>")
def get_project(project_id: str):
    return ok(project_out(_service().require_project(project_id)))


@bp.put("/<project_id>")
@require_bearer
def update_project(project_id: str):
    payload = ProjectUpdateIn.model_validate_json(request.data)
    fields = {
        k: v
        for k, v in payload.model_dump(exclude_unset=True).items()
        if v is not None or k in {"description", "group_id"}
    }
    project = _service().update_project(current_user_id(), current_is_admin(), project_id, **fields)
    return ok(project_out(project))


@bp.delete("/<project_id>")
@require_bearer
def delete_project(project_id: str):
    ok_ = _service().delete_project(current_user_id(), current_is_admin(), project_id)
    return ok({"deleted": ok_})


@bp.get("/<project_id>/collaborators")
def list_collaborators(project_id: str):
    rows = _service().collaborators(project_id)
    return ok([{"user": user_out(u), "role": role} for u, role in rows])


@bp.post("/<project_id>/collaborators")
@require_bearer
def add_collaborator(project_id: str):
    payload = CollaboratorIn.model_validate_json(request.data)
    _service().add_collaborator(current_user_id(), current_is_admin(), project_id, payload.user_id, payload.role)
    return ok({"project_id": project_id, "user_id": payload.user_id, "role": payload.role}, 201)


@bp.delete("/<project_id>/collaborators/<user_id>")
@require_bearer
def remove_collaborator(project_id: str, user_id: str):
    ok_ = _service().remove_collaborator(current_user_id(), current_is_admin(), project_id, user_id)
    return ok({"removed": ok_})
