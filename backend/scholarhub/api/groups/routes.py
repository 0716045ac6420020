"""Research groups blueprint (CRUD, memberships, group projects)."""
from __future__ import annotations

from flask import Blueprint, request

from ...auth.jwt import current_is_admin, current_user_id, require_bearer
from ...db.session import db
from ...errors import ok
from ...services.group_service import ResearchGroupService
from ..projects.schemas import project_out
from ..users.schemas import user_out
from .schemas import GroupCreateIn, GroupUpdateIn, MemberIn, group_out


bp = Blueprint("research_groups", __name__)


def _service() -> ResearchGroupService:
    return ResearchGroupService(db.session())


@bp.get("/")
def list_groups():
    return ok([group_out(g) for g in _service().list_groups()])


@bp.post("/")
@require_bearer
def create_group():
    payload = GroupCreateIn.model_validate_json(request.data)
    group = _service().create_group(current_user_id(), **payload.model_dump())
    return ok(group_out(group), 201)


@bp.get("/<group_id>")
def get_group(group_id: str):
    return ok(group_out(_service().require_group(group_id)))


@bp.put("/<group_id>")
@require_bearer
def update_group(group_id: str):
    payload = GroupUpdateIn.model_validate_json(request.data)
    fields = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None or k == "description"}
    group = _service().update_group(current_user_id(), current_is_admin(), group_id, **fields)
    return ok(group_out(group))


@bp.delete("/<group_id>")
@require_bearer
def delete_group(group_id: str):
    ok_ = _service().delete_group(current_user_id(), current_is_admin(), group_id)
    return ok({"deleted": ok_})


@bp.get("/<group_id>/members")
def list_members(group_id: str):
    members = _service().members(group_id)
    return ok([{"user": user_out(u), "role": role} for u, role in members])


@bp.post("/<group_id>/members")
@require_bearer
def add_member(group_id: str):
    payload = MemberIn.model_validate_json(request.data or b"{}")
    user_id, role = _service().add_member(
        current_user_id(), current_is_admin(), group_id, user_id=payload.user_id, role=payload.role
    )
    return ok({"group_id": group_id, "user_id": user_id, "role": role}, 201)


@bp.delete("/<group_id>/members/<user_id>")
@require_bearer
def remove_member(group_id: str, user_id: str):
    ok_ = _service().remove_member(current_user_id(), current_is_admin(), group_id, user_id)
    return ok({"removed": ok_})


@bp.get("/<group_id>/projects")
def list_group_projects(group_id: str):
    return ok([project_out(p) for p in _service().projects_of(group_id)])
