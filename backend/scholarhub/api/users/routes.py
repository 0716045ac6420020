"""Users blueprint (profile CRUD and follow graph)."""
from __future__ import annotations

from flask import Blueprint, request

from ...auth.jwt import current_is_admin, current_user_id, require_bearer
from ...db.session import db
from ...errors import NotFoundError, ok
from ...services.social_service import SocialService
from ...services.user_service import UserService
from .schemas import UserUpdateIn, user_out


bp = Blueprint("users", __name__)


def _service() -> UserService:
    return UserService(db.session())


def _social() -> SocialService:
    return SocialService(db.session())


@bp.get("/")
def list_users():
    svc = _service()
    return ok([user_out(u) for u in svc.list_users()])


@bp.get("/<user_id>")
def get_user(user_id: str):
    svc = _service()
    user = svc.get_user(user_id)
    if not user:
        return ok(None, 404)
    return ok(user_out(user))


@bp.put("/<user_id>")
@require_bearer
def update_user(user_id: str):
    payload = UserUpdateIn.model_validate_json(request.data)
    svc = _service()
    fields = payload.model_dump(exclude_unset=True)
    user = svc.update_user(current_user_id(), current_is_admin(), user_id, **fields)
    return ok(user_out(user))


@bp.delete("/<user_id>")
@require_bearer
def delete_user(user_id: str):
    svc = _service()
    if not svc.get_user(user_id):
        raise NotFoundError(f"user {user_id} not found")
    ok_ = svc.delete_user(current_user_id(), current_is_admin(), user_id)
    return ok({"deleted": ok_})


@bp.post("/<user_id>/follow")
@require_bearer
def follow(user_id: str):
    _social().follow(current_user_id(), user_id)
    return ok({"following": True})


@bp.post("/<user_id>/unfollow")
@require_bearer
def unfollow(user_id: str):
    _social().unfollow(current_user_id(), user_id)
    return ok({"following": False})


@bp.get("/<user_id>/followers")
def followers(user_id: str):
    return ok([user_out(u) for u in _social().followers(user_id)])


@bp.get("/<user_id>/following")
def following(user_id: str):
    return ok([user_out(u) for u in _social().following(user_id)])


@bp.get("/<user_id>/is-following")
@require_bearer
def is_following(user_id: str):
    return ok({"following": _social().is_following(current_user_id(), user_id)})
