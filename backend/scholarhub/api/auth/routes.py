"""Registration, login and admin bootstrap endpoints."""
from __future__ import annotations

import hmac

from flask import Blueprint, current_app, request

from ...auth.jwt import current_user_id, issue_token, require_bearer
from ...db.session import db
from ...errors import NotFoundError, UnauthorizedError, ok
from ...services.user_service import UserService
from ..users.schemas import UserCreateIn, user_out
from .schemas import AdminRegisterIn, LoginIn


bp = Blueprint("auth", __name__)
admin_bp = Blueprint("admin", __name__)


def _service() -> UserService:
    return UserService(db.session())


def _session_payload(user) -> dict:
    return {"user": user_out(user), "token": issue_token(user.id, user.is_admin)}


@bp.post("/register")
def register():
    payload = UserCreateIn.model_validate_json(request.data)
    user = _service().register(**payload.model_dump())
    return ok(_session_payload(user), 201)


@bp.post("/login")
def login():
    payload = LoginIn.model_validate_json(request.data)
    user = _service().authenticate(payload.username, payload.password)
    return ok(_session_payload(user))


@bp.get("/me")
@require_bearer
def me():
    user = _service().get_user(current_user_id())
    if not user:
        raise NotFoundError("account no longer exists")
    return ok(user_out(user))


@admin_bp.post("/register")
def register_admin():
    payload = AdminRegisterIn.model_validate_json(request.data)
    expected = current_app.config.get("ADMIN_SECRET")
    if not expected or not hmac.compare_digest(payload.admin_secret, expected):
        raise UnauthorizedError("Invalid admin secret")
    fields = payload.model_dump(exclude={"admin_secret"})
    user = _service().register(is_admin=True, **fields)
    return ok(_session_payload(user), 201)
