"""Friend requests blueprint."""
from __future__ import annotations

from flask import Blueprint

from ...auth.jwt import current_user_id, require_bearer
from ...db.session import db
from ...errors import ok
from ...services.social_service import SocialService
from ..users.schemas import user_out
from .schemas import request_out


bp = Blueprint("friend_requests", __name__)


def _service() -> SocialService:
    return SocialService(db.session())


@bp.get("/")
@require_bearer
def list_requests():
    grouped = _service().friend_requests(current_user_id())
    return ok({
        "sent": [{"request": request_out(r), "receiver": user_out(u)} for r, u in grouped["sent"]],
        "received": [{"request": request_out(r), "sender": user_out(u)} for r, u in grouped["received"]],
    })


@bp.post("/send/<user_id>")
@require_bearer
def send_request(user_id: str):
    req = _service().send_friend_request(current_user_id(), user_id)
    return ok(request_out(req), 201)


@bp.post("/<request_id>/accept")
@require_bearer
def accept_request(request_id: str):
    req = _service().respond(current_user_id(), request_id, accept=True)
    return ok(request_out(req))


@bp.post("/<request_id>/reject")
@require_bearer
def reject_request(request_id: str):
    req = _service().respond(current_user_id(), request_id, accept=False)
    return ok(request_out(req))
