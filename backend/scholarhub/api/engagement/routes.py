"""Comments and reactions blueprints."""
from __future__ import annotations

from flask import Blueprint, request

from ...auth.jwt import current_is_admin, current_user_id, require_bearer
from ...db.session import db
from ...errors import ok
from ...services.engagement_service import EngagementService
from .schemas import CommentCreateIn, ReactionIn, ReactionTargetIn, comment_out, reaction_out


comments_bp = Blueprint("comments", __name__)
reactions_bp = Blueprint("reactions", __name__)

COMMENT_FILTERS = ("publication_id", "project_id", "group_id", "parent_id")


def _service() -> EngagementService:
    return EngagementService(db.session())


@comments_bp.get("/")
def list_comments():
    filters = {k: request.args.get(k) for k in COMMENT_FILTERS}
    return ok([comment_out(c) for c in _service().list_comments(**filters)])


@comments_bp.post("/")
@require_bearer
def create_comment():
    payload = CommentCreateIn.model_validate_json(request.data)
    comment = _service().add_comment(current_user_id(), **payload.model_dump())
    return ok(comment_out(comment), 201)


@comments_bp.get("/<comment_id>")
def get_comment(comment_id: str):
    return ok(comment_out(_service().get_comment(comment_id)))


@comments_bp.delete("/<comment_id>")
@require_bearer
def delete_comment(comment_id: str):
    ok_ = _service().delete_comment(current_user_id(), current_is_admin(), comment_id)
    return ok({"deleted": ok_})


@reactions_bp.get("/")
def list_reactions():
    target = ReactionTargetIn.model_validate(request.args.to_dict())
    return ok([reaction_out(r) for r in _service().reactions_for(**target.model_dump())])


@reactions_bp.get("/mine")
@require_bearer
def my_reactions():
    return ok([reaction_out(r) for r in _service().reactions_by(current_user_id())])


@reactions_bp.post("/")
@require_bearer
def add_reaction():
    payload = ReactionIn.model_validate_json(request.data)
    reaction = _service().react(current_user_id(), **payload.model_dump())
    return ok(reaction_out(reaction), 201)


@reactions_bp.delete("/")
@require_bearer
def remove_reaction():
    payload = ReactionTargetIn.model_validate_json(request.data)
    removed = _service().unreact(current_user_id(), **payload.model_dump())
    return ok({"removed": removed})
