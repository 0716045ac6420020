"""Publications blueprint (CRUD, search and summary export)."""
from __future__ import annotations

from flask import Blueprint, Response, request

from ...auth.jwt import current_is_admin, current_user_id, require_bearer
from ...db.session import db
from ...errors import ok
from ...services.publication_service import PublicationService
from .schemas import PublicationCreateIn, PublicationUpdateIn, SummaryQuery, publication_out


bp = Blueprint("publications", __name__)

# optional text columns where an empty string means "not set"
NULLABLE_TEXT = ("doi", "pdf_url", "research_area")


def _service() -> PublicationService:
    return PublicationService(db.session())


@bp.get("/")
def list_publications():
    svc = _service()
    return ok([publication_out(p) for p in svc.list_publications()])


@bp.get("/search")
def search_publications():
    query = request.args.get("q", "")
    svc = _service()
    return ok([publication_out(p) for p in svc.search(query)])


@bp.get("/user/<user_id>")
def list_user_publications(user_id: str):
    svc = _service()
    return ok([publication_out(p) for p in svc.list_by_user(user_id)])


@bp.get("/summary")
@require_bearer
def publication_summary():
    query = SummaryQuery.model_validate(request.args.to_dict())
    artifact = _service().summarize(current_user_id(), query.format, query.filter)
    resp = Response(artifact.content, mimetype=artifact.content_type)
    resp.headers["Content-Type"] = artifact.content_type
    resp.headers["Content-Disposition"] = f'attachment; filename="{artifact.filename}"'
    return resp


@bp.post("/")
@require_bearer
def create_publication():
    payload = PublicationCreateIn.model_validate_json(request.data)
    svc = _service()
    pub = svc.create_publication(current_user_id(), **payload.model_dump())
    return ok(publication_out(pub), 201)


@bp.get("/<publication_id>")
def get_publication(publication_id: str):
    svc = _service()
    pub = svc.get_publication(publication_id)
    if not pub:
        return ok(None, 404)
    return ok(publication_out(pub))


@bp.put("/<publication_id>")
@require_bearer
def update_publication(publication_id: str):
    payload = PublicationUpdateIn.model_validate_json(request.data)
    fields = payload.model_dump(exclude_unset=True)
    fields = {
        k: (v or None) if k in NULLABLE_TEXT else v
        for k, v in fields.items()
        if v is not None or k in NULLABLE_TEXT
    }
    svc = _service()
    pub = svc.update_publication(current_user_id(), current_is_admin(), publication_id, **fields)
    return ok(publication_out(pub))


@bp.delete("/<publication_id>")
@require_bearer
def delete_publication(publication_id: str):
    svc = _service()
    svc.delete_publication(current_user_id(), current_is_admin(), publication_id)
    return Response(status=204)
