"""Health check endpoints."""
from __future__ import annotations

from flask import Blueprint
from sqlalchemy import text

from ...db.session import db
from ...errors import ok


bp = Blueprint("health", __name__)


@bp.get("/")
def alive():
    return ok({"status": "ok"})


@bp.get("/db")
def database_status():
    db.session().execute(text("SELECT 1"))
    return ok({"database": "ok"})
