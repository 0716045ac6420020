"""Docs blueprint: /openapi.json, /docs (Swagger UI), /redoc."""
from __future__ import annotations

from flask import Blueprint, Response, jsonify

from .openapi import build_openapi

bp = Blueprint("docs", __name__)

SWAGGER_ASSETS = "https://unpkg.com/swagger-ui-dist@5"
REDOC_BUNDLE = "https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.js"


def _page(title: str, head: str, body: str) -> Response:
    html = f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>{title}</title>
  {head}
</head>
<body>
  {body}
</body>
</html>
"""
    return Response(html, mimetype="text/html")


@bp.get("/openapi.json")
def openapi_json() -> Response:
    return jsonify(build_openapi())


@bp.get("/docs")
def swagger_ui() -> Response:
    return _page(
        "ScholarHub API",
        f'<link rel="stylesheet" href="{SWAGGER_ASSETS}/swagger-ui.css" />'
        "<style>body{margin:0;} #swagger-ui{height:100vh;}</style>",
        '<div id="swagger-ui"></div>'
        f'<script src="{SWAGGER_ASSETS}/swagger-ui-bundle.js"></script>'
        "<script>window.ui = SwaggerUIBundle({ url: '/openapi.json', dom_id: '#swagger-ui' });</script>",
    )


@bp.get("/redoc")
def redoc() -> Response:
    return _page(
        "ScholarHub ReDoc",
        f'<style>body{{margin:0;}} #redoc{{height:100vh;}}</style><script src="{REDOC_BUNDLE}"></script>',
        '<redoc spec-url="/openapi.json"></redoc>',
    )
