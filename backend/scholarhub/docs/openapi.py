"""Builds a minimal OpenAPI spec from existing Pydantic schemas."""
from __future__ import annotations

from typing import Any, Dict, Optional

from flask import request

from ..api.auth.schemas import AdminRegisterIn, LoginIn
from ..api.engagement.schemas import CommentCreateIn, CommentOut, ReactionIn, ReactionOut, ReactionTargetIn
from ..api.groups.schemas import GroupCreateIn, GroupOut, GroupUpdateIn, MemberIn
from ..api.projects.schemas import CollaboratorIn, ProjectCreateIn, ProjectOut, ProjectUpdateIn
from ..api.publications.schemas import PublicationCreateIn, PublicationOut, PublicationUpdateIn
from ..api.social.schemas import FriendRequestOut
from ..api.users.schemas import UserCreateIn, UserOut, UserUpdateIn

_MODELS = (
    UserCreateIn, UserUpdateIn, UserOut, LoginIn, AdminRegisterIn,
    PublicationCreateIn, PublicationUpdateIn, PublicationOut,
    FriendRequestOut,
    GroupCreateIn, GroupUpdateIn, GroupOut, MemberIn,
    ProjectCreateIn, ProjectUpdateIn, ProjectOut, CollaboratorIn,
    CommentCreateIn, CommentOut, ReactionTargetIn, ReactionIn, ReactionOut,
)

SUMMARY_TYPES = {
    "application/pdf": {"schema": {"type": "string", "format": "binary"}},
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": {
        "schema": {"type": "string", "format": "binary"}
    },
    "text/html": {"schema": {"type": "string"}},
}


def _schemas() -> Dict[str, Any]:
    return {
        m.__name__: m.model_json_schema(ref_template="#/components/schemas/{model}")
        for m in _MODELS
    }


def _ref(name: str) -> Dict[str, Any]:
    return {"$ref": f"#/components/schemas/{name}"}


def _path_params(*names: str) -> list[Dict[str, Any]]:
    return [{"name": n, "in": "path", "required": True, "schema": {"type": "string"}} for n in names]


def _op(
    tag: str,
    summary: str,
    *,
    body: Optional[str] = None,
    secured: bool = False,
    status: str = "200",
    out: Optional[str] = None,
    many: bool = False,
) -> Dict[str, Any]:
    response: Dict[str, Any] = {"description": "OK" if status == "200" else "Created"}
    if out:
        schema = {"type": "array", "items": _ref(out)} if many else _ref(out)
        response["content"] = {
            "application/json": {"schema": {"type": "object", "properties": {"data": schema}}}
        }
    op: Dict[str, Any] = {"tags": [tag], "summary": summary, "responses": {status: response}}
    if body:
        op["requestBody"] = {"required": True, "content": {"application/json": {"schema": _ref(body)}}}
    if secured:
        op["security"] = [{"BearerAuth": []}]
        op["responses"]["401"] = {"description": "Missing or invalid bearer token"}
    return op


def build_openapi() -> Dict[str, Any]:
    base_url = f"{request.scheme}://{request.host}"
    security_schemes = {
        "BearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT"
        }
    }
    summary_op = _op("Publications", "Download a grouped summary of the caller's publications", secured=True)
    summary_op["parameters"] = [
        {"name": "format", "in": "query", "schema": {"type": "string", "enum": ["pdf", "word", "web"], "default": "pdf"}},
        {"name": "filter", "in": "query", "schema": {"type": "string", "enum": ["year", "type", "area"], "default": "year"}},
    ]
    summary_op["responses"]["200"]["content"] = SUMMARY_TYPES
    summary_op["responses"]["400"] = {"description": "Unsupported format"}

    return {
        "openapi": "3.0.3",
        "info": {"title": "ScholarHub API", "version": "1.0.0"},
        "servers": [{"url": base_url}],
        "tags": [
            {"name": "Health"},
            {"name": "Auth"},
            {"name": "Users"},
            {"name": "Publications"},
            {"name": "Friend requests"},
            {"name": "Research groups"},
            {"name": "Projects"},
            {"name": "Comments"},
            {"name": "Reactions"},
        ],
        "paths": {
            "/api/health/": {"get": _op("Health", "Liveness probe")},
            "/api/health/db": {"get": _op("Health", "Database connectivity")},
            "/api/auth/register": {"post": _op("Auth", "Register an account", body="UserCreateIn", status="201")},
            "/api/auth/login": {"post": _op("Auth", "Exchange credentials for a token", body="LoginIn")},
            "/api/auth/me": {"get": _op("Auth", "Current account", secured=True, out="UserOut")},
            "/api/admin/register": {
                "post": _op("Auth", "Register an administrator", body="AdminRegisterIn", status="201")
            },
            "/api/users/": {"get": _op("Users", "List users", out="UserOut", many=True)},
            "/api/users/{user_id}": {
                "parameters": _path_params("user_id"),
                "get": _op("Users", "Get user by id", out="UserOut"),
                "put": _op("Users", "Update profile", body="UserUpdateIn", secured=True, out="UserOut"),
                "delete": _op("Users", "Delete user", secured=True),
            },
            "/api/users/{user_id}/follow": {
                "parameters": _path_params("user_id"),
                "post": _op("Users", "Follow user", secured=True),
            },
            "/api/users/{user_id}/unfollow": {
                "parameters": _path_params("user_id"),
                "post": _op("Users", "Unfollow user", secured=True),
            },
            "/api/users/{user_id}/followers": {
                "parameters": _path_params("user_id"),
                "get": _op("Users", "Followers of a user", out="UserOut", many=True),
            },
            "/api/users/{user_id}/following": {
                "parameters": _path_params("user_id"),
                "get": _op("Users", "Users followed by a user", out="UserOut", many=True),
            },
            "/api/users/{user_id}/is-following": {
                "parameters": _path_params("user_id"),
                "get": _op("Users", "Whether the caller follows the user", secured=True),
            },
            "/api/publications/": {
                "get": _op("Publications", "List publications", out="PublicationOut", many=True),
                "post": _op(
                    "Publications", "Create publication",
                    body="PublicationCreateIn", secured=True, status="201", out="PublicationOut",
                ),
            },
            "/api/publications/search": {
                "get": {
                    **_op("Publications", "Search title, authors and keywords", out="PublicationOut", many=True),
                    "parameters": [{"name": "q", "in": "query", "schema": {"type": "string"}}],
                }
            },
            "/api/publications/user/{user_id}": {
                "parameters": _path_params("user_id"),
                "get": _op("Publications", "Publications of a user", out="PublicationOut", many=True),
            },
            "/api/publications/summary": {"get": summary_op},
            "/api/publications/{publication_id}": {
                "parameters": _path_params("publication_id"),
                "get": _op("Publications", "Get publication", out="PublicationOut"),
                "put": _op(
                    "Publications", "Update publication",
                    body="PublicationUpdateIn", secured=True, out="PublicationOut",
                ),
                "delete": _op("Publications", "Delete publication", secured=True, status="204"),
            },
            "/api/friend-requests/": {"get": _op("Friend requests", "Sent and received requests", secured=True)},
            "/api/friend-requests/send/{user_id}": {
                "parameters": _path_params("user_id"),
                "post": _op("Friend requests", "Send request", secured=True, status="201", out="FriendRequestOut"),
            },
            "/api/friend-requests/{request_id}/accept": {
                "parameters": _path_params("request_id"),
                "post": _op("Friend requests", "Accept request", secured=True, out="FriendRequestOut"),
            },
            "/api/friend-requests/{request_id}/reject": {
                "parameters": _path_params("request_id"),
                "post": _op("Friend requests", "Reject request", secured=True, out="FriendRequestOut"),
            },
            "/api/research-groups/": {
                "get": _op("Research groups", "List groups", out="GroupOut", many=True),
                "post": _op("Research groups", "Create group", body="GroupCreateIn", secured=True, status="201", out="GroupOut"),
            },
            "/api/research-groups/{group_id}": {
                "parameters": _path_params("group_id"),
                "get": _op("Research groups", "Get group", out="GroupOut"),
                "put": _op("Research groups", "Update group", body="GroupUpdateIn", secured=True, out="GroupOut"),
                "delete": _op("Research groups", "Delete group", secured=True),
            },
            "/api/research-groups/{group_id}/members": {
                "parameters": _path_params("group_id"),
                "get": _op("Research groups", "List members"),
                "post": _op("Research groups", "Join or add member", body="MemberIn", secured=True, status="201"),
            },
            "/api/research-groups/{group_id}/members/{user_id}": {
                "parameters": _path_params("group_id", "user_id"),
                "delete": _op("Research groups", "Remove member", secured=True),
            },
            "/api/research-groups/{group_id}/projects": {
                "parameters": _path_params("group_id"),
                "get": _op("Research groups", "Projects of a group", out="ProjectOut", many=True),
            },
            "/api/projects/": {
                "get": _op("Projects", "List projects", out="ProjectOut", many=True),
                "post": _op("Projects", "Create project", body="ProjectCreateIn", secured=True, status="201", out="ProjectOut"),
            },
            "/api/projects/{project_id}": {
                "parameters": _path_params("project_id"),
                "get": _op("Projects", "Get project", out="ProjectOut"),
                "put": _op("Projects", "Update project", body="ProjectUpdateIn", secured=True, out="ProjectOut"),
                "delete": _op("Projects", "Delete project", secured=True),
            },
            "/api/projects/{project_id}/collaborators": {
                "parameters": _path_params("project_id"),
                "get": _op("Projects", "List collaborators"),
                "post": _op("Projects", "Add collaborator", body="CollaboratorIn", secured=True, status="201"),
            },
            "/api/projects/{project_id}/collaborators/{user_id}": {
                "parameters": _path_params("project_id", "user_id"),
                "delete": _op("Projects", "Remove collaborator", secured=True),
            },
            "/api/comments/": {
                "get": _op("Comments", "Comments on a target", out="CommentOut", many=True),
                "post": _op("Comments", "Add comment", body="CommentCreateIn", secured=True, status="201", out="CommentOut"),
            },
            "/api/comments/{comment_id}": {
                "parameters": _path_params("comment_id"),
                "get": _op("Comments", "Get comment", out="CommentOut"),
                "delete": _op("Comments", "Delete comment", secured=True),
            },
            "/api/reactions/": {
                "get": _op("Reactions", "Reactions on a target", out="ReactionOut", many=True),
                "post": _op("Reactions", "React to a target", body="ReactionIn", secured=True, status="201", out="ReactionOut"),
                "delete": _op("Reactions", "Remove the caller's reaction", body="ReactionTargetIn", secured=True),
            },
            "/api/reactions/mine": {"get": _op("Reactions", "Caller's reactions", secured=True, out="ReactionOut", many=True)},
        },
        "components": {
            "schemas": _schemas(),
            "securitySchemes": security_schemes
        },
    }
