"""JWT helpers and a Flask decorator for Bearer auth."""
from __future__ import annotations

import functools
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict

import jwt
from flask import current_app, g, jsonify, request


def encode(payload: Dict[str, Any]) -> str:
    secret = current_app.config.get("JWT_SECRET", "change-me")
    alg = current_app.config.get("JWT_ALG", "HS256")
    return jwt.encode(payload, secret, algorithm=alg)


def decode(token: str) -> Dict[str, Any]:
    secret = current_app.config.get("JWT_SECRET", "change-me")
    alg = current_app.config.get("JWT_ALG", "HS256")
    return jwt.decode(token, secret, algorithms=[alg])


def issue_token(user_id: str, is_admin: bool = False) -> str:
    ttl = int(current_app.config.get("JWT_EXPIRES_MINUTES", 60 * 24))
    now = datetime.now(timezone.utc)
    return encode({"sub": user_id, "adm": bool(is_admin), "iat": now, "exp": now + timedelta(minutes=ttl)})


def require_bearer(fn: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any):
        auth = request.headers.get("Authorization", "")
        if not auth.startswith("Bearer "):
            return jsonify({"error": "unauthorized", "message": "Missing Bearer token"}), 401
        token = auth.split(" ", 1)[1]
        try:
            claims = decode(token)
        except jwt.PyJWTError as e:
            return jsonify({"error": "unauthorized", "message": str(e)}), 401
        if not claims.get("sub"):
            return jsonify({"error": "unauthorized", "message": "Token has no subject"}), 401
        g.user_id = claims["sub"]
        g.is_admin = bool(claims.get("adm", False))
        return fn(*args, **kwargs)
    return wrapper


def current_user_id() -> str:
    return g.user_id


def current_is_admin() -> bool:
    return bool(getattr(g, "is_admin", False))
