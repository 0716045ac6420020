"""Shared fixtures: an app bound to a fresh in-memory database per test."""
from __future__ import annotations

import itertools
from typing import Any, Callable, Dict, Tuple

import pytest
from flask import Flask
from flask.testing import FlaskClient

from scholarhub import create_app
from scholarhub.config import TestingConfig

_counter = itertools.count(1)


@pytest.fixture
def app() -> Flask:
    return create_app(TestingConfig)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client: FlaskClient) -> Callable[..., Tuple[Dict[str, Any], Dict[str, str]]]:
    """Register a user through the API and return ``(user, auth headers)``."""

    def _register(**overrides: Any) -> Tuple[Dict[str, Any], Dict[str, str]]:
        n = next(_counter)
        body = {
            "username": f"researcher{n}",
            "password": "s3cret-pass",
            "name": f"Researcher {n}",
            "email": f"researcher{n}@example.edu",
            "department": "Computer Science",
            "designation": "Assistant Professor",
        }
        body.update(overrides)
        resp = client.post("/api/auth/register", json=body)
        assert resp.status_code == 201, resp.get_json()
        data = resp.get_json()["data"]
        return data["user"], auth_headers(data["token"])

    return _register


@pytest.fixture
def admin_headers(client: FlaskClient) -> Dict[str, str]:
    resp = client.post(
        "/api/admin/register",
        json={
            "username": "site-admin",
            "password": "admin-pass",
            "name": "Site Admin",
            "email": "admin@example.edu",
            "department": "IT",
            "designation": "Administrator",
            "admin_secret": TestingConfig.ADMIN_SECRET,
        },
    )
    assert resp.status_code == 201, resp.get_json()
    return auth_headers(resp.get_json()["data"]["token"])


def publication_body(**overrides: Any) -> Dict[str, Any]:
    body = {
        "title": "Graph Neural Networks for Citation Analysis",
        "type": "Journal Article",
        "authors": "A. Researcher, B. Coauthor",
        "venue": "Journal of Informetrics",
        "year": 2023,
        "doi": "10.1016/j.joi.2023.101",
        "abstract": "We study citation graphs.",
        "keywords": "graphs, citations, bibliometrics",
        "research_area": "Machine Learning",
    }
    body.update(overrides)
    return body


@pytest.fixture
def make_publication(client: FlaskClient) -> Callable[..., Dict[str, Any]]:
    def _make(headers: Dict[str, str], **overrides: Any) -> Dict[str, Any]:
        resp = client.post("/api/publications/", json=publication_body(**overrides), headers=headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _make
