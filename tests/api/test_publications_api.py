from __future__ import annotations

import pytest

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def test_create_and_fetch(client, register, make_publication) -> None:
    user, headers = register()
    pub = make_publication(headers, pdf_url="", research_area="")

    assert pub["user_id"] == user["id"]
    assert pub["citations"] is None
    assert pub["pdf_url"] is None
    assert pub["research_area"] is None

    resp = client.get(f"/api/publications/{pub['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["title"] == pub["title"]
    assert client.get("/api/publications/missing").status_code == 404


def test_create_requires_auth_and_valid_body(client, register) -> None:
    assert client.post("/api/publications/", json={"title": "x"}).status_code == 401

    _, headers = register()
    resp = client.post("/api/publications/", json={"title": "Only a title"}, headers=headers)
    assert resp.status_code == 422


@pytest.mark.parametrize("year", [999, 10000])
def test_year_must_be_four_digits(client, register, year: int) -> None:
    _, headers = register()
    resp = client.post(
        "/api/publications/",
        json={
            "title": "T", "type": "Article", "authors": "A", "venue": "V",
            "year": year, "abstract": "abs", "keywords": "k",
        },
        headers=headers,
    )
    assert resp.status_code == 422


def test_list_by_user(client, register, make_publication) -> None:
    alice, alice_headers = register()
    _, bob_headers = register()
    make_publication(alice_headers, title="Alice One")
    make_publication(alice_headers, title="Alice Two")
    make_publication(bob_headers, title="Bob One")

    titles = {p["title"] for p in client.get(f"/api/publications/user/{alice['id']}").get_json()["data"]}
    assert titles == {"Alice One", "Alice Two"}
    assert len(client.get("/api/publications/").get_json()["data"]) == 3


def test_search_matches_title_authors_keywords(client, register, make_publication) -> None:
    _, headers = register()
    make_publication(headers, title="Quantum Walks", authors="Q. Person", keywords="physics")
    make_publication(headers, title="Protein Folding", authors="R. Turing", keywords="biology")
    make_publication(headers, title="Other", authors="S. Nobody", keywords="quantum, misc")

    def titles(q: str) -> set:
        return {p["title"] for p in client.get("/api/publications/search", query_string={"q": q}).get_json()["data"]}

    assert titles("QUANTUM") == {"Quantum Walks", "Other"}
    assert titles("turing") == {"Protein Folding"}
    assert titles("") == set()


def test_update_and_delete_are_owner_only(client, register, make_publication) -> None:
    _, owner_headers = register()
    _, other_headers = register()
    pub = make_publication(owner_headers)

    assert client.put(f"/api/publications/{pub['id']}", json={"title": "Hijacked"}, headers=other_headers).status_code == 403
    assert client.delete(f"/api/publications/{pub['id']}", headers=other_headers).status_code == 403

    resp = client.put(
        f"/api/publications/{pub['id']}",
        json={"title": "Renamed", "doi": "", "year": None},
        headers=owner_headers,
    )
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["title"] == "Renamed"
    assert data["doi"] is None
    assert data["year"] == pub["year"]

    assert client.delete(f"/api/publications/{pub['id']}", headers=owner_headers).status_code == 204
    assert client.get(f"/api/publications/{pub['id']}").status_code == 404
    assert client.delete(f"/api/publications/{pub['id']}", headers=owner_headers).status_code == 404


def test_admin_may_edit_any_publication(client, register, admin_headers, make_publication) -> None:
    _, headers = register()
    pub = make_publication(headers)
    resp = client.put(f"/api/publications/{pub['id']}", json={"venue": "Moved"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["venue"] == "Moved"


def test_summary_requires_auth(client) -> None:
    assert client.get("/api/publications/summary").status_code == 401


def test_summary_defaults_to_pdf_by_year(client, register, make_publication) -> None:
    _, headers = register()
    make_publication(headers, title="Older", year=2019, doi=None)
    make_publication(headers, title="Newer", year=2024, doi="10.1/new")

    resp = client.get("/api/publications/summary", headers=headers)
    assert resp.status_code == 200
    assert resp.headers["Content-Type"] == "application/pdf"
    assert resp.headers["Content-Disposition"] == 'attachment; filename="publications_summary.pdf"'

    text = resp.get_data(as_text=True)
    assert text.startswith("Publications Summary\n\n2024\n----\n")
    assert text.index("Newer") < text.index("2019") < text.index("Older")
    assert "DOI: 10.1/new" in text


def test_summary_only_covers_the_caller(client, register, make_publication) -> None:
    _, alice_headers = register()
    _, bob_headers = register()
    make_publication(alice_headers, title="Alice Paper")
    make_publication(bob_headers, title="Bob Paper")

    text = client.get("/api/publications/summary", headers=alice_headers).get_data(as_text=True)
    assert "Alice Paper" in text
    assert "Bob Paper" not in text


def test_summary_word_and_web(client, register, make_publication) -> None:
    _, headers = register()
    make_publication(headers, title="A", year=2023, doi=None, research_area="Robotics")
    make_publication(headers, title="B", year=2021, doi="10.1/xyz", research_area=None)

    word = client.get("/api/publications/summary", query_string={"format": "word"}, headers=headers)
    assert word.headers["Content-Type"] == DOCX
    assert 'filename="publications_summary.docx"' in word.headers["Content-Disposition"]

    web = client.get(
        "/api/publications/summary", query_string={"format": "Web", "filter": "area"}, headers=headers
    )
    assert web.headers["Content-Type"] == "text/html"
    html = web.get_data(as_text=True)
    assert html.index("<h2>Robotics</h2>") < html.index("<h2>Uncategorized</h2>")
    assert 'href="https://doi.org/10.1/xyz"' in html


def test_summary_for_user_without_publications(client, register) -> None:
    _, headers = register()
    resp = client.get("/api/publications/summary", query_string={"format": "pdf"}, headers=headers)
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Publications Summary\n\n"


def test_summary_rejects_unknown_format(client, register) -> None:
    _, headers = register()
    resp = client.get("/api/publications/summary", query_string={"format": "xml"}, headers=headers)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "bad_request", "message": "Unsupported format: xml"}


@pytest.mark.parametrize("q", ["%", "_"])
def test_search_wildcards_match_literally(client, register, make_publication, q: str) -> None:
    _, headers = register()
    make_publication(headers, title="Plain Title", authors="A", keywords="k")
    make_publication(headers, title="Growth of 5% per_year", authors="B", keywords="k")

    found = client.get("/api/publications/search", query_string={"q": q}).get_json()["data"]
    assert [p["title"] for p in found] == ["Growth of 5% per_year"]
