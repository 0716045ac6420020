from __future__ import annotations

import pytest

from scholarhub.domain.publication import Publication
from scholarhub.errors import BadRequestError
from scholarhub.summary import UnsupportedFormatError, format_summary_text, generate_publication_summary, group_publications

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

PUBS = [
    Publication(id="1", title="A", type="Article", authors="X", venue="V1", year=2023,
                abstract="", keywords="", user_id="u1", doi=None),
    Publication(id="2", title="B", type="Article", authors="Y", venue="V2", year=2021,
                abstract="", keywords="", user_id="u1", doi="10.1/xyz"),
]


@pytest.mark.parametrize("fmt", ["pdf", "PDF", "Pdf"])
def test_pdf_is_case_insensitive(fmt: str) -> None:
    artifact = generate_publication_summary(PUBS, fmt, "year")
    assert artifact.content_type == "application/pdf"
    assert artifact.extension == "pdf"
    assert artifact.filename == "publications_summary.pdf"


def test_pdf_and_word_share_the_text_body() -> None:
    pdf = generate_publication_summary(PUBS, "pdf", "year")
    word = generate_publication_summary(PUBS, "Word", "year")

    assert word.content_type == DOCX
    assert word.extension == "docx"
    assert pdf.content == word.content
    assert pdf.content.decode("utf-8") == format_summary_text(group_publications(PUBS, "year"))


def test_web_returns_html() -> None:
    artifact = generate_publication_summary(PUBS, "WEB", "year")
    html = artifact.content.decode("utf-8")

    assert artifact.content_type == "text/html"
    assert artifact.extension == "html"
    assert html.count("<h2>") == 2
    assert html.index("<h2>2023</h2>") < html.index("<h2>2021</h2>")
    assert 'href="https://doi.org/10.1/xyz"' in html


@pytest.mark.parametrize("fmt", ["xml", "", "docx", "html"])
def test_unsupported_format_raises(fmt: str) -> None:
    with pytest.raises(UnsupportedFormatError) as exc:
        generate_publication_summary(PUBS, fmt, "year")
    assert isinstance(exc.value, BadRequestError)
    assert exc.value.status_code == 400
    assert exc.value.message == f"Unsupported format: {fmt}"


@pytest.mark.parametrize("fmt", ["pdf", "word", "web"])
def test_output_is_repeatable(fmt: str) -> None:
    first = generate_publication_summary(PUBS, fmt, "area")
    second = generate_publication_summary(list(PUBS), fmt, "area")
    assert first == second


def test_artifact_is_immutable() -> None:
    artifact = generate_publication_summary([], "pdf", "year")
    with pytest.raises(AttributeError):
        artifact.extension = "txt"  # type: ignore[misc]
