"""Serialize grouped publications into downloadable representations.

The ``pdf`` and ``word`` variants currently emit the plain-text summary under
the PDF / DOCX content types; no binary document structure is produced.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from jinja2 import Environment

from .grouping import GroupedPublications

SUMMARY_TITLE = "Publications Summary"
DOI_RESOLVER = "https://doi.org/"


@dataclass(frozen=True, slots=True)
class SummaryArtifact:
    content: bytes
    content_type: str
    extension: str

    @property
    def filename(self) -> str:
        return f"publications_summary.{self.extension}"


def format_summary_text(grouped: GroupedPublications) -> str:
    lines = [SUMMARY_TITLE, ""]
    for group, publications in grouped.items():
        lines += [group, "-" * len(group), ""]
        for pub in publications:
            lines.append(pub.title)
            lines.append(f"Authors: {pub.authors}")
            lines.append(f"{pub.venue}, {pub.year}")
            if pub.doi:
                lines.append(f"DOI: {pub.doi}")
            lines.append("")
    return "\n".join(lines) + "\n"


_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

_HTML_TEMPLATE = _env.from_string(
    """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <style>
    body { font-family: system-ui; max-width: 800px; margin: 2rem auto; padding: 0 1rem; }
    h1 { color: #1a365d; }
    h2 { color: #2c5282; border-bottom: 2px solid #e2e8f0; padding-bottom: 0.5rem; }
    .publication { margin-bottom: 1.5rem; }
    .title { font-weight: bold; margin-bottom: 0.5rem; }
    .metadata { color: #4a5568; }
    .doi { color: #2b6cb0; text-decoration: none; }
    .doi:hover { text-decoration: underline; }
  </style>
</head>
<body>
  <h1>{{ title }}</h1>
{% for group, publications in grouped.items() %}
  <h2>{{ group }}</h2>
{% for pub in publications %}
  <div class="publication">
    <div class="title">{{ pub.title }}</div>
    <div class="metadata">
      {{ pub.authors }}<br>
      {{ pub.venue }}, {{ pub.year }}
{% if pub.doi %}
      <br><a href="{{ doi_resolver }}{{ pub.doi }}" class="doi">DOI: {{ pub.doi }}</a>
{% endif %}
    </div>
  </div>
{% endfor %}
{% endfor %}
</body>
</html>
"""
)


def render_html(grouped: GroupedPublications) -> str:
    return _HTML_TEMPLATE.render(title=SUMMARY_TITLE, grouped=grouped, doi_resolver=DOI_RESOLVER)


def render_pdf(grouped: GroupedPublications) -> SummaryArtifact:
    return SummaryArtifact(
        content=format_summary_text(grouped).encode("utf-8"),
        content_type="application/pdf",
        extension="pdf",
    )


def render_word(grouped: GroupedPublications) -> SummaryArtifact:
    return SummaryArtifact(
        content=format_summary_text(grouped).encode("utf-8"),
        content_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        extension="docx",
    )


def render_web(grouped: GroupedPublications) -> SummaryArtifact:
    return SummaryArtifact(
        content=render_html(grouped).encode("utf-8"),
        content_type="text/html",
        extension="html",
    )


RENDERERS: Dict[str, Callable[[GroupedPublications], SummaryArtifact]] = {
    "pdf": render_pdf,
    "word": render_word,
    "web": render_web,
}
