"""Publication summary export: grouping, rendering and format dispatch."""
from .dispatch import UnsupportedFormatError, generate_publication_summary
from .grouping import ALL_PUBLICATIONS, UNCATEGORIZED, SummaryFilter, group_publications
from .rendering import SummaryArtifact, format_summary_text, render_html

__all__ = [
    "ALL_PUBLICATIONS",
    "UNCATEGORIZED",
    "SummaryArtifact",
    "SummaryFilter",
    "UnsupportedFormatError",
    "format_summary_text",
    "generate_publication_summary",
    "group_publications",
    "render_html",
]
