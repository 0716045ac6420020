"""Entry point that turns a publication list into a downloadable summary."""
from __future__ import annotations

from typing import Sequence

from loguru import logger

from ..domain.publication import Publication
from ..errors import BadRequestError
from .grouping import SummaryFilter, group_publications
from .rendering import RENDERERS, SummaryArtifact


class UnsupportedFormatError(BadRequestError):
    def __init__(self, requested: str) -> None:
        super().__init__(f"Unsupported format: {requested}")
        self.requested = requested


def generate_publication_summary(
    publications: Sequence[Publication],
    format: str,
    filter: "str | SummaryFilter | None",
) -> SummaryArtifact:
    renderer = RENDERERS.get((format or "").lower())
    if renderer is None:
        raise UnsupportedFormatError(format)

    grouped = group_publications(publications, filter)
    artifact = renderer(grouped)
    logger.debug(
        "summary rendered: format={} groups={} publications={} bytes={}",
        format.lower(), len(grouped), len(publications), len(artifact.content),
    )
    return artifact
