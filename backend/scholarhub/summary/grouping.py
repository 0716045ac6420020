"""Partition publications into ordered, labelled groups."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Sequence

from ..domain.publication import Publication

UNCATEGORIZED = "Uncategorized"
ALL_PUBLICATIONS = "All Publications"

GroupedPublications = Dict[str, List[Publication]]


class SummaryFilter(str, Enum):
    YEAR = "year"
    TYPE = "type"
    AREA = "area"
    UNFILTERED = "all"

    @classmethod
    def parse(cls, value: "str | SummaryFilter | None") -> "SummaryFilter":
        """Map a request value onto a filter; anything unrecognised is UNFILTERED."""
        if isinstance(value, cls):
            return value
        for member in (cls.YEAR, cls.TYPE, cls.AREA):
            if value == member.value:
                return member
        return cls.UNFILTERED


_KEY_FUNCS: Dict[SummaryFilter, Callable[[Publication], str]] = {
    SummaryFilter.YEAR: lambda p: str(p.year),
    SummaryFilter.TYPE: lambda p: p.type,
    SummaryFilter.AREA: lambda p: p.research_area or UNCATEGORIZED,
    SummaryFilter.UNFILTERED: lambda p: ALL_PUBLICATIONS,
}


def group_key(publication: Publication, summary_filter: SummaryFilter) -> str:
    return _KEY_FUNCS[summary_filter](publication)


def group_publications(
    publications: Sequence[Publication],
    summary_filter: "str | SummaryFilter | None",
) -> GroupedPublications:
    """Bucket publications by the filter dimension.

    Input order is kept inside each bucket. Buckets come back newest year
    first for ``year`` and alphabetically by label otherwise, ignoring case.
    """
    dimension = SummaryFilter.parse(summary_filter)
    buckets: GroupedPublications = {}
    for pub in publications:
        buckets.setdefault(group_key(pub, dimension), []).append(pub)

    if dimension is SummaryFilter.YEAR:
        ordered = sorted(buckets, key=int, reverse=True)
    else:
        ordered = sorted(buckets, key=lambda label: (label.casefold(), label))
    return {key: buckets[key] for key in ordered}
