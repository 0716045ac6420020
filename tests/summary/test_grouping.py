from __future__ import annotations

from typing import Optional

import pytest

from scholarhub.domain.publication import Publication
from scholarhub.summary import ALL_PUBLICATIONS, UNCATEGORIZED, SummaryFilter, group_publications


def _pub(
    pid: str,
    year: int = 2022,
    type: str = "Journal Article",
    area: Optional[str] = None,
) -> Publication:
    return Publication(
        id=pid,
        title=f"Paper {pid}",
        type=type,
        authors="X",
        venue="V",
        year=year,
        abstract="",
        keywords="",
        user_id="u1",
        research_area=area,
    )


def test_year_groups_are_distinct_years_newest_first() -> None:
    pubs = [_pub("a", 2019), _pub("b", 2023), _pub("c", 2021), _pub("d", 2023), _pub("e", 2009)]
    grouped = group_publications(pubs, "year")

    assert list(grouped) == ["2023", "2021", "2019", "2009"]
    assert [p.id for p in grouped["2023"]] == ["b", "d"]


def test_year_ordering_is_numeric_not_lexicographic() -> None:
    grouped = group_publications([_pub("a", 1999), _pub("b", 2000), _pub("c", 1000)], SummaryFilter.YEAR)
    assert list(grouped) == ["2000", "1999", "1000"]


def test_type_groups_sorted_alphabetically() -> None:
    pubs = [_pub("a", type="Journal Article"), _pub("b", type="Book Chapter"), _pub("c", type="Conference Paper")]
    grouped = group_publications(pubs, "type")
    assert list(grouped) == ["Book Chapter", "Conference Paper", "Journal Article"]


@pytest.mark.parametrize("missing", [None, ""])
def test_missing_area_goes_to_uncategorized(missing: Optional[str]) -> None:
    pubs = [_pub("a", area="Robotics"), _pub("b", area=missing), _pub("c", area="Databases")]
    grouped = group_publications(pubs, "area")

    assert list(grouped) == ["Databases", "Robotics", UNCATEGORIZED]
    assert [p.id for p in grouped[UNCATEGORIZED]] == ["b"]


@pytest.mark.parametrize("unknown", ["venue", "", "YEAR", None])
def test_unknown_filter_yields_single_group_in_input_order(unknown: Optional[str]) -> None:
    pubs = [_pub("c", 2020), _pub("a", 2024), _pub("b", 2018)]
    grouped = group_publications(pubs, unknown)

    assert list(grouped) == [ALL_PUBLICATIONS]
    assert [p.id for p in grouped[ALL_PUBLICATIONS]] == ["c", "a", "b"]


def test_empty_input_gives_empty_mapping() -> None:
    assert group_publications([], "year") == {}


def test_filter_parsing() -> None:
    assert SummaryFilter.parse("area") is SummaryFilter.AREA
    assert SummaryFilter.parse(SummaryFilter.TYPE) is SummaryFilter.TYPE
    assert SummaryFilter.parse("whatever") is SummaryFilter.UNFILTERED


def test_label_ordering_ignores_case() -> None:
    pubs = [_pub("a", area="Robotics"), _pub("b", area="machine learning"), _pub("c", area=None)]
    grouped = group_publications(pubs, "area")
    assert list(grouped) == ["machine learning", "Robotics", UNCATEGORIZED]
