# airtable/tests/test_query.py
from __future__ import annotations

import pytest

from airtable.query import QueryBuilder, QuerySpec, SortDirection


def test_empty_spec_only_sends_offset():
    assert QuerySpec().to_params("") == [("offset", "")]


def test_builder_calls_are_cumulative_and_do_not_mutate(base):
    q0 = base.query()
    q1 = q0.view("Grid")
    q2 = q1.sort("Name", "asc").sort("Age", SortDirection.DESCENDING)

    assert q0.spec == QuerySpec()
    assert q1.spec.view == "Grid"
    assert q1.spec.sort == ()
    assert q2.spec.view == "Grid"
    assert q2.spec.sort == (
        ("Name", SortDirection.ASCENDING),
        ("Age", SortDirection.DESCENDING),
    )
    assert isinstance(q2, QueryBuilder)
    assert q2.base is base


def test_last_view_and_formula_win(base):
    q = base.query().view("A").view("B").formula("x").formula("y")
    assert (q.spec.view, q.spec.formula) == ("B", "y")


def test_sort_defaults_to_ascending(base):
    assert base.query().sort("Name").spec.sort == (("Name", SortDirection.ASCENDING),)


@pytest.mark.parametrize("raw,expected", [("DESC", "desc"), (" asc ", "asc")])
def test_sort_accepts_direction_strings(base, raw, expected):
    (_, direction), = base.query().sort("F", raw).spec.sort
    assert str(direction) == expected


def test_bad_sort_direction_rejected(base):
    with pytest.raises(ValueError):
        base.query().sort("F", "sideways")


def test_param_order():
    spec = QuerySpec(
        view="V",
        formula="{Age} > 3",
        sort=(("A", SortDirection.DESCENDING),),
        fields=("A", "B"),
        page_size=50,
        max_records=120,
    )
    assert spec.to_params("itr1") == [
        ("offset", "itr1"),
        ("view", "V"),
        ("filterByFormula", "{Age} > 3"),
        ("sort[0][field]", "A"),
        ("sort[0][direction]", "desc"),
        ("fields[]", "A"),
        ("fields[]", "B"),
        ("pageSize", "50"),
        ("maxRecords", "120"),
    ]


def test_fields_page_size_max_records(base):
    q = base.query().fields("Word").fields("Google", "Next").page_size(10).max_records(25)
    assert q.spec.fields == ("Word", "Google", "Next")
    assert q.spec.page_size == 10
    assert q.spec.max_records == 25


def test_formula_is_not_validated_locally(base):
    q = base.query().formula("((((")
    assert ("filterByFormula", "((((") in q.spec.to_params("")
