"""Tests for sort-string parsing."""

from __future__ import annotations

import pytest

from listquery.core.sorting import SortOrder, default_order, parse_sort
from listquery.core.types import SortDirection

ASC = SortDirection.ASC
DESC = SortDirection.DESC


# -- Defaults ---------------------------------------------------------------


@pytest.mark.parametrize("sort", [None, "", "   ", "\t\n"])
def test_missing_or_blank_sort_uses_default(sort):
    assert parse_sort(sort) == {"createdAt": DESC}


def test_default_field_is_configurable():
    assert parse_sort(None, default_field="updatedAt") == {"updatedAt": DESC}
    assert default_order("name").to_dict() == {"name": "DESC"}


@pytest.mark.parametrize("sort", [",", " , ,", ":asc", " :desc, :asc ,"])
def test_all_tokens_malformed_falls_back_to_default(sort):
    assert parse_sort(sort) == {"createdAt": DESC}


def test_non_string_sort_falls_back_to_default():
    assert parse_sort(42) == {"createdAt": DESC}


# -- Parsing ----------------------------------------------------------------


def test_multiple_fields_keep_request_order():
    order = parse_sort("a:asc,b:desc")
    assert order == {"a": ASC, "b": DESC}
    assert list(order) == ["a", "b"]


def test_bare_field_defaults_to_descending():
    assert parse_sort("a") == {"a": DESC}


def test_direction_is_case_insensitive_and_trimmed():
    assert parse_sort(" a : ASC , b:Asc,c: asc ") == {"a": ASC, "b": ASC, "c": ASC}


def test_unknown_direction_is_descending():
    assert parse_sort("a:up,b:ascending,c:") == {"a": DESC, "b": DESC, "c": DESC}


def test_blank_field_tokens_are_skipped():
    assert parse_sort("a:asc,,:desc, ,b") == {"a": ASC, "b": DESC}


def test_extra_colon_segments_are_ignored():
    assert parse_sort("a:asc:nulls") == {"a": ASC}


# -- Duplicate fields: last occurrence wins ----------------------------------


def test_duplicate_field_last_occurrence_wins():
    assert parse_sort("a:asc,a:desc") == {"a": DESC}
    assert parse_sort("a:desc,a:asc") == {"a": ASC}


def test_duplicate_field_keeps_first_position():
    order = parse_sort("a:asc,b:asc,a:desc")
    assert list(order.items()) == [("a", DESC), ("b", ASC)]


# -- SortOrder --------------------------------------------------------------


def test_sort_order_wire_form():
    order = parse_sort("incomeReceived:asc,status:asc")
    assert order.to_dict() == {"incomeReceived": "ASC", "status": "ASC"}
    assert order.to_sort_string() == "incomeReceived:asc,status:asc"


def test_sort_order_is_read_only():
    order = SortOrder({"a": ASC})
    with pytest.raises(TypeError):
        order["b"] = DESC  # type: ignore[index]
    assert len(order) == 1
    assert "a" in order
