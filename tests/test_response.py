"""Tests for the paginated response envelope."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from listquery.core.query import QuerySpecBuilder
from listquery.core.response import ListResponse, PageMeta, list_response_model, paginated


class Widget(BaseModel):
    id: int
    name: str


@pytest.fixture
def spec():
    return QuerySpecBuilder().build({"page": 2, "pageSize": 2})


# -- paginated --------------------------------------------------------------


def test_generic_envelope(spec):
    assert paginated(["x", "y"], 5, spec) == {
        "meta": {"total": 5, "page": 2, "limit": 2},
        "data": ["x", "y"],
    }


def test_entity_key_replaces_data(spec):
    result = paginated(["x"], 3, spec, entity_key="widgets")
    assert result == {"meta": {"total": 3, "page": 2, "limit": 2}, "widgets": ["x"]}
    assert "data" not in result


def test_limit_is_requested_page_size_not_item_count():
    spec = QuerySpecBuilder().build({"page": 1, "pageSize": 50})
    result = paginated([1, 2, 3], 3, spec)
    assert result["meta"]["limit"] == 50


def test_accepts_any_iterable(spec):
    assert paginated((i for i in range(2)), 2, spec)["data"] == [0, 1]


def test_empty_page(spec):
    assert paginated([], 0, spec) == {"meta": {"total": 0, "page": 2, "limit": 2}, "data": []}


@pytest.mark.parametrize("key", ["meta", ""])
def test_rejects_entity_keys_that_break_the_envelope(spec, key):
    with pytest.raises(ValueError):
        paginated([], 0, spec, entity_key=key)


# -- Response models --------------------------------------------------------


def test_list_response_validates_generic_envelope(spec):
    body = paginated([{"id": 1, "name": "a"}], 1, spec)
    model = ListResponse[Widget].model_validate(body)
    assert model.meta == PageMeta(total=1, page=2, limit=2)
    assert model.data == [Widget(id=1, name="a")]


def test_list_response_model_uses_entity_key(spec):
    model_cls = list_response_model(Widget, "widgets")
    assert model_cls.__name__ == "WidgetsListResponse"
    body = paginated([Widget(id=1, name="a")], 1, spec, entity_key="widgets")
    model = model_cls.model_validate(body)
    assert model.model_dump() == {
        "meta": {"total": 1, "page": 2, "limit": 2},
        "widgets": [{"id": 1, "name": "a"}],
    }


def test_list_response_model_rejects_meta_key():
    with pytest.raises(ValueError):
        list_response_model(Widget, "meta")
