"""Tests for typed extraction of response bodies."""

import json

import pytest
from pydantic import BaseModel

from gcorecloud.errors import DecodeError
from gcorecloud.extract import extract_many, extract_one


class Item(BaseModel):
    id: str
    size: int = 0


@pytest.mark.unit
def test_extract_many_preserves_order():
    body = {"results": [{"id": "c"}, {"id": "a"}, {"id": "b"}, {"id": "a"}]}

    items = extract_many(body, Item)

    assert [item.id for item in items] == ["c", "a", "b", "a"]


@pytest.mark.unit
def test_extract_many_from_raw_bytes():
    raw = json.dumps({"results": [{"id": "a", "size": 3}]}).encode()

    assert extract_many(raw, Item) == [Item(id="a", size=3)]


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [
        {"results": []},
        {"results": None},
        {"links": []},
        {},
        b"",
        None,
    ],
)
def test_extract_many_empty_or_absent_collection(body):
    assert extract_many(body, Item) == []


@pytest.mark.unit
def test_extract_many_custom_collection_key():
    body = {"items": [{"id": "x"}], "results": [{"id": "ignored"}]}

    assert [item.id for item in extract_many(body, Item, collection_key="items")] == ["x"]


@pytest.mark.unit
def test_extract_many_ignores_unknown_fields():
    body = {"results": [{"id": "a", "colour": "blue"}]}

    assert extract_many(body, Item) == [Item(id="a")]


@pytest.mark.unit
def test_extract_many_missing_field_names_field_and_type():
    body = {"results": [{"id": "a"}, {"size": 2}]}

    with pytest.raises(DecodeError) as exc_info:
        extract_many(body, Item)

    assert exc_info.value.field_path == "results.1.id"
    assert exc_info.value.target == "Item"
    assert "results.1.id" in str(exc_info.value)
    assert "Item" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize("collection", [{"id": "a"}, {}, "", 0, False])
def test_extract_many_non_list_collection(collection):
    with pytest.raises(DecodeError, match="must be an array") as exc_info:
        extract_many({"results": collection}, Item)

    assert exc_info.value.field_path == "results"


@pytest.mark.unit
def test_extract_many_non_object_body():
    with pytest.raises(DecodeError, match="expected a JSON object"):
        extract_many([{"id": "a"}], Item)


@pytest.mark.unit
def test_extract_many_malformed_json():
    with pytest.raises(DecodeError, match="not valid JSON"):
        extract_many(b'{"results": [', Item)


@pytest.mark.unit
def test_extract_many_returns_fresh_values():
    body = {"results": [{"id": "a"}]}

    first = extract_many(body, Item)
    second = extract_many(body, Item)

    assert first == second
    assert first is not second
    assert first[0] is not second[0]


@pytest.mark.unit
def test_extract_one_unwrapped_body():
    assert extract_one(b'{"id": "solo", "size": 7}', Item) == Item(id="solo", size=7)


@pytest.mark.unit
def test_extract_one_missing_field():
    with pytest.raises(DecodeError) as exc_info:
        extract_one({"size": 1}, Item)

    assert exc_info.value.field_path == "id"


@pytest.mark.unit
def test_extract_one_wrong_type():
    with pytest.raises(DecodeError) as exc_info:
        extract_one({"id": "a", "size": "large"}, Item)

    assert exc_info.value.field_path == "size"
