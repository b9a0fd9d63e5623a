"""Typed decoding of response bodies.

Collection responses nest their resources under a collection field::

    {"results": [{...}, {...}], "links": [...]}

Single-resource responses are the resource object itself. Both are decoded
with pydantic, so unknown fields are ignored and a missing required field
raises :class:`~gcorecloud.errors.DecodeError` naming the field and the
target type.
"""

import json
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar

import pydantic

from gcorecloud.errors import DecodeError

T = TypeVar("T")

DEFAULT_COLLECTION_KEY = "results"


@lru_cache(maxsize=128)
def _list_adapter(model: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(list[model])


@lru_cache(maxsize=128)
def _adapter(model: Any) -> pydantic.TypeAdapter:
    return pydantic.TypeAdapter(model)


def _type_name(model: Any) -> str:
    return getattr(model, "__name__", repr(model))


def null_as_empty(value: Any) -> Any:
    """Field validator input hook: the API sends null for empty lists."""
    return [] if value is None else value


def load_body(body: bytes | str | Mapping[str, Any] | None) -> Any:
    """Return the decoded JSON of a body that may still be raw bytes or text.

    Raises:
        DecodeError: If the body is not valid JSON.
    """
    if isinstance(body, (bytes, bytearray, str)):
        if not body:
            return None
        try:
            return json.loads(body)
        except ValueError as e:
            msg = f"Response body is not valid JSON: {e}"
            raise DecodeError(msg) from e
    return body


def decode_error_from(exc: pydantic.ValidationError, model: Any, prefix: str = "") -> DecodeError:
    """Convert a pydantic validation failure into a DecodeError for the first offending field."""
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    field_path = f"{prefix}.{loc}" if prefix and loc else (prefix or loc)
    target = _type_name(model)
    where = f" field '{field_path}'" if field_path else ""
    msg = f"Cannot decode {target}:{where} {first['msg']}"
    return DecodeError(msg, field_path=field_path or None, target=target)


def extract_many(
    body: bytes | str | Mapping[str, Any] | None,
    model: type[T],
    collection_key: str = DEFAULT_COLLECTION_KEY,
) -> list[T]:
    """Decode the collection field of a body into a list of ``model``.

    An absent, null or empty collection field yields an empty list.

    Args:
        body: Page body (raw or already decoded).
        model: Target type of each element.
        collection_key: Field holding the list.

    Returns:
        Freshly decoded values in the order they were received.

    Raises:
        DecodeError: If the body or any element does not match ``model``.
    """
    data = load_body(body)
    if data is None:
        return []
    if not isinstance(data, Mapping):
        msg = f"Cannot decode list of {_type_name(model)}: expected a JSON object, got {type(data).__name__}"
        raise DecodeError(msg, target=_type_name(model))

    items = data.get(collection_key)
    if items is None:
        return []
    if not isinstance(items, list):
        msg = (
            f"Cannot decode list of {_type_name(model)}: field '{collection_key}' "
            f"must be an array, got {type(items).__name__}"
        )
        raise DecodeError(msg, field_path=collection_key, target=_type_name(model))
    if not items:
        return []

    try:
        return _list_adapter(model).validate_python(items)
    except pydantic.ValidationError as e:
        raise decode_error_from(e, model, prefix=collection_key) from e


def extract_one(body: bytes | str | Mapping[str, Any] | None, model: type[T]) -> T:
    """Decode a whole, unwrapped body into a single ``model`` value.

    Raises:
        DecodeError: If the body does not match ``model``.
    """
    data = load_body(body)
    try:
        return _adapter(model).validate_python(data)
    except pydantic.ValidationError as e:
        raise decode_error_from(e, model) from e
