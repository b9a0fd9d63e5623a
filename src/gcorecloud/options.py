"""Base class for request options validated before any request is sent."""

from typing import Any

import httpx
import pydantic
from pydantic import BaseModel, ConfigDict

from gcorecloud.errors import InvalidOptionsError


class RequestOptions(BaseModel):
    """Pydantic model for request options.

    Construction validates the options; invalid or mutually inconsistent
    values raise :class:`~gcorecloud.errors.InvalidOptionsError` instead of
    pydantic's own error type.
    """

    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except pydantic.ValidationError as e:
            raise _invalid_options(type(self).__name__, e) from e

    @classmethod
    def from_mapping(cls, data: dict[str, Any]):
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            raise _invalid_options(cls.__name__, e) from e

    def to_request_body(self) -> dict[str, Any]:
        """JSON request body with unset optional fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_query(self) -> str:
        """Query string (with leading ``?``) of the options that are set, or ``""``.

        False booleans and empty lists are left out; lists are comma-delimited.
        """
        params = {}
        for key, value in self.model_dump(mode="json", exclude_none=True).items():
            if value is False or value == [] or value == "":
                continue
            if isinstance(value, list):
                value = ",".join(str(v) for v in value)
            elif isinstance(value, bool):
                value = "true"
            params[key] = value
        if not params:
            return ""
        return f"?{httpx.QueryParams(params)}"


def _invalid_options(name: str, exc: pydantic.ValidationError) -> InvalidOptionsError:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or name}: {err['msg']}" for err in exc.errors()
    )
    return InvalidOptionsError(f"Invalid {name}: {details}", errors=exc.errors(include_url=False))
