"""Error handling utilities for HTTP responses."""

from collections.abc import Collection

import httpx

from gcorecloud.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from gcorecloud.errors.models import ErrorBody

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def raise_for_status(response: httpx.Response, ok_codes: Collection[int] | None = None) -> None:
    """Raise appropriate exception for responses outside the accepted status codes.

    Parses the API's JSON error body if present, otherwise uses the standard
    HTTP status code to exception mapping.

    Args:
        response: HTTP response object
        ok_codes: Status codes accepted as success. Defaults to any 2xx.

    Raises:
        APIError subclass based on status code
    """
    status_code = response.status_code

    if ok_codes is None:
        if response.is_success:
            return
    elif status_code in ok_codes:
        return

    error_body = ErrorBody.from_response(response)

    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        # Successful but unexpected status, e.g. 204 where 200 was required
        exc_class = APIError

    if error_body:
        message = error_body.to_exception_message(status_code)
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"
        if ok_codes is not None and exc_class is APIError:
            message += f" (expected one of {sorted(ok_codes)})"

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(
            message=message,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
            error_body=error_body,
        )

    if exc_class is ValidationError:
        validation_errors = None
        if error_body and error_body.extensions:
            validation_errors = error_body.extensions.get("errors")
        raise ValidationError(
            message=message,
            validation_errors=validation_errors,
            status_code=status_code,
            response=response,
            error_body=error_body,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_body=error_body,
    )
