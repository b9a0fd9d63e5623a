"""Structured exceptions for the three failure stages: validation, transport, decode."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from gcorecloud.errors.models import ErrorBody


class GcoreCloudError(Exception):
    """Base exception for every error raised by this library."""

    pass


class InvalidOptionsError(GcoreCloudError):
    """Request options were rejected before any request was issued."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors if errors is not None else []


class APIError(GcoreCloudError):
    """Base exception for non-OK HTTP responses."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_body: "ErrorBody | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_body = error_body


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (server-side validation errors)."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class DecodeError(GcoreCloudError, ValueError):
    """A response body does not match the expected shape.

    Decode errors mean the client and server disagree about the contract;
    they are never transient.
    """

    def __init__(self, message: str, field_path: str | None = None, target: str | None = None):
        super().__init__(message)
        self.field_path = field_path
        self.target = target


class UnknownDiscriminatorError(DecodeError):
    """A polymorphic object carried a missing or unsupported discriminator."""

    def __init__(self, message: str, value: object = None, discriminator: str = "type", **kwargs):
        super().__init__(message, field_path=discriminator, **kwargs)
        self.value = value
        self.discriminator = discriminator


class TaskResultError(DecodeError):
    """A task payload did not contain the expected created resource ids."""

    def __init__(self, message: str, key: str, **kwargs):
        super().__init__(message, field_path=f"created_resources.{key}", **kwargs)
        self.key = key


class VariantStateError(DecodeError):
    """An envelope holds zero or more than one populated shape."""

    pass
