"""Error taxonomy and HTTP error handling for the cloud API client."""

from gcorecloud.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    GcoreCloudError,
    InvalidOptionsError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TaskResultError,
    UnauthorizedError,
    UnknownDiscriminatorError,
    ValidationError,
    VariantStateError,
)
from gcorecloud.errors.handler import raise_for_status
from gcorecloud.errors.models import ErrorBody

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DecodeError",
    "ErrorBody",
    "ForbiddenError",
    "GcoreCloudError",
    "InvalidOptionsError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TaskResultError",
    "UnauthorizedError",
    "UnknownDiscriminatorError",
    "ValidationError",
    "VariantStateError",
    "raise_for_status",
]
