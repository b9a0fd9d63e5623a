"""Error body returned by the cloud API on failed requests."""

from dataclasses import dataclass
from typing import Any

import httpx

# Keys the API always uses for its error payloads
STANDARD_FIELDS = frozenset({"message", "exception_class", "error_code"})


@dataclass
class ErrorBody:
    """Decoded JSON error payload.

    The API answers failed requests with a JSON object such as
    ``{"exception_class": "ClusterNotFound", "message": "Cluster not found"}``.
    Anything beyond the standard keys is kept in ``extensions``.
    """

    message: str | None = None
    exception_class: str | None = None
    error_code: str | None = None

    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorBody | None":
        """Parse the error payload from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorBody object or None if the body is not a recognised error payload
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, empty body, or missing .json() method
            return None

        if not isinstance(data, dict):
            return None
        if not any(key in data for key in STANDARD_FIELDS):
            return None

        message = data.get("message")
        exception_class = data.get("exception_class")
        error_code = data.get("error_code")

        extensions = {k: v for k, v in data.items() if k not in STANDARD_FIELDS}

        return cls(
            message=str(message) if message is not None else None,
            exception_class=exception_class,
            error_code=error_code,
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self, status_code: int) -> str:
        """Convert the error payload to an exception message."""
        headline = f"HTTP {status_code}"
        if self.exception_class:
            headline += f" {self.exception_class}"
        if self.message:
            headline += f": {self.message}"

        lines = [headline]
        if self.error_code:
            lines.append(f"Error code: {self.error_code}")
        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines)
