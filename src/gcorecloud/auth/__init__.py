"""Authentication and credential resolution.

Example:
    ```python
    from gcorecloud.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="GCORE_API_KEY", required=True)
    ```
"""

from gcorecloud.auth.credentials import APIKeyAuth, CredentialResolver
from gcorecloud.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "APIKeyAuth",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
