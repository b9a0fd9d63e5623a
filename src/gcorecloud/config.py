"""Client settings resolved from explicit values, the environment or a .env file."""

from dataclasses import dataclass

from gcorecloud.auth import CredentialNotFoundError, CredentialResolver

DEFAULT_API_URL = "https://api.gcore.com/cloud"

DEFAULT_TIMEOUT = 30.0

ENV_API_URL = "GCORE_CLOUD_API_URL"
ENV_API_KEY = "GCORE_API_KEY"
ENV_API_KEY_FILE = "GCORE_API_KEY_FILE"
ENV_PROJECT_ID = "GCORE_PROJECT_ID"
ENV_REGION_ID = "GCORE_REGION_ID"
ENV_TIMEOUT = "GCORE_TIMEOUT"


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings shared by every service client.

    Raises:
        ValueError: If api_url is empty or timeout is not positive.
    """

    api_key: str
    api_url: str = DEFAULT_API_URL
    project_id: int | None = None
    region_id: int | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.api_url:
            msg = "api_url cannot be empty"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        *,
        api_key: str | None = None,
        api_url: str | None = None,
        project_id: int | None = None,
        region_id: int | None = None,
    ) -> "ClientSettings":
        """Build settings, filling anything not passed explicitly from the environment.

        The API key may also be read from the file named by GCORE_API_KEY_FILE,
        e.g. a mounted secret.

        Raises:
            CredentialNotFoundError: If no API key can be found.
            ValueError: If an id or the timeout is not a number.
        """
        resolver = resolver or CredentialResolver()

        key = resolver.resolve(value=api_key, env_var_name=ENV_API_KEY)
        if key is None:
            key = resolver.resolve_from_file(env_var_name=ENV_API_KEY_FILE)
        if key is None:
            msg = f"Required credential not found (checked env vars: {ENV_API_KEY}, {ENV_API_KEY_FILE})"
            raise CredentialNotFoundError(msg, env_var_name=ENV_API_KEY)
        url = resolver.resolve(value=api_url, env_var_name=ENV_API_URL, default=DEFAULT_API_URL, secret=False)
        timeout = resolver.resolve(env_var_name=ENV_TIMEOUT, default=str(DEFAULT_TIMEOUT), secret=False)

        if project_id is None:
            project_id = _optional_int(resolver.resolve(env_var_name=ENV_PROJECT_ID, secret=False), ENV_PROJECT_ID)
        if region_id is None:
            region_id = _optional_int(resolver.resolve(env_var_name=ENV_REGION_ID, secret=False), ENV_REGION_ID)

        try:
            timeout_value = float(timeout)
        except ValueError:
            msg = f"{ENV_TIMEOUT} must be a number, got {timeout!r}"
            raise ValueError(msg) from None

        return cls(
            api_key=key,
            api_url=url,
            project_id=project_id,
            region_id=region_id,
            timeout=timeout_value,
        )


def _optional_int(raw: str | None, name: str) -> int | None:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from None
