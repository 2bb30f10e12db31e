"""Client settings: API hosts and timeouts."""

from dataclasses import dataclass

from payup.auth.credentials import CredentialResolver

DEFAULT_API_BASE = "https://api.stripe.com/v1"
DEFAULT_FILES_BASE = "https://files.stripe.com/v1"
DEFAULT_TIMEOUT = 80.0


@dataclass(frozen=True)
class ClientSettings:
    """Where requests go and how long the transport waits for them.

    Attributes:
        api_base: Base URL for every endpoint except file uploads.
        files_base: Base URL for multipart file uploads.
        timeout: Transport timeout in seconds (connect, read, write and pool).
    """

    api_base: str = DEFAULT_API_BASE
    files_base: str = DEFAULT_FILES_BASE
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None) -> "ClientSettings":
        """Read STRIPE_API_BASE, STRIPE_FILES_BASE and STRIPE_TIMEOUT, falling back to defaults."""
        resolver = resolver or CredentialResolver()
        api_base = resolver.resolve(env_var_name="STRIPE_API_BASE", default=DEFAULT_API_BASE, mask_in_logs=False)
        files_base = resolver.resolve(env_var_name="STRIPE_FILES_BASE", default=DEFAULT_FILES_BASE, mask_in_logs=False)
        timeout = resolver.resolve(env_var_name="STRIPE_TIMEOUT", default=str(DEFAULT_TIMEOUT), mask_in_logs=False)
        return cls(api_base=api_base.rstrip("/"), files_base=files_base.rstrip("/"), timeout=float(timeout))
