"""API credentials and their resolution from the process environment.

A ``Credential`` is the pair of strings sent as HTTP Basic auth on every
request: the client identifier as username and the secret as password.
The API does not validate their syntax locally; the remote service does.

``CredentialResolver`` is an opt-in helper for applications that load those
strings from configuration. The request path never calls it on its own.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Example:
    ```python
    from payup.auth import Credential, CredentialResolver

    credential = Credential("sk_test_123", "")

    # or from STRIPE_CLIENT / STRIPE_SECRET
    credential = CredentialResolver().resolve_credential()
    ```
"""

import logging
import os
from dataclasses import dataclass, field
from threading import Lock

from dotenv import load_dotenv

from payup.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_ENV = "STRIPE_CLIENT"
DEFAULT_SECRET_ENV = "STRIPE_SECRET"


@dataclass(frozen=True)
class Credential:
    """Client identifier and secret for HTTP Basic authentication.

    Immutable and safe to share between threads and tasks.
    """

    client_id: str
    secret: str = field(default="", repr=False)

    @property
    def basic_auth(self) -> tuple[str, str]:
        """The ``(username, password)`` pair handed to httpx."""
        return (self.client_id, self.secret)


class CredentialResolver:
    """Resolve credential strings from multiple sources with priority ordering.

    Example:
        ```python
        resolver = CredentialResolver()

        api_base = resolver.resolve(env_var_name="STRIPE_API_BASE", default="https://api.stripe.com/v1")

        # Required value (raises if not found)
        client_id = resolver.resolve(env_var_name="STRIPE_CLIENT", required=True)
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single string value.

        Args:
            value: Explicitly provided value. Wins over every other source.
            env_var_name: Environment variable to check (includes .env values).
            default: Fallback when nothing else is set.
            required: Raise CredentialNotFoundError instead of returning None.
            mask_in_logs: Log "***" instead of the value.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and not found in any source.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_credential(
        self,
        *,
        client_id: str | None = None,
        secret: str | None = None,
        client_env: str = DEFAULT_CLIENT_ENV,
        secret_env: str = DEFAULT_SECRET_ENV,
    ) -> Credential:
        """Build a Credential from explicit values or the environment.

        The client identifier is required. The secret defaults to an empty
        string, which the API accepts as a blank basic-auth password.

        Raises:
            CredentialNotFoundError: If no client identifier can be resolved.
        """
        resolved_client = self.resolve(value=client_id, env_var_name=client_env, required=True)
        resolved_secret = self.resolve(value=secret, env_var_name=secret_env, default="")
        return Credential(client_id=resolved_client, secret=resolved_secret)
