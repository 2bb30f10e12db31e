"""Exceptions raised while resolving credentials from configuration.

Example:
    ```python
    from payup.auth.exceptions import CredentialNotFoundError

    try:
        credential = CredentialResolver().resolve_credential()
    except CredentialNotFoundError as e:
        print(f"Set {e.env_var_name} first")
    ```
"""

from payup.errors.exceptions import PayupError


class CredentialError(PayupError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name
