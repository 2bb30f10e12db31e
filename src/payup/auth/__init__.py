"""Authentication components.

- ``Credential``: the client/secret pair sent as HTTP Basic auth
- ``CredentialResolver``: value → env → .env → default resolution

Example:
    ```python
    from payup.auth import CredentialResolver

    credential = CredentialResolver().resolve_credential(client_env="STRIPE_CLIENT")
    ```
"""

from payup.auth.credentials import Credential, CredentialResolver
from payup.auth.exceptions import CredentialError, CredentialNotFoundError

__all__ = [
    "Credential",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
