"""Tests for credential resolution exceptions."""

import pytest

from payup.auth.exceptions import CredentialError, CredentialNotFoundError
from payup.errors import PayupError


class TestCredentialError:
    """Test CredentialError base exception."""

    def test_can_be_raised(self):
        """Test that CredentialError can be raised."""
        with pytest.raises(CredentialError):
            raise CredentialError("Test error")

    def test_is_payup_error(self):
        """Test that credential errors share the package base class."""
        assert issubclass(CredentialError, PayupError)

    def test_exception_message(self):
        """Test that exception message is preserved."""
        assert str(CredentialError("Custom error message")) == "Custom error message"


class TestCredentialNotFoundError:
    """Test CredentialNotFoundError exception."""

    def test_is_credential_error(self):
        """Test that CredentialNotFoundError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_env_var_name_attribute(self):
        """Test that env_var_name attribute is set."""
        error = CredentialNotFoundError("Test error", env_var_name="STRIPE_CLIENT")
        assert error.env_var_name == "STRIPE_CLIENT"

    def test_env_var_name_optional(self):
        """Test that env_var_name is optional."""
        assert CredentialNotFoundError("Test error").env_var_name is None
