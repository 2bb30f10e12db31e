"""Test basic package functionality."""

import payup


def test_version():
    """Test that package version is defined."""
    assert hasattr(payup, "__version__")
    assert payup.__version__ == "0.1.0"
