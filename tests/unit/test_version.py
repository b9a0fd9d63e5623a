"""Test basic package functionality."""

import gcorecloud


def test_version():
    """Test that package version is defined."""
    assert hasattr(gcorecloud, "__version__")
    assert gcorecloud.__version__ == "0.1.0"
