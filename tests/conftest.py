import pytest
import os

from objstore_sdk.client import HeadObjectRequest

def pytest_configure(config):
    """Configure test environment."""
    # Tracing is off unless a test turns it on
    os.environ.pop("OBJSTORE_TRACE_REQUESTS", None)
    os.environ.setdefault("OBJSTORE_PROFILE", "default")

@pytest.fixture
def head_request():
    """Fixture providing an input with the required fields set."""
    return HeadObjectRequest({"Bucket": "b", "Key": "k"})
