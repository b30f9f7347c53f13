"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── order_subscription/   Service components with mocked collaborators
    └── mocks/                Shared mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import MockHttpClient


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# HTTP Client Mocks
# =============================================================================

@pytest.fixture
def mock_http_client() -> MockHttpClient:
    """Mock HTTP client for the subscription service"""
    return MockHttpClient()
