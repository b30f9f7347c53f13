"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (mocked collaborators and HTTP)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from typing import Any, Dict

import pytest

# Set testing environment BEFORE any project imports
os.environ.setdefault("ENV", "testing")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from tests.fixtures import (
    make_customer,
    make_line_item,
    make_order,
)


# =============================================================================
# Test Configuration
# =============================================================================

class TestConfig:
    """Centralized test configuration"""

    SUBSCRIPTION_SERVICE_URL = "http://subscriptions.test"
    API_KEY = "mp_test_key"


@pytest.fixture(scope="session")
def test_config() -> TestConfig:
    """Provide test configuration"""
    return TestConfig()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_order() -> Dict[str, Any]:
    """Order with one billable line, a customer and one shipping line"""
    return make_order(
        line_items=[make_line_item()],
        customer=make_customer(customer_id=9, email="a@b.com"),
    )


@pytest.fixture
def sample_order_without_customer() -> Dict[str, Any]:
    """Order that carries no customer"""
    return make_order(customer=None)
