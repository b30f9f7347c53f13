"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    └── order_subscription/   Pure business logic, models, config

Usage:
    pytest tests/unit -v
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/unit as a unit test"""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
