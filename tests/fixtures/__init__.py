"""
Shared Test Fixtures

Centralized factories used across all test layers.

Structure:
    - common.py: Base ID generators
    - order_fixtures.py: Order webhook payload factories
"""

# Common utilities
from .common import (
    make_email,
    make_stripe_customer_id,
    make_subscription_id,
)

# Order fixtures
from .order_fixtures import (
    make_line_item,
    make_frequency_item,
    make_trial_item,
    make_trial_note,
    make_customer,
    make_order,
)

__all__ = [
    "make_email",
    "make_stripe_customer_id",
    "make_subscription_id",
    "make_line_item",
    "make_frequency_item",
    "make_trial_item",
    "make_trial_note",
    "make_customer",
    "make_order",
]
