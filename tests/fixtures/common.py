"""
Common/Shared Fixtures

Base factories and generators used across test layers.
"""
import uuid
from typing import Optional


def make_email(prefix: Optional[str] = None) -> str:
    """Generate a unique email"""
    prefix = prefix or f"test_{uuid.uuid4().hex[:8]}"
    return f"{prefix}@example.com"


def make_stripe_customer_id() -> str:
    """Generate a Stripe-style customer id"""
    return f"cus_test_{uuid.uuid4().hex[:14]}"


def make_subscription_id() -> str:
    """Generate a subscription id"""
    return f"sub_test_{uuid.uuid4().hex[:12]}"
