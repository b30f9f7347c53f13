#!/usr/bin/env python3
"""Subscription billing service configuration

Endpoints and credentials for the external subscription service and the
payment processor. Values are not validated here; missing settings are
reported when a call needs them.
"""
import os
from dataclasses import dataclass, field


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class SubscriptionServiceConfig:
    """Subscription service and payment processor settings"""

    # ===========================================
    # Subscription billing service
    # ===========================================
    service_url: str = ""
    api_key: str = field(default="", repr=False)
    timeout: float = 30.0

    # ===========================================
    # Stripe
    # ===========================================
    stripe_secret_key: str = field(default="", repr=False)

    @classmethod
    def from_env(cls) -> 'SubscriptionServiceConfig':
        """Load subscription service configuration from environment variables"""
        return cls(
            service_url=os.getenv("SUBSCRIPTION_SERVICE_URL", ""),
            api_key=os.getenv("MP_API_KEY", ""),
            timeout=_float(os.getenv("SUBSCRIPTION_SERVICE_TIMEOUT", ""), 30.0),
            stripe_secret_key=os.getenv("STRIPE_SECRET_KEY", ""),
        )
