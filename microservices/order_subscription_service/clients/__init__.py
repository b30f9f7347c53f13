"""
Order Subscription Service Clients

Clients for external systems used while resolving customers.
"""

from .stripe_client import StripeCustomerLookup

__all__ = ["StripeCustomerLookup"]
