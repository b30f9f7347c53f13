"""
Stripe Customer Lookup

Finds the Stripe customer id for an email address. The Stripe SDK is
synchronous, so calls run in a worker thread.
"""

import asyncio
import logging
from typing import Optional

import stripe

logger = logging.getLogger(__name__)


class StripeCustomerLookup:
    """Payment processor lookup backed by the Stripe API"""

    def __init__(self, secret_key: Optional[str] = None):
        """
        Args:
            secret_key: Stripe secret key (sk_test_* for testing/development);
                falls back to the globally configured stripe.api_key
        """
        self.secret_key = secret_key

    def _list_customers(self, email: str):
        params = {"email": email, "limit": 1}
        if self.secret_key:
            params["api_key"] = self.secret_key
        return stripe.Customer.list(**params)

    async def find_customer_ref_by_email(self, email: str) -> Optional[str]:
        """
        Return the id of the first Stripe customer with this email

        Raises:
            stripe.error.StripeError: the Stripe API call failed
        """
        if not email:
            return None

        customers = await asyncio.to_thread(self._list_customers, email)
        if not customers.data:
            logger.info(f"No Stripe customer found for {email}")
            return None
        return customers.data[0].id


__all__ = ["StripeCustomerLookup"]
