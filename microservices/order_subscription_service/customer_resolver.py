"""
Customer Resolver

Builds the subscriber identity for an order and resolves the payment
processor customer id, preferring the local customer store over a
lookup at the processor.
"""

import logging
from typing import Any, Mapping

from .models import CustomerIdentity, Order
from .protocols import (
    CustomerCacheProtocol,
    CustomerResolutionError,
    ErrorSinkProtocol,
    PaymentCustomerLookupProtocol,
)

logger = logging.getLogger(__name__)

LOOKUP_FAILED_MESSAGE = "Problem getting customer ID from Stripe"
UNRESOLVED_MESSAGE = (
    "Problem getting customer ID from Stripe; subscription will not be created."
)


def report_error(error_sink: ErrorSinkProtocol, error: BaseException, context: Mapping[str, Any]) -> None:
    """Hand an error to the sink without letting the sink affect the caller"""
    try:
        error_sink.notify(error, context)
    except Exception as e:
        logger.error(f"Error sink failed while reporting {error!r}: {e}")


class CustomerResolver:
    """Resolves the customer identity of an order"""

    def __init__(
        self,
        customer_cache: CustomerCacheProtocol,
        payment_lookup: PaymentCustomerLookupProtocol,
        error_sink: ErrorSinkProtocol,
    ):
        self.customer_cache = customer_cache
        self.payment_lookup = payment_lookup
        self.error_sink = error_sink

    async def resolve(self, order: Order) -> CustomerIdentity:
        """
        Build the CustomerIdentity for an order.

        Orders without a customer give an empty identity and no lookups.

        Raises:
            CustomerResolutionError: neither the customer store nor the
                payment processor knows this customer
        """
        if order.customer is None:
            return CustomerIdentity()

        identity = CustomerIdentity(
            external_id=order.customer.id,
            email=order.customer.email,
            first_name=order.customer.first_name,
            last_name=order.customer.last_name,
        )

        try:
            identity.payment_customer_ref = await self._lookup_payment_ref(identity.email)
        except Exception as e:
            logger.warning(f"Payment customer lookup failed for {identity.email}: {e}")
            report_error(self.error_sink, e, {
                "message": LOOKUP_FAILED_MESSAGE,
                "customer": identity.model_dump(exclude_none=True),
            })

        if not identity.payment_customer_ref:
            error = CustomerResolutionError(UNRESOLVED_MESSAGE, email=identity.email)
            report_error(self.error_sink, error, {
                "customer": identity.model_dump(exclude_none=True),
            })
            raise error

        return identity

    async def _lookup_payment_ref(self, email):
        cached = await self.customer_cache.find_by_email(email)
        if cached and cached.stripe_customer_id:
            logger.debug(f"Using stored payment customer for {email}")
            return cached.stripe_customer_id

        logger.info(f"No stored payment customer for {email}, querying payment processor")
        return await self.payment_lookup.find_customer_ref_by_email(email)
