"""
Subscription Assembler

Combines products, customer, shipping and order header of an order into
the payload for the subscription service.
"""

import asyncio
import logging

from .customer_resolver import CustomerResolver, report_error
from .line_items import extract_products
from .models import Order, SubscriptionRequest, SubscriptionTerms
from .order_mapping import extract_order_summary, extract_shipping_method
from .protocols import (
    CredentialProviderProtocol,
    DiscountCalculationError,
    ErrorSinkProtocol,
)

logger = logging.getLogger(__name__)


class SubscriptionAssembler:
    """Builds a SubscriptionRequest from an order, all or nothing"""

    def __init__(
        self,
        customer_resolver: CustomerResolver,
        credentials: CredentialProviderProtocol,
        error_sink: ErrorSinkProtocol,
    ):
        self.customer_resolver = customer_resolver
        self.credentials = credentials
        self.error_sink = error_sink

    async def assemble(self, order: Order) -> SubscriptionRequest:
        """
        Assemble the create payload for an order.

        Customer resolution is scheduled before the line items are folded
        and only runs once the fold succeeds; a failed fold cancels it.

        Raises:
            ConfigurationError: API key missing
            DiscountCalculationError: a billable line has a zero total
            CustomerResolutionError: no payment customer could be resolved
        """
        api_key = self.credentials.api_key()

        customer_task = asyncio.create_task(self.customer_resolver.resolve(order))
        try:
            extracted = extract_products(order)
        except DiscountCalculationError as e:
            customer_task.cancel()
            await asyncio.gather(customer_task, return_exceptions=True)
            logger.error(f"Cannot build subscription for order {order.id}: {e}")
            report_error(self.error_sink, e, {
                "message": str(e),
                "order_id": order.id,
                "sku": e.sku,
            })
            raise

        shipping = extract_shipping_method(order)
        summary = extract_order_summary(order)
        customer = await customer_task

        return SubscriptionRequest(
            api_key=api_key,
            send_subscription_id_to_store=True,
            includes_free_trial=extracted.includes_free_trial,
            subscription=SubscriptionTerms(
                renewal_frequency=extracted.renewal_frequency,
                shipping_method_id=shipping.shipping_method_id,
                shipping_method_name=shipping.shipping_method_name,
                shipping_cost=shipping.shipping_cost,
            ),
            customer=customer,
            order=summary,
            subscription_items=list(extracted.products),
        )
