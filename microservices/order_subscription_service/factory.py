"""
Order Subscription Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that imports I/O-dependent modules.

Usage:
    from .factory import create_subscription_gateway
    async with create_subscription_gateway(customer_cache) as gateway:
        await gateway.create(order_json)
"""
from typing import Optional

from core.config import SubscriptionServiceConfig, get_settings
from core.logger import setup_service_logger

from .credentials import ApiKeyCredentials
from .customer_resolver import CustomerResolver
from .error_sink import LoggingErrorSink
from .protocols import (
    CustomerCacheProtocol,
    ErrorSinkProtocol,
    PaymentCustomerLookupProtocol,
)
from .subscription_assembler import SubscriptionAssembler
from .subscription_gateway import SubscriptionGateway


def create_subscription_gateway(
    customer_cache: CustomerCacheProtocol,
    config: Optional[SubscriptionServiceConfig] = None,
    payment_lookup: Optional[PaymentCustomerLookupProtocol] = None,
    error_sink: Optional[ErrorSinkProtocol] = None,
) -> SubscriptionGateway:
    """
    Create SubscriptionGateway with real dependencies.

    Args:
        customer_cache: Local customer store (owned by the caller)
        config: Settings; loaded from the environment if omitted
        payment_lookup: Defaults to the Stripe lookup
        error_sink: Defaults to logging the error

    Returns:
        Configured SubscriptionGateway instance
    """
    config = config or get_settings()
    logger = setup_service_logger(__package__)

    if payment_lookup is None:
        # Import Stripe client here (not at module level)
        from .clients.stripe_client import StripeCustomerLookup
        payment_lookup = StripeCustomerLookup(secret_key=config.stripe_secret_key or None)

    error_sink = error_sink or LoggingErrorSink(logger)
    credentials = ApiKeyCredentials(config.api_key)

    resolver = CustomerResolver(
        customer_cache=customer_cache,
        payment_lookup=payment_lookup,
        error_sink=error_sink,
    )
    assembler = SubscriptionAssembler(
        customer_resolver=resolver,
        credentials=credentials,
        error_sink=error_sink,
    )
    return SubscriptionGateway(
        assembler=assembler,
        credentials=credentials,
        base_url=config.service_url or None,
        timeout=config.timeout,
    )
