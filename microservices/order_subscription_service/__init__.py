"""
Order Subscription Service

Turns storefront orders into subscription requests for the external
subscription billing service and signals subscription renewals.
"""

from .models import (
    Order,
    OrderLineItem,
    OrderNoteAttribute,
    SubscriptionProductLine,
    CustomerIdentity,
    SubscriptionRequest,
)
from .protocols import (
    OrderSubscriptionError,
    ConfigurationError,
    DomainError,
    DiscountCalculationError,
    CustomerResolutionError,
)
from .line_items import classify_line_item, extract_products
from .customer_resolver import CustomerResolver
from .subscription_assembler import SubscriptionAssembler
from .subscription_gateway import SubscriptionGateway

__all__ = [
    "Order",
    "OrderLineItem",
    "OrderNoteAttribute",
    "SubscriptionProductLine",
    "CustomerIdentity",
    "SubscriptionRequest",
    "OrderSubscriptionError",
    "ConfigurationError",
    "DomainError",
    "DiscountCalculationError",
    "CustomerResolutionError",
    "classify_line_item",
    "extract_products",
    "CustomerResolver",
    "SubscriptionAssembler",
    "SubscriptionGateway",
]
