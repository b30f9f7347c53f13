"""
Order Subscription Service Data Models

Inbound models mirror the storefront order webhook (snake_case JSON).
Outbound models serialize with the camelCase keys expected by the
subscription billing service (use ``by_alias=True``).
"""

from enum import Enum
from typing import Optional, Dict, Any, List, Tuple, Union
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


DEFAULT_RENEWAL_FREQUENCY = "w1"
NEW_ORDER_TYPE = "new"

# Product and variant ids arrive as integers from line items but as strings
# when decoded from a trial note.
ExternalId = Union[int, str]


# ====================
# Enum Types
# ====================

class LineItemKind(str, Enum):
    """How a single order line item is interpreted"""
    FREQUENCY = "frequency"   # TF_SUB_* directive sku
    TRIAL = "trial"           # TF_TRIAL_* directive sku
    PRODUCT = "product"       # Regular billable product


# ====================
# Inbound Order Models
# ====================

class OrderLineItem(BaseModel):
    """One purchased row of an order"""
    model_config = ConfigDict(frozen=True)

    sku: str = ""
    price: Decimal = Field(default=Decimal("0"), description="Unit price")
    quantity: int = Field(default=0, ge=0)
    total_discount: Decimal = Field(default=Decimal("0"), description="Discount across the whole line")
    product_id: Optional[ExternalId] = None
    variant_id: Optional[ExternalId] = None

    @field_validator("sku", mode="before")
    @classmethod
    def _none_sku_to_empty(cls, v):
        return "" if v is None else v


class OrderNoteAttribute(BaseModel):
    """Free-form key/value pair attached to an order"""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    value: str = ""

    @field_validator("name", "value", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v


class ShippingLine(BaseModel):
    """Shipping method selected for an order"""
    model_config = ConfigDict(frozen=True)

    id: Optional[ExternalId] = None
    title: Optional[str] = None
    price: Any = Field(default=None, description="Passed through verbatim")


class OrderCustomer(BaseModel):
    """Customer fields carried on the order"""
    model_config = ConfigDict(frozen=True)

    id: Optional[ExternalId] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class Order(BaseModel):
    """Storefront order as received from the order webhook"""
    model_config = ConfigDict(frozen=True)

    id: Optional[ExternalId] = None
    created_at: Any = None
    total_price: Any = None
    customer: Optional[OrderCustomer] = None
    shipping_lines: List[ShippingLine] = Field(default_factory=list)
    line_items: List[OrderLineItem] = Field(default_factory=list)
    note_attributes: List[OrderNoteAttribute] = Field(default_factory=list)

    @field_validator("shipping_lines", "line_items", "note_attributes", mode="before")
    @classmethod
    def _none_to_empty_list(cls, v):
        return [] if v is None else v


# ====================
# Customer Cache Models
# ====================

class CachedCustomer(BaseModel):
    """Locally stored customer record"""
    email: str
    stripe_customer_id: Optional[str] = None


# ====================
# Outbound Subscription Models
# ====================

class SubscriptionProductLine(BaseModel):
    """Product to include in the subscription"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_id: Optional[ExternalId] = Field(None, alias="productId")
    variant_id: Optional[ExternalId] = Field(None, alias="variationId")
    quantity: int = Field(..., ge=0)
    # Unset for free-trial lines
    discount_percent: Optional[Decimal] = Field(None, alias="discountPercent")

    @field_serializer("discount_percent")
    def _discount_as_number(self, value: Optional[Decimal]) -> Optional[float]:
        return float(value) if value is not None else None


class ExtractedProducts(BaseModel):
    """Result of folding over every line item of an order"""
    model_config = ConfigDict(frozen=True)

    products: Tuple[SubscriptionProductLine, ...] = ()
    includes_free_trial: bool = False
    renewal_frequency: str = DEFAULT_RENEWAL_FREQUENCY


class CustomerIdentity(BaseModel):
    """Subscriber identity sent to the subscription service"""
    model_config = ConfigDict(populate_by_name=True)

    external_id: Optional[ExternalId] = Field(None, alias="externalId")
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    payment_customer_ref: Optional[str] = Field(None, alias="stripeCustomerId")

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class ShippingMethod(BaseModel):
    """First shipping line of the order, flattened"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    shipping_method_id: Optional[ExternalId] = Field(None, alias="shippingMethodId")
    shipping_method_name: Optional[str] = Field(None, alias="shippingMethodName")
    shipping_cost: Any = Field(None, alias="shippingCost")


class SubscriptionTerms(BaseModel):
    """Renewal cadence and shipping of the subscription"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    renewal_frequency: str = Field(DEFAULT_RENEWAL_FREQUENCY, alias="renewalFrequencyId")
    shipping_method_id: Optional[ExternalId] = Field(None, alias="shippingMethodId")
    shipping_method_name: Optional[str] = Field(None, alias="shippingMethodName")
    shipping_cost: Any = Field(None, alias="shippingCost")


class OrderSummary(BaseModel):
    """Order header forwarded with the subscription"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    order_id: Optional[ExternalId] = Field(None, alias="orderId")
    order_type_id: str = Field(NEW_ORDER_TYPE, alias="orderTypeId")
    order_date: Any = Field(None, alias="orderDate")
    total_price: Any = Field(None, alias="totalPrice")


class SubscriptionRequest(BaseModel):
    """Payload for the subscription service create endpoint"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    api_key: str = Field(..., alias="apiKey", repr=False)
    send_subscription_id_to_store: bool = Field(True, alias="sendSubscriptionIdToStore")
    includes_free_trial: bool = Field(False, alias="includesFreeTrial")
    subscription: SubscriptionTerms
    customer: CustomerIdentity
    order: OrderSummary
    subscription_items: List[SubscriptionProductLine] = Field(default_factory=list, alias="subscriptionItems")

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the create endpoint"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


__all__ = [
    "DEFAULT_RENEWAL_FREQUENCY",
    "NEW_ORDER_TYPE",
    "ExternalId",
    "LineItemKind",
    "OrderLineItem",
    "OrderNoteAttribute",
    "ShippingLine",
    "OrderCustomer",
    "Order",
    "CachedCustomer",
    "SubscriptionProductLine",
    "ExtractedProducts",
    "CustomerIdentity",
    "ShippingMethod",
    "SubscriptionTerms",
    "OrderSummary",
    "SubscriptionRequest",
]
