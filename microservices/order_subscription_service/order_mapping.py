"""
Shipping and order header mapping
"""

from .models import NEW_ORDER_TYPE, Order, OrderSummary, ShippingMethod


def extract_shipping_method(order: Order) -> ShippingMethod:
    """Flatten the first shipping line; any further lines are ignored"""
    if not order.shipping_lines:
        return ShippingMethod()
    shipping_line = order.shipping_lines[0]
    return ShippingMethod(
        shipping_method_id=shipping_line.id,
        shipping_method_name=shipping_line.title,
        shipping_cost=shipping_line.price,
    )


def extract_order_summary(order: Order) -> OrderSummary:
    return OrderSummary(
        order_id=order.id,
        order_type_id=NEW_ORDER_TYPE,
        order_date=order.created_at,
        total_price=order.total_price,
    )
