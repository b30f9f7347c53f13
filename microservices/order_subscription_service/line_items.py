"""
Line Item Classification

Turns order line items into subscription product lines.

Some skus are not products but directives:
    TF_SUB_<frequency>   sets the renewal frequency (last one wins)
    TF_TRIAL_<anything>  adds the trial product named in the order notes

Trial notes look like:
    name  = TF_ONGOING_TRIAL
    value = TF_SPORT_SIZE (PRODUCT_ID-VARIATION_ID)
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from functools import reduce
from typing import Optional, Sequence, Tuple

from .models import (
    DEFAULT_RENEWAL_FREQUENCY,
    ExtractedProducts,
    LineItemKind,
    Order,
    OrderLineItem,
    OrderNoteAttribute,
    SubscriptionProductLine,
)
from .protocols import DiscountCalculationError

logger = logging.getLogger(__name__)

FREQUENCY_SKU_PREFIX = "TF_SUB_"
TRIAL_SKU_PREFIX = "TF_TRIAL_"
TRIAL_NOTE_NAME = "TF_ONGOING_TRIAL"
TRIAL_NOTE_PATTERN = re.compile(r"^TF_.*?\((.*?)-(.*?)\)")

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class LineItemClassification:
    """Outcome of classifying one line item"""
    kind: LineItemKind
    products: Tuple[SubscriptionProductLine, ...] = ()
    renewal_frequency: Optional[str] = None


def calculate_discount_percent(line_item: OrderLineItem) -> Decimal:
    """
    Percentage of the line total covered by its discount.

    Not clamped: a discount larger than the line total gives more than 100.

    Raises:
        DiscountCalculationError: price or quantity is zero
    """
    total_price = line_item.price * line_item.quantity
    if total_price == 0:
        raise DiscountCalculationError(
            f"Cannot calculate discount for sku '{line_item.sku}': line total is zero",
            sku=line_item.sku,
        )
    discounted_price = total_price - line_item.total_discount
    return HUNDRED - (discounted_price / total_price * HUNDRED)


def parse_trial_products(
    note_attributes: Sequence[OrderNoteAttribute],
) -> Tuple[SubscriptionProductLine, ...]:
    """Trial product lines encoded in the order notes; unparseable notes are skipped"""
    products = []
    for note in note_attributes:
        if note.name != TRIAL_NOTE_NAME:
            continue
        match = TRIAL_NOTE_PATTERN.match(note.value)
        if not match or not all(match.groups()):
            logger.debug(f"Ignoring trial note with unexpected value: {note.value!r}")
            continue
        product_id, variant_id = match.groups()
        products.append(
            SubscriptionProductLine(product_id=product_id, variant_id=variant_id, quantity=1)
        )
    return tuple(products)


def classify_line_item(
    line_item: OrderLineItem,
    note_attributes: Sequence[OrderNoteAttribute] = (),
) -> LineItemClassification:
    """Classify a line item as a frequency directive, trial directive or product"""
    sku = line_item.sku

    if sku.startswith(FREQUENCY_SKU_PREFIX):
        return LineItemClassification(
            kind=LineItemKind.FREQUENCY,
            renewal_frequency=sku[len(FREQUENCY_SKU_PREFIX):].lower(),
        )

    if sku.startswith(TRIAL_SKU_PREFIX):
        return LineItemClassification(
            kind=LineItemKind.TRIAL,
            products=parse_trial_products(note_attributes),
        )

    product = SubscriptionProductLine(
        product_id=line_item.product_id,
        variant_id=line_item.variant_id,
        quantity=line_item.quantity,
        discount_percent=calculate_discount_percent(line_item),
    )
    return LineItemClassification(kind=LineItemKind.PRODUCT, products=(product,))


def extract_products(order: Order) -> ExtractedProducts:
    """
    Fold every line item of the order into products, trial flag and frequency.

    Line items are processed in their given order. The accumulator starts at
    no products, no trial and the default frequency for every call.
    """

    def step(acc: ExtractedProducts, line_item: OrderLineItem) -> ExtractedProducts:
        result = classify_line_item(line_item, order.note_attributes)
        return ExtractedProducts(
            products=acc.products + result.products,
            includes_free_trial=acc.includes_free_trial or (
                result.kind is LineItemKind.TRIAL and bool(result.products)
            ),
            renewal_frequency=(
                acc.renewal_frequency if result.renewal_frequency is None
                else result.renewal_frequency
            ),
        )

    initial = ExtractedProducts(
        products=(),
        includes_free_trial=False,
        renewal_frequency=DEFAULT_RENEWAL_FREQUENCY,
    )
    return reduce(step, order.line_items, initial)
