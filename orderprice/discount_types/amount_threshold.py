from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .base import Discount, register


@register
@dataclass(frozen=True)
class AmountDiscount(Discount):
    """
    Applies once the price alone reaches min_total_price; quantity is ignored.

    This is the useful type for order-level discounts: there the price
    argument is the discounted subtotal of the whole order.
    """

    type_name = "amount_threshold"

    min_total_price: float
    discount: float

    def discount_percent(self, price: float, quantity: float) -> float:
        return self.discount if price >= self.min_total_price else 0.0

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "AmountDiscount":
        return cls(
            min_total_price=float(params["min_total_price"]),
            discount=float(params["discount"]),
        )
