from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .base import Discount, register


@register
@dataclass(frozen=True)
class PriceDiscount(Discount):
    """Applies once the line value (price * quantity) reaches min_total_price."""

    type_name = "price_threshold"

    min_total_price: float
    discount: float

    def discount_percent(self, price: float, quantity: float) -> float:
        return self.discount if price * quantity >= self.min_total_price else 0.0

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "PriceDiscount":
        return cls(
            min_total_price=float(params["min_total_price"]),
            discount=float(params["discount"]),
        )
