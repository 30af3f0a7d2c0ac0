from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .base import Discount, register


@register
@dataclass(frozen=True)
class FixedDiscount(Discount):
    """Same fraction for every price and quantity."""

    type_name = "fixed"

    discount: float

    def discount_percent(self, price: float, quantity: float) -> float:
        return self.discount

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "FixedDiscount":
        return cls(discount=float(params["discount"]))
