from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .base import Discount, register


@register
@dataclass(frozen=True)
class VolumeDiscount(Discount):
    """
    Staffel on quantity: applies once quantity >= min_quantity.

    At order level the calculator passes quantity 0, so a volume discount
    attached to an order never triggers for a positive min_quantity.
    """

    type_name = "volume"

    min_quantity: float
    discount: float

    def discount_percent(self, price: float, quantity: float) -> float:
        return self.discount if quantity >= self.min_quantity else 0.0

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "VolumeDiscount":
        return cls(
            min_quantity=float(params["min_quantity"]),
            discount=float(params["discount"]),
        )
