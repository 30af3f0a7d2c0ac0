from .calculator import (
    ORDER_LEVEL_QUANTITY,
    CumulativePriceCalculator,
    PriceCalculator,
    calculate_price,
)
from .explanation import LinePrice, PriceExplanation

__all__ = [
    "ORDER_LEVEL_QUANTITY",
    "CumulativePriceCalculator",
    "PriceCalculator",
    "calculate_price",
    "LinePrice",
    "PriceExplanation",
]
