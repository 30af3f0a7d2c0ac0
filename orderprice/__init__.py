"""
orderprice — final order price from stacked discounts.

Public entry point: calculate_price(order).
"""

from .discount_types import AmountDiscount, Discount, FixedDiscount, PriceDiscount, VolumeDiscount
from .domain import Article, ArticleUnit, Customer, Order, OrderLine
from .engine import CumulativePriceCalculator, PriceCalculator, PriceExplanation, calculate_price

__all__ = [
    "Discount",
    "FixedDiscount",
    "VolumeDiscount",
    "PriceDiscount",
    "AmountDiscount",
    "Article",
    "ArticleUnit",
    "Customer",
    "Order",
    "OrderLine",
    "PriceCalculator",
    "CumulativePriceCalculator",
    "PriceExplanation",
    "calculate_price",
]
