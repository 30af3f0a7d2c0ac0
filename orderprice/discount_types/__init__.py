# Ensure registration happens by importing modules
from .base import Discount, build_discount, discount_registry, register  # noqa
from .fixed import FixedDiscount
from .volume import VolumeDiscount
from .price_threshold import PriceDiscount
from .amount_threshold import AmountDiscount

__all__ = [
    "Discount",
    "FixedDiscount",
    "VolumeDiscount",
    "PriceDiscount",
    "AmountDiscount",
    "build_discount",
    "discount_registry",
    "register",
]
