from .tolerance import PRICE_EPS, are_equal, is_close

__all__ = ["PRICE_EPS", "are_equal", "is_close"]
