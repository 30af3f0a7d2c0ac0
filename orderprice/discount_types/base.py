from __future__ import annotations

from typing import Any, Dict, Type


class Discount:
    """
    Base class for all discount types. Every type must implement
    discount_percent(price, quantity) and return the fraction of the price
    that is removed (0.1 == 10%).

    Instances are immutable after construction and may be shared by any
    number of articles, customers and orders.
    """

    type_name: str = "base"

    def discount_percent(self, price: float, quantity: float) -> float:
        raise NotImplementedError

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "Discount":
        raise NotImplementedError


# Registry: discount type -> Discount class
discount_registry: Dict[str, Type[Discount]] = {}


def register(discount_cls: Type[Discount]) -> Type[Discount]:
    """
    Decorator to register a discount by its type_name.
    Fails fast on duplicate registrations.
    """
    key = getattr(discount_cls, "type_name", None)
    if not key or key == Discount.type_name:
        raise ValueError(f"Discount class {discount_cls.__name__} has no type_name")

    if key in discount_registry and discount_registry[key] is not discount_cls:
        raise ValueError(
            f"Duplicate discount registration for type '{key}': "
            f"{discount_registry[key].__name__} vs {discount_cls.__name__}"
        )

    discount_registry[key] = discount_cls
    return discount_cls


def build_discount(type_name: str, params: Dict[str, Any] | None = None) -> Discount:
    try:
        discount_cls = discount_registry[type_name]
    except KeyError:
        raise KeyError(
            f"Unknown discount type '{type_name}'. Registered: {sorted(discount_registry.keys())}"
        )
    return discount_cls.from_params(params or {})
