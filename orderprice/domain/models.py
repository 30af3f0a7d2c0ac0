from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..discount_types.base import Discount


class ArticleUnit(str, Enum):
    # Informational only; pricing is always price * quantity
    PIECE = "piece"
    KG = "kg"
    METER = "meter"
    SQMETER = "sqmeter"
    CMETER = "cmeter"
    LITER = "liter"


@dataclass(frozen=True)
class Article:
    id: int
    name: str
    price: float
    unit: ArticleUnit = ArticleUnit.PIECE
    discount: Optional[Discount] = None  # catalog discount


@dataclass(frozen=True)
class Customer:
    name: str
    discount: Optional[Discount] = None  # loyalty discount, every line of every order


@dataclass(frozen=True)
class OrderLine:
    product: Article
    quantity: int
    discount: Optional[Discount] = None  # promotional, this line only


@dataclass(frozen=True)
class Order:
    """
    Input for the price calculator.

    Preconditions (not checked): prices and quantities are finite and
    non-negative. buyer=None is the anonymous customer.
    """

    id: int
    buyer: Optional[Customer] = None
    lines: List[OrderLine] = field(default_factory=list)
    discount: Optional[Discount] = None  # on the subtotal, after all lines
