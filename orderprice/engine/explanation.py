from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class LinePrice:
    """
    Per order line output.
    steps is list[str] so consoles/exports consume strings only.
    """

    line_no: int
    article_id: int
    article_name: str
    quantity: int
    base_price: float
    net_price: float
    steps: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PriceExplanation:
    order_id: int
    subtotal: float  # sum of discounted lines, before the order discount
    order_discount_pct: float
    total: float
    lines: List[LinePrice] = field(default_factory=list)
    # order-level explain (ORDER_DISCOUNT) and warnings for the whole order
    steps: List[str] = field(default_factory=list)
    warnings: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
