from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, cast

from ..core.logging_config import logger
from ..discount_types.base import Discount
from ..domain.models import Order, OrderLine
from ..explain.breakdown_builder import MAX_MESSAGE_LEN, Breakdown, BreakdownBuilder
from .explanation import LinePrice, PriceExplanation

# Order level discounts are asked with this quantity. Volume discounts on an
# order therefore never trigger (kept for compatibility with existing rules).
ORDER_LEVEL_QUANTITY = 0

# Article names are free text; explain messages are single line and bounded
ARTICLE_LABEL_MAX = 80


def _article_label(ol: OrderLine) -> str:
    name = " ".join(ol.product.name.split())[:ARTICLE_LABEL_MAX]
    return name or f"article {ol.product.id}"


def _bounded(message: str) -> str:
    # huge amounts render long with .2f
    return message[:MAX_MESSAGE_LEN]


class PriceCalculator:
    """
    Base class for calculators. Every calculator must implement
    calculate_price(order) and return the final order price.
    """

    def calculate_price(self, order: Order) -> float:
        raise NotImplementedError


class CumulativePriceCalculator(PriceCalculator):
    """
    Stacks all discounts multiplicatively.

    Per line, in this order:
      - catalog discount (article)
      - promotional discount (order line)
      - loyalty discount (customer of the order)
    Lines are summed into the subtotal; the order discount is applied once
    on that subtotal with quantity ORDER_LEVEL_QUANTITY.

    Missing customers or discounts contribute nothing. Fractions are used as
    given: a fraction >= 1 yields a zero or negative price, a negative one
    raises the price.

    Stateless: one instance may be shared between threads.
    """

    def calculate_price(self, order: Order) -> float:
        total, _ = self._fold(order, explain=False)
        return total

    def explain(self, order: Order) -> PriceExplanation:
        """Same calculation as calculate_price, with a per-line explain trail."""
        _, explanation = self._fold(order, explain=True)
        return cast(PriceExplanation, explanation)

    # -----------------
    # internals
    # -----------------

    def _fold(self, order: Order, explain: bool) -> Tuple[float, Optional[PriceExplanation]]:
        warnings: List[Dict[str, Any]] = []
        line_prices: List[LinePrice] = []

        price = 0.0
        for line_no, ol in enumerate(order.lines, start=1):
            breakdown = Breakdown() if explain else None
            line_price = self._price_line(order, ol, breakdown, warnings, line_no)
            price += line_price

            if breakdown is not None:
                line_prices.append(
                    LinePrice(
                        line_no=line_no,
                        article_id=ol.product.id,
                        article_name=ol.product.name,
                        quantity=ol.quantity,
                        base_price=ol.product.price * ol.quantity,
                        net_price=line_price,
                        steps=BreakdownBuilder().build(breakdown),
                    )
                )

        subtotal = price
        order_breakdown = Breakdown() if explain else None
        order_pct = 0.0

        if order.discount is not None:
            order_pct = order.discount.discount_percent(price, ORDER_LEVEL_QUANTITY)
            price = self._apply(
                price, order_pct, "ORDER_DISCOUNT", "Order discount", order.discount,
                order_breakdown, warnings, line_no=None,
            )

        logger.debug(
            "order_priced",
            order_id=order.id,
            lines=len(order.lines),
            subtotal=subtotal,
            total=price,
        )

        if not explain:
            return price, None

        return price, PriceExplanation(
            order_id=order.id,
            subtotal=subtotal,
            order_discount_pct=order_pct,
            total=price,
            lines=line_prices,
            steps=BreakdownBuilder().build(cast(Breakdown, order_breakdown)),
            warnings=warnings,
        )

    def _price_line(
        self,
        order: Order,
        ol: OrderLine,
        breakdown: Optional[Breakdown],
        warnings: List[Dict[str, Any]],
        line_no: int,
    ) -> float:
        unit_price = ol.product.price
        quantity = ol.quantity
        line_price = unit_price * quantity

        if breakdown is not None:
            breakdown.add_step("BASE", _bounded(f"{_article_label(ol)}: {quantity} x {unit_price:.2f} = {line_price:.2f}"))

        sources = [
            ("CATALOG_DISCOUNT", "Catalog discount", ol.product.discount),
            ("LINE_DISCOUNT", "Line discount", ol.discount),
            ("CUSTOMER_DISCOUNT", "Customer discount", order.buyer.discount if order.buyer is not None else None),
        ]
        for code, title, discount in sources:
            if discount is None:
                continue
            pct = discount.discount_percent(unit_price, quantity)
            line_price = self._apply(line_price, pct, code, title, discount, breakdown, warnings, line_no)

        return line_price

    @staticmethod
    def _apply(
        price: float,
        pct: float,
        code: str,
        title: str,
        discount: Discount,
        breakdown: Optional[Breakdown],
        warnings: List[Dict[str, Any]],
        line_no: Optional[int],
    ) -> float:
        after = price * (1.0 - pct)

        if breakdown is None:
            return after

        if pct < 0.0 or pct >= 1.0:
            message = _bounded(f"{title} ({discount.type_name}) fraction {pct} outside [0, 1), applied as given")
            breakdown.add_warning("DISCOUNT_OUT_OF_RANGE", message)
            warnings.append(
                {
                    "code": "DISCOUNT_OUT_OF_RANGE",
                    "message": message,
                    "meta": {"source": code, "lineNo": line_no, "pct": pct},
                }
            )

        if pct == 0.0:
            # Policy: no "-0%" steps, condition not met is meta only
            breakdown.add_meta(code, f"{title} ({discount.type_name}): condition not met")
        else:
            breakdown.add_step(code, _bounded(f"{title} ({discount.type_name}): {-pct:+.2%} ({price:.2f} -> {after:.2f})"))

        return after


_default_calculator = CumulativePriceCalculator()


def calculate_price(order: Order) -> float:
    """Final price of `order` with the cumulative strategy."""
    return _default_calculator.calculate_price(order)
