from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from jsonschema import validate

from ..core.logging_config import logger
from ..discount_types.base import Discount, build_discount
from ..domain.models import Article, ArticleUnit, Customer, Order, OrderLine

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "catalog.schema.json"


class CatalogError(ValueError):
    """Catalog document is well-formed but inconsistent (ids / references)."""


@dataclass(frozen=True)
class CatalogOrder:
    order: Order
    expected_total: Optional[float] = None


@dataclass(frozen=True)
class Catalog:
    """
    Discounts, customers, articles and orders built from one document.

    References are by id and resolve to the same shared instance, so one
    discount object can back many articles, customers and orders.
    """

    discounts: Dict[str, Discount] = field(default_factory=dict)
    customers: Dict[str, Customer] = field(default_factory=dict)
    articles: Dict[int, Article] = field(default_factory=dict)
    orders: List[CatalogOrder] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Catalog":
        discounts: Dict[str, Discount] = {}
        for discount_id, spec in (d.get("discounts") or {}).items():
            try:
                discounts[str(discount_id)] = build_discount(str(spec["type"]), dict(spec.get("params") or {}))
            except KeyError as e:
                raise CatalogError(f"Discount '{discount_id}': {e}") from e

        def ref(kind: str, owner: str, discount_id: Optional[str]) -> Optional[Discount]:
            if discount_id is None:
                return None
            try:
                return discounts[str(discount_id)]
            except KeyError:
                raise CatalogError(f"{kind} '{owner}' references unknown discount '{discount_id}'")

        customers: Dict[str, Customer] = {}
        for customer_id, spec in (d.get("customers") or {}).items():
            spec = spec or {}
            customers[str(customer_id)] = Customer(
                name=str(spec.get("name") or customer_id),
                discount=ref("Customer", str(customer_id), spec.get("discount")),
            )

        articles: Dict[int, Article] = {}
        for spec in d.get("articles") or []:
            article_id = int(spec["id"])
            if article_id in articles:
                raise CatalogError(f"Duplicate article id: {article_id}")
            articles[article_id] = Article(
                id=article_id,
                name=str(spec["name"]),
                price=float(spec["price"]),
                unit=ArticleUnit(spec.get("unit", ArticleUnit.PIECE.value)),
                discount=ref("Article", str(article_id), spec.get("discount")),
            )

        orders: List[CatalogOrder] = []
        seen_orders = set()
        for spec in d.get("orders") or []:
            order_id = int(spec["id"])
            if order_id in seen_orders:
                raise CatalogError(f"Duplicate order id: {order_id}")
            seen_orders.add(order_id)

            customer_id = spec.get("customer")
            buyer = None
            if customer_id is not None:
                if str(customer_id) not in customers:
                    raise CatalogError(f"Order '{order_id}' references unknown customer '{customer_id}'")
                buyer = customers[str(customer_id)]

            lines: List[OrderLine] = []
            for line in spec.get("lines") or []:
                article_id = int(line["article"])
                if article_id not in articles:
                    raise CatalogError(f"Order '{order_id}' references unknown article '{article_id}'")
                lines.append(
                    OrderLine(
                        product=articles[article_id],
                        quantity=int(line["quantity"]),
                        discount=ref("Order line of", str(order_id), line.get("discount")),
                    )
                )

            expected = spec.get("expected_total")
            orders.append(
                CatalogOrder(
                    order=Order(
                        id=order_id,
                        buyer=buyer,
                        lines=lines,
                        discount=ref("Order", str(order_id), spec.get("discount")),
                    ),
                    expected_total=float(expected) if expected is not None else None,
                )
            )

        return Catalog(discounts=discounts, customers=customers, articles=articles, orders=orders)

    @classmethod
    def from_yaml_file(cls, path: str) -> "Catalog":
        catalog_path = Path(path)

        with catalog_path.open("r", encoding="utf-8") as f:
            d = yaml.safe_load(f) or {}

        with SCHEMA_PATH.open("r", encoding="utf-8") as f:
            schema = json.load(f)

        validate(instance=d, schema=schema)
        catalog = cls.from_dict(d)

        logger.info(
            "catalog_loaded",
            path=str(catalog_path),
            discounts=len(catalog.discounts),
            customers=len(catalog.customers),
            articles=len(catalog.articles),
            orders=len(catalog.orders),
        )
        return catalog
