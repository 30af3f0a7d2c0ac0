#!/usr/bin/env python3
"""
Demo script for the order price calculator.
Prices every order of a catalog, prints the explain trail per line and
checks the expected totals.

Usage: python demo_pricing.py [catalog.yaml]
"""

import sys

from orderprice.core.logging_config import logger, setup_logging
from orderprice.core.settings import get_settings
from orderprice.engine.calculator import CumulativePriceCalculator
from orderprice.engine.catalog import Catalog
from orderprice.utils.tolerance import are_equal


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    setup_logging(settings.log_level, json=settings.log_json)

    catalog = Catalog.from_yaml_file(argv[0] if argv else settings.catalog_path)
    calc = CumulativePriceCalculator()

    print("Order price calculator - demo")
    print("=" * 50)

    failures = 0
    for entry in catalog.orders:
        order = entry.order
        result = calc.explain(order)
        buyer = order.buyer.name if order.buyer is not None else "-"

        print(f"\nOrder {order.id} (customer: {buyer})")
        print("-" * 40)
        for line in result.lines:
            for step in line.steps:
                print(f"  [{line.line_no}] {step}")
        for step in result.steps:
            print(f"  {step}")
        print(f"  Subtotal: {result.subtotal:.4f}")
        print(f"  Total:    {result.total:.4f}")

        if entry.expected_total is None:
            continue

        if are_equal(result.total, entry.expected_total, settings.price_tolerance):
            print(f"  OK (expected {entry.expected_total})")
        else:
            failures += 1
            print(f"  MISMATCH (expected {entry.expected_total})")
            logger.error(
                "expected_total_mismatch",
                order_id=order.id,
                expected=entry.expected_total,
                actual=result.total,
            )

    print()
    print(f"{len(catalog.orders)} orders priced, {failures} mismatches")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
