from __future__ import annotations

import itertools
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

import pytest

from orderprice.discount_types import AmountDiscount, FixedDiscount, PriceDiscount, VolumeDiscount
from orderprice.domain.models import Article, Customer, Order, OrderLine
from orderprice.utils.tolerance import is_close

DISCOUNTS = [
    FixedDiscount(0.1),
    FixedDiscount(0.0),
    VolumeDiscount(10, 0.15),
    PriceDiscount(100, 0.05),
    AmountDiscount(12, 0.2),
]

PRICES = [0.0, 0.99, 5.0, 12.5, 15.0, 199.99]
QUANTITIES = [1, 3, 10, 20, 250]


def _full_lines():
    for price, qty, (d_cat, d_line, d_cust) in itertools.product(
        PRICES, QUANTITIES, itertools.permutations(DISCOUNTS, 3)
    ):
        yield price, qty, d_cat, d_line, d_cust


@pytest.mark.parametrize("price,qty,d_cat,d_line,d_cust", list(_full_lines())[::7])
def test_line_factors_commute(calc, price, qty, d_cat, d_line, d_cust):
    article = Article(1, "a", price, discount=d_cat)
    order = Order(1, Customer("c", d_cust), [OrderLine(article, qty, d_line)])

    got = calc.calculate_price(order)

    factors = [1.0 - d.discount_percent(price, qty) for d in (d_cat, d_line, d_cust)]
    for perm in itertools.permutations(factors):
        expected = price * qty
        for f in perm:
            expected *= f
        assert is_close(got, expected)


def _order(price, qty, d_cat, d_line, d_cust, d_order):
    article = Article(1, "a", price, discount=d_cat)
    return Order(1, Customer("c", d_cust), [OrderLine(article, qty, d_line)], d_order)


@pytest.mark.parametrize("price", PRICES)
@pytest.mark.parametrize("qty", QUANTITIES)
def test_removing_a_discount_never_lowers_price(calc, price, qty):
    # order level fixed: a threshold on the subtotal could flip when a line discount is removed
    d_cat, d_line, d_cust, d_order = VolumeDiscount(10, 0.15), FixedDiscount(0.1), PriceDiscount(100, 0.05), FixedDiscount(0.05)
    full = _order(price, qty, d_cat, d_line, d_cust, d_order)
    with_all = calc.calculate_price(full)

    article = full.lines[0].product
    variants = [
        replace(full, lines=[replace(full.lines[0], product=replace(article, discount=None))]),
        replace(full, lines=[replace(full.lines[0], discount=None)]),
        replace(full, buyer=replace(full.buyer, discount=None)),
        replace(full, buyer=None),
        replace(full, discount=None),
    ]
    for v in variants:
        assert calc.calculate_price(v) >= with_all


@pytest.mark.parametrize("price", PRICES)
@pytest.mark.parametrize("qty", QUANTITIES)
def test_discount_construction_is_deterministic(price, qty):
    for make in (
        lambda: FixedDiscount(0.1),
        lambda: VolumeDiscount(10, 0.15),
        lambda: PriceDiscount(100, 0.05),
        lambda: AmountDiscount(100, 0.05),
    ):
        assert make().discount_percent(price, qty) == make().discount_percent(price, qty)


@pytest.mark.parametrize("subtotal_qty", [1, 10, 100, 10_000])
def test_volume_discount_on_order_never_applies(calc, pen, subtotal_qty):
    lines = [OrderLine(pen, subtotal_qty)]
    with_volume = Order(1, None, lines, VolumeDiscount(1, 0.5))
    without = Order(1, None, lines, None)
    assert calc.calculate_price(with_volume) == calc.calculate_price(without)


def test_line_order_does_not_matter(calc, pen, expensive_pen, scissors, joane, d_amount):
    lines = [OrderLine(pen, 3), OrderLine(expensive_pen, 20, FixedDiscount(0.1)), OrderLine(scissors, 12)]
    forward = calc.calculate_price(Order(1, joane, lines, d_amount))
    backward = calc.calculate_price(Order(1, joane, list(reversed(lines)), d_amount))
    assert is_close(forward, backward)


def test_shared_discount_instances_are_not_mutated(calc, expensive_pen, joane, d_fixed, d_amount):
    before = (d_fixed, expensive_pen, joane, d_amount)
    snapshot = [replace(x) for x in before]
    calc.calculate_price(Order(1, joane, [OrderLine(expensive_pen, 20, d_fixed)], d_amount))
    assert list(before) == snapshot


def test_concurrent_calls_on_distinct_orders(calc, expensive_pen, scissors, joane, d_fixed, d_amount):
    orders = [
        Order(i, joane, [OrderLine(expensive_pen, i % 25 + 1, d_fixed), OrderLine(scissors, i % 13 + 1)], d_amount)
        for i in range(200)
    ]
    expected = [calc.calculate_price(o) for o in orders]

    with ThreadPoolExecutor(max_workers=8) as pool:
        got = list(pool.map(calc.calculate_price, orders))

    assert got == expected
