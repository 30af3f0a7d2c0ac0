from __future__ import annotations

import pytest

from orderprice.discount_types import AmountDiscount, FixedDiscount, PriceDiscount, VolumeDiscount
from orderprice.domain.models import Article, ArticleUnit, Customer
from orderprice.engine.calculator import CumulativePriceCalculator


# Same discounts, customers and articles as the shipped sample catalog


@pytest.fixture
def d_fixed():
    return FixedDiscount(0.1)


@pytest.fixture
def d_volume():
    return VolumeDiscount(10, 0.15)


@pytest.fixture
def d_price():
    return PriceDiscount(100, 0.05)


@pytest.fixture
def d_amount():
    return AmountDiscount(100, 0.05)


@pytest.fixture
def default_customer():
    return Customer("default", None)


@pytest.fixture
def john(d_fixed):
    return Customer("john", d_fixed)


@pytest.fixture
def joane(d_price):
    return Customer("joane", d_price)


@pytest.fixture
def pen():
    return Article(1, "pen", 5, ArticleUnit.PIECE, None)


@pytest.fixture
def expensive_pen(d_fixed):
    return Article(2, "expensive pen", 15, ArticleUnit.PIECE, d_fixed)


@pytest.fixture
def scissors(d_volume):
    return Article(3, "scissors", 10, ArticleUnit.PIECE, d_volume)


@pytest.fixture
def calc():
    return CumulativePriceCalculator()
