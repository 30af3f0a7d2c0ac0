import pytest

from orderprice.discount_types import AmountDiscount


@pytest.mark.parametrize(
    "price,quantity,expected",
    [
        (99.99, 1000, 0.0),
        (100, 0, 0.05),
        (100, 1, 0.05),
        (230.85, 0, 0.05),
    ],
)
def test_amount_discount_on_price_only(price, quantity, expected):
    assert AmountDiscount(100, 0.05).discount_percent(price, quantity) == expected


def test_amount_discount_from_params():
    d = AmountDiscount.from_params({"min_total_price": 100, "discount": 0.05})
    assert d == AmountDiscount(100.0, 0.05)
    assert d.type_name == "amount_threshold"
