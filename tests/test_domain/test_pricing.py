"""
가격 계산 테스트
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from loguru import logger

from catalog_core.domain import pricing
from catalog_core.domain.pricing import PricingEngine
from catalog_core.exceptions import InvalidInputError, ValidationError
from catalog_core.models.product import Product


@pytest.fixture
def engine():
    return PricingEngine(decimal_places=2)


def make_product(price, discount=0, quantity=5, in_stock=True):
    return Product(
        product_id="p-test",
        price=Decimal(str(price)),
        discount=Decimal(str(discount)),
        quantity=quantity,
        in_stock=in_stock,
    )


class TestFinalPrice:
    """최종 판매가 테스트"""

    def test_discounted_product(self, engine):
        """price 100, discount 25 -> 75.00 / 25% / 할인 있음"""
        product = make_product(100, 25)

        assert engine.final_price(product) == Decimal("75.00")
        assert str(engine.final_price(product)) == "75.00"
        assert engine.discount_percentage(product) == 25
        assert engine.has_discount(product) is True

    def test_no_discount_returns_rounded_price(self, engine):
        product = make_product("19.999")

        assert engine.final_price(product) == Decimal("20.00")
        assert engine.discount_percentage(product) == 0
        assert engine.has_discount(product) is False

    def test_rounding_half_up(self, engine):
        assert engine.final_price(make_product("10.005")) == Decimal("10.01")

    @pytest.mark.parametrize(
        "price,discount",
        [(0, 0), (1, 1), ("9.99", "0.01"), (250, "249.99"), ("1000.50", "0.50")],
    )
    def test_final_price_bounds(self, engine, price, discount):
        """최종가는 0 이상, 판매가 이하"""
        product = make_product(price, discount)
        result = engine.final_price(product)

        assert Decimal("0") <= result <= Decimal(str(price)).quantize(Decimal("0.01"))

    @pytest.mark.parametrize("price", [-1, "NaN", float("inf"), None, "abc", True])
    def test_invalid_price_raises(self, engine, price):
        with pytest.raises(InvalidInputError):
            engine.final_price({"price": price, "discount": 0})

    def test_discount_larger_than_price_is_clamped(self, engine):
        assert engine.final_price({"price": 10, "discount": 15}) == Decimal("0.00")

    def test_accepts_plain_objects(self, engine):
        item = SimpleNamespace(price=Decimal("50"), discount=Decimal("5"))

        assert engine.final_price(item) == Decimal("45.00")

    def test_non_numeric_discount_falls_back_to_zero(self, engine):
        assert engine.final_price({"price": "30", "discount": "n/a"}) == Decimal("30.00")
        assert engine.has_discount({"price": "30", "discount": "n/a"}) is False


class TestDiscountPercentage:
    """할인율 테스트"""

    def test_rounds_to_integer(self, engine):
        assert engine.discount_percentage(make_product(3, 1)) == 33
        assert engine.discount_percentage(make_product(8, 1)) == 13  # 12.5 -> 13

    def test_zero_price_with_discount_does_not_raise(self, engine):
        """판매가 0 + 할인 -> 할인율 0, 할인 여부는 True"""
        product = {"productId": "p-zero", "price": 0, "discount": 5}

        assert engine.discount_percentage(product) == 0
        assert engine.has_discount(product) is True

    @pytest.mark.parametrize(
        "price,discount",
        [(100, 0), (100, 1), (100, "0.4"), (50, 50), ("12.34", "1.23"), (1, 0)],
    )
    def test_has_discount_matches_percentage(self, engine, price, discount):
        """0원 상품이 아니면 has_discount == (할인율 > 0)"""
        product = make_product(price, discount)
        if engine.discount_percentage(product) > 0:
            assert engine.has_discount(product)
        if not engine.has_discount(product):
            assert engine.discount_percentage(product) == 0
            assert engine.final_price(product) == Decimal(str(price)).quantize(Decimal("0.01"))

    def test_small_discount_rounds_to_zero_percent(self, engine):
        """할인 0.4% -> 할인율 0이지만 할인은 존재"""
        product = make_product(100, "0.4")

        assert engine.discount_percentage(product) == 0
        assert engine.has_discount(product) is True


class TestSupplementalPricing:
    """판매 가능 여부, 할인율 변환, 가격 검증"""

    def test_is_sellable(self, engine):
        assert engine.is_sellable(make_product(10, quantity=3, in_stock=True)) is True
        assert engine.is_sellable(make_product(10, quantity=0, in_stock=True)) is False
        assert engine.is_sellable(make_product(10, quantity=3, in_stock=False)) is False
        assert engine.is_sellable({"price": 10, "quantity": "2", "inStock": True}) is True

    def test_discount_from_percentage(self, engine):
        assert engine.discount_from_percentage(200, 15) == Decimal("30.00")
        assert engine.discount_from_percentage("19.99", 10) == Decimal("2.00")

    @pytest.mark.parametrize("percent", [-1, 101, "abc", None])
    def test_discount_from_percentage_rejects_out_of_range(self, engine, percent):
        with pytest.raises(ValidationError):
            engine.discount_from_percentage(100, percent)

    def test_validate_new_price(self, engine):
        assert engine.validate_new_price("12.5") == Decimal("12.50")
        with pytest.raises(ValidationError):
            engine.validate_new_price(0)
        with pytest.raises(ValidationError):
            engine.validate_new_price("")

    def test_validate_discount(self, engine):
        assert engine.validate_discount(100, "25") == Decimal("25.00")
        assert engine.validate_discount(100, 100) == Decimal("100.00")
        for discount in (-1, "100.01", "x"):
            with pytest.raises(ValidationError):
                engine.validate_discount(100, discount)

    def test_price_summary(self, engine):
        summary = engine.price_summary(make_product(100, 25, quantity=0, in_stock=False))

        assert summary.price == Decimal("100.00")
        assert summary.final_price == Decimal("75.00")
        assert summary.discount_amount == Decimal("25.00")
        assert summary.discount_percentage == 25
        assert summary.has_discount is True
        assert summary.is_sellable is False

    def test_decimal_places_from_settings(self, monkeypatch):
        monkeypatch.setenv("PRICE_DECIMAL_PLACES", "0")

        assert PricingEngine().final_price(make_product("10.5")) == Decimal("11")


def test_module_level_functions():
    product = make_product(100, 25)

    assert pricing.final_price(product) == Decimal("75.00")
    assert pricing.discount_percentage(product) == 25
    assert pricing.has_discount(product) is True
    assert pricing.is_sellable(product) is True


def test_data_quality_warning_uses_module_logger(engine):
    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="WARNING")
    try:
        engine.final_price({"price": 10, "discount": 15})
    finally:
        logger.remove(sink_id)

    assert records[0]["extra"]["name"] == "catalog_core.domain.pricing"
    assert "할인 금액이 판매가보다 큽니다" in records[0]["message"]
