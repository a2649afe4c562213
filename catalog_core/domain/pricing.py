"""
가격 계산 모듈
상품의 표시 가격, 할인 금액/할인율, 판매 가능 여부를 계산 (부수 효과 없음)
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from catalog_core.config import get_settings
from catalog_core.exceptions import InvalidInputError, ValidationError
from catalog_core.models.product import coerce_decimal, coerce_int
from catalog_core.monitoring.logger import get_logger

logger = get_logger(__name__)


def _field(product: Any, *names: str) -> Any:
    """모델/객체/dict에서 필드 값 조회 (snake_case, camelCase 순)"""
    for name in names:
        if isinstance(product, Mapping):
            if name in product:
                return product[name]
        elif hasattr(product, name):
            return getattr(product, name)
    return None


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, str):
            return Decimal(value.strip())
        return Decimal(str(value))
    except InvalidOperation:
        return None


@dataclass
class PriceSummary:
    """목록 화면용 가격 요약"""

    price: Decimal
    final_price: Decimal
    discount_amount: Decimal
    discount_percentage: int
    has_discount: bool
    is_sellable: bool


class PricingEngine:
    """
    상품 가격 계산기

    할인(discount)은 비율이 아니라 절대 금액이다.
    Product 모델, 속성을 가진 객체, dict 모두 입력으로 받는다.
    """

    def __init__(self, decimal_places: Optional[int] = None):
        if decimal_places is None:
            decimal_places = get_settings().price_decimal_places
        self.decimal_places = decimal_places
        self.quantum = Decimal(1).scaleb(-decimal_places)

    def _round(self, amount: Decimal) -> Decimal:
        return amount.quantize(self.quantum, rounding=ROUND_HALF_UP)

    def _read_price(self, product: Any) -> Decimal:
        raw = _field(product, "price")
        price = _to_decimal(raw)
        if price is None or not price.is_finite() or price < 0:
            raise InvalidInputError(f"price must be a finite non-negative number: {raw!r}")
        return price

    def _read_discount(self, product: Any) -> Decimal:
        discount = coerce_decimal(_field(product, "discount"))
        if discount < 0:
            raise InvalidInputError(f"discount must be non-negative: {discount}")
        return discount

    def has_discount(self, product: Any) -> bool:
        """할인 여부 (discount > 0)"""
        return self._read_discount(product) > 0

    def final_price(self, product: Any) -> Decimal:
        """
        최종 판매가

        discount > 0이면 price - discount, 아니면 price를 소수점 자리수에 맞춰 반올림한다.

        Raises:
            InvalidInputError: price가 유한한 0 이상의 숫자가 아닐 때
        """
        price = self._read_price(product)
        discount = self._read_discount(product)

        if discount <= 0:
            return self._round(price)

        final = price - discount
        if final < 0:
            # 할인 금액이 판매가를 넘는 데이터 품질 문제
            logger.warning(f"할인 금액이 판매가보다 큽니다: price={price}, discount={discount}")
            final = Decimal("0")
        return self._round(final)

    def discount_amount(self, product: Any) -> Decimal:
        """실제로 적용되는 할인 금액"""
        price = self._read_price(product)
        discount = self._read_discount(product)
        return self._round(min(discount, price))

    def discount_percentage(self, product: Any) -> int:
        """
        할인율 (정수, 반올림)

        판매가가 0인데 할인이 있으면 예외 없이 0을 반환하고 경고를 남긴다.
        """
        discount = self._read_discount(product)
        if discount <= 0:
            return 0

        price = self._read_price(product)
        if price == 0:
            logger.warning(
                f"판매가 0 상품에 할인이 설정되어 할인율을 0으로 처리합니다: "
                f"product={_field(product, 'product_id', 'productId')}, discount={discount}"
            )
            return 0

        percentage = (discount / price * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return int(percentage)

    def is_sellable(self, product: Any) -> bool:
        """판매 가능 여부 (재고 표시 및 수량 모두 충족)"""
        in_stock = _field(product, "in_stock", "inStock")
        quantity = coerce_int(_field(product, "quantity"))
        return bool(in_stock) and quantity > 0

    def discount_from_percentage(self, price: Any, percent: Any) -> Decimal:
        """
        할인율(%)을 상품에 저장할 할인 금액으로 변환

        Args:
            price: 판매가
            percent: 할인율 (0 ~ 100)

        Returns:
            할인 금액
        """
        rate = _to_decimal(percent)
        if rate is None or not rate.is_finite() or rate < 0 or rate > 100:
            raise ValidationError(f"할인율은 0~100 사이여야 합니다: {percent!r}")

        base = self._read_price({"price": price})
        return self._round(base * rate / 100)

    def validate_new_price(self, price: Any) -> Decimal:
        """가격 수정 입력 검증 (0보다 큰 유한한 숫자)"""
        value = _to_decimal(price)
        if value is None or not value.is_finite() or value <= 0:
            raise ValidationError(f"가격은 0보다 커야 합니다: {price!r}")
        return self._round(value)

    def validate_discount(self, price: Any, discount: Any) -> Decimal:
        """할인 금액 입력 검증 (0 이상, 판매가 이하)"""
        base = self._read_price({"price": price})
        value = _to_decimal(discount)
        if value is None or not value.is_finite() or value < 0 or value > base:
            raise ValidationError(f"할인 금액은 0 이상 판매가 이하여야 합니다: {discount!r}")
        return self._round(value)

    def price_summary(self, product: Any) -> PriceSummary:
        """가격 관련 값 일괄 계산"""
        return PriceSummary(
            price=self._round(self._read_price(product)),
            final_price=self.final_price(product),
            discount_amount=self.discount_amount(product),
            discount_percentage=self.discount_percentage(product),
            has_discount=self.has_discount(product),
            is_sellable=self.is_sellable(product),
        )


def final_price(product: Any) -> Decimal:
    return PricingEngine().final_price(product)


def discount_percentage(product: Any) -> int:
    return PricingEngine().discount_percentage(product)


def has_discount(product: Any) -> bool:
    return PricingEngine().has_discount(product)


def is_sellable(product: Any) -> bool:
    return PricingEngine().is_sellable(product)
