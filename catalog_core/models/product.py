"""
상품 데이터 모델 정의
원격 API 레코드와 코어 로직 간 데이터 교환을 위한 표준 형식
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def coerce_decimal(value: Any) -> Decimal:
    """숫자형 변환 규칙: 값이 없거나 숫자가 아니면 0"""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value)) if math.isfinite(value) else Decimal("0")
    if isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation:
            return Decimal("0")
        return parsed if parsed.is_finite() else Decimal("0")
    return Decimal("0")


def coerce_int(value: Any) -> int:
    """정수 변환 (소수점 이하 버림), 실패 시 0"""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return int(coerce_decimal(value))


class Product(BaseModel):
    """상품 모델"""

    product_id: str = Field(..., description="상품 고유 ID")
    product_name: Optional[str] = Field(None, description="상품명")
    description: Optional[str] = Field(None, description="상품 설명")

    # 가격 정보
    price: Decimal = Field(default=Decimal("0"), description="판매가")
    discount: Decimal = Field(default=Decimal("0"), description="할인 금액 (비율 아님)")

    # 재고 (in_stock은 quantity에서 자동 계산하지 않음)
    quantity: int = Field(default=0, ge=0, description="재고 수량")
    in_stock: bool = Field(default=False, description="재고 보유 여부")

    # 카테고리 (순서 무관, 중복 불가)
    category_ids: List[str] = Field(default_factory=list, description="카테고리 ID 목록")

    images: List[str] = Field(default_factory=list, description="이미지 URL 목록")
    popularity: int = Field(default=0, description="인기도")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("price", "discount")
    @classmethod
    def amount_must_be_non_negative(cls, v):
        if not v.is_finite() or v < 0:
            raise ValueError("금액은 0 이상이어야 합니다")
        return v

    @field_validator("category_ids", mode="before")
    @classmethod
    def dedupe_category_ids(cls, v):
        if v is None:
            return []
        return list(dict.fromkeys(v))

    def has_category(self, category_id: str) -> bool:
        """카테고리 포함 여부"""
        return category_id in self.category_ids

    def with_category(self, category_id: str) -> Product:
        """카테고리를 추가한 새 상품 (기존 카테고리 유지)"""
        if self.has_category(category_id):
            return self
        return self.model_copy(update={"category_ids": [*self.category_ids, category_id]})

    def to_update_fields(self) -> Dict[str, Any]:
        """저장소 update()에 전달할 전체 레코드"""
        fields = self.model_dump()
        fields["price"] = coerce_decimal(fields.get("price"))
        fields["discount"] = coerce_decimal(fields.get("discount"))
        fields["quantity"] = coerce_int(fields.get("quantity"))
        return fields

    @classmethod
    def coerce(cls, raw: Mapping[str, Any]) -> Product:
        """
        타입이 불완전한 레코드로부터 상품 생성

        price/discount/quantity는 숫자로 변환하고, 누락되었거나 숫자가 아니면 0을 사용한다.
        snake_case와 camelCase 키를 모두 허용한다.
        """
        data = dict(raw)
        data["price"] = coerce_decimal(data.get("price"))
        data["discount"] = coerce_decimal(data.get("discount"))
        data["quantity"] = coerce_int(data.get("quantity"))
        return cls.model_validate(data)
