"""
리뷰 데이터 모델
승인 상태는 저장되지 않고 (approved, comment) 조합에서 한 번 계산된다
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from catalog_core.config import get_settings


class ReviewStatus(str, Enum):
    """리뷰 검수 상태"""

    PENDING = "pending"  # 검수 대기
    APPROVED = "approved"  # 승인
    REJECTED = "rejected"  # 거절

    @classmethod
    def derive(cls, approved: Optional[bool], comment: Optional[str]) -> ReviewStatus:
        """
        저장된 필드로부터 상태 계산

        approved가 None(미결정)이면 False와 동일하게 취급한다.
        코멘트가 없는 미승인 리뷰는 거절로 본다.
        """
        if approved is True:
            return cls.APPROVED
        if comment is None or not comment.strip():
            return cls.REJECTED
        return cls.PENDING


class Review(BaseModel):
    """고객 리뷰"""

    review_id: str = Field(..., description="리뷰 ID")
    product_id: str = Field(..., description="상품 ID")
    user_id: Optional[str] = Field(None, description="작성자 ID")
    username: Optional[str] = Field(None, description="작성자 이름")

    rating: int = Field(..., description="평점")
    comment: Optional[str] = Field(None, description="리뷰 내용")
    approved: Optional[bool] = Field(None, description="승인 여부 (None = 미결정)")
    created_at: datetime = Field(default_factory=datetime.now)

    # 파생 상태 (입력값은 무시되고 항상 다시 계산됨)
    status: Optional[ReviewStatus] = Field(None, description="검수 상태")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("rating")
    @classmethod
    def rating_within_scale(cls, v):
        settings = get_settings()
        if not settings.review_min_rating <= v <= settings.review_max_rating:
            raise ValueError(
                f"평점은 {settings.review_min_rating}~{settings.review_max_rating} 사이여야 합니다"
            )
        return v

    @model_validator(mode="after")
    def derive_status(self):
        self.status = ReviewStatus.derive(self.approved, self.comment)
        return self

    @property
    def is_pending(self) -> bool:
        return self.status == ReviewStatus.PENDING

    @property
    def is_approved(self) -> bool:
        return self.status == ReviewStatus.APPROVED

    @property
    def is_rejected(self) -> bool:
        return self.status == ReviewStatus.REJECTED
