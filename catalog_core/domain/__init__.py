"""
도메인 로직 모듈
가격 계산, 카테고리 일괄 지정, 리뷰 검수 규칙을 담당
"""

from catalog_core.domain.category import (
    AssignmentReport,
    AssignmentStatus,
    CategoryAssignmentCoordinator,
    CategoryAssignmentOutcome,
    assign_category_to_products,
)
from catalog_core.domain.moderation import ModerationLedger, ReviewCounts, ReviewModerator, classify
from catalog_core.domain.pricing import PriceSummary, PricingEngine

__all__ = [
    "PricingEngine",
    "PriceSummary",
    "CategoryAssignmentCoordinator",
    "CategoryAssignmentOutcome",
    "AssignmentReport",
    "AssignmentStatus",
    "assign_category_to_products",
    "ReviewModerator",
    "ModerationLedger",
    "ReviewCounts",
    "classify",
]
