"""
카테고리 일괄 지정 모듈
카테고리를 생성한 뒤 선택한 기존 상품들에 추가하고 상품별 결과를 집계
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from catalog_core.exceptions import (
    CategoryCreationError,
    InvariantViolationError,
    ValidationError,
)
from catalog_core.models.category import CategoryInput
from catalog_core.monitoring.logger import get_logger
from catalog_core.storage.base import CategoryRepository, ProductRepository

logger = get_logger(__name__)

PRODUCT_NOT_FOUND = "product not found"


class AssignmentStatus(str, Enum):
    """상품별 처리 결과"""

    SUCCESS = "success"  # 카테고리 추가됨
    SKIPPED_ALREADY_MEMBER = "skipped_already_member"  # 이미 포함되어 쓰기 생략
    FAILED = "failed"  # 조회 또는 저장 실패


@dataclass
class CategoryAssignmentOutcome:
    """상품 한 건의 처리 결과"""

    product_id: str
    status: AssignmentStatus
    error_detail: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"productId": self.product_id, "status": self.status.value}
        if self.error_detail is not None:
            data["errorDetail"] = self.error_detail
        return data


@dataclass
class AssignmentReport:
    """일괄 지정 결과 (입력 순서 유지)"""

    created_category_id: str
    outcomes: List[CategoryAssignmentOutcome] = field(default_factory=list)

    def _count(self, status: AssignmentStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def success_count(self) -> int:
        return self._count(AssignmentStatus.SUCCESS)

    @property
    def skipped_count(self) -> int:
        return self._count(AssignmentStatus.SKIPPED_ALREADY_MEMBER)

    @property
    def failed_count(self) -> int:
        return self._count(AssignmentStatus.FAILED)

    @property
    def failures(self) -> List[CategoryAssignmentOutcome]:
        return [o for o in self.outcomes if o.status == AssignmentStatus.FAILED]

    @property
    def failed_product_ids(self) -> List[str]:
        """재시도용 실패 상품 ID"""
        return [o.product_id for o in self.failures]

    @property
    def is_partial_success(self) -> bool:
        """일부 성공 (실패로 표시하면 안 됨)"""
        return self.success_count > 0 and self.failed_count > 0

    def summary(self) -> Dict[str, Any]:
        return {
            "createdCategoryId": self.created_category_id,
            "successCount": self.success_count,
            "skippedCount": self.skipped_count,
            "failedCount": self.failed_count,
            "failures": [
                {"productId": o.product_id, "errorDetail": o.error_detail} for o in self.failures
            ],
        }


def _error_detail(error: Exception) -> str:
    return str(error) or error.__class__.__name__


class CategoryAssignmentCoordinator:
    """
    카테고리 생성 및 상품 일괄 지정

    실패 처리 규칙:
        - 입력 검증 실패, 카테고리 생성 실패는 예외로 즉시 전파 (상품은 변경되지 않음)
        - 상품별 실패는 예외로 전파하지 않고 결과에 기록하며, 나머지 상품 처리를 계속함

    상품 갱신은 입력 순서대로 하나씩 수행하며 재시도하지 않는다.
    """

    def __init__(
        self, product_repository: ProductRepository, category_repository: CategoryRepository
    ):
        self.product_repository = product_repository
        self.category_repository = category_repository

    def assign(
        self,
        category_input: Union[CategoryInput, Mapping[str, Any]],
        product_ids: Iterable[str],
    ) -> AssignmentReport:
        """
        카테고리 생성 후 상품들에 추가

        Args:
            category_input: 카테고리 생성 요청 (categoryName 필수)
            product_ids: 카테고리를 추가할 상품 ID (중복은 첫 항목만 처리)

        Returns:
            AssignmentReport

        Raises:
            ValidationError: 카테고리명이 비어 있을 때
            CategoryCreationError: 카테고리 생성 실패
            InvariantViolationError: 생성된 카테고리에 ID가 없을 때
        """
        request = self._validate(category_input)
        category_id = self._create_category(request)
        logger.info(f"카테고리 '{request.normalized_name}' 생성: {category_id}")

        return self.add_to_products(category_id, product_ids)

    def add_to_products(self, category_id: str, product_ids: Iterable[str]) -> AssignmentReport:
        """
        이미 생성된 카테고리를 상품들에 추가

        실패한 상품만 다시 시도할 때 report.failed_product_ids와 함께 사용한다.
        """
        ordered_ids = list(dict.fromkeys(product_ids))

        log = logger.bind(category_id=category_id)
        log.info(f"상품 {len(ordered_ids)}개에 카테고리 지정 시작")

        report = AssignmentReport(created_category_id=category_id)
        for product_id in ordered_ids:
            outcome = self._assign_one(product_id, category_id)
            if outcome.status == AssignmentStatus.FAILED:
                log.warning(f"상품 {product_id} 카테고리 지정 실패: {outcome.error_detail}")
            elif outcome.status == AssignmentStatus.SKIPPED_ALREADY_MEMBER:
                log.debug(f"상품 {product_id}는 이미 카테고리에 포함됨")
            report.outcomes.append(outcome)

        log.info(
            f"카테고리 지정 완료: 성공 {report.success_count}, "
            f"생략 {report.skipped_count}, 실패 {report.failed_count}"
        )
        return report

    def _validate(self, category_input: Union[CategoryInput, Mapping[str, Any]]) -> CategoryInput:
        if isinstance(category_input, CategoryInput):
            request = category_input
        else:
            name = category_input.get("category_name", category_input.get("categoryName"))
            request = CategoryInput(
                category_name=name if isinstance(name, str) else "",
                description=category_input.get("description"),
            )

        if not request.normalized_name:
            raise ValidationError("Category name is required")
        return request

    def _create_category(self, request: CategoryInput) -> str:
        """카테고리 생성 후 발급된 ID 반환"""
        try:
            category = self.category_repository.create(
                request.normalized_name, request.normalized_description
            )
        except Exception as e:
            logger.error(f"카테고리 생성 실패: {e}")
            raise CategoryCreationError(f"failed to create category: {_error_detail(e)}") from e

        if isinstance(category, Mapping):
            category_id = category.get("category_id") or category.get("categoryId")
        else:
            category_id = getattr(category, "category_id", None)

        if not isinstance(category_id, str) or not category_id.strip():
            raise InvariantViolationError("category created without identifier")
        return category_id.strip()

    def _assign_one(self, product_id: str, category_id: str) -> CategoryAssignmentOutcome:
        """상품 한 건 처리 (예외를 결과로 변환)"""
        try:
            product = self.product_repository.find_by_id(product_id)
        except Exception as e:
            return CategoryAssignmentOutcome(product_id, AssignmentStatus.FAILED, _error_detail(e))

        if product is None:
            return CategoryAssignmentOutcome(product_id, AssignmentStatus.FAILED, PRODUCT_NOT_FOUND)

        if product.has_category(category_id):
            return CategoryAssignmentOutcome(product_id, AssignmentStatus.SKIPPED_ALREADY_MEMBER)

        try:
            fields = product.with_category(category_id).to_update_fields()
            self.product_repository.update(product_id, fields)
        except Exception as e:
            return CategoryAssignmentOutcome(product_id, AssignmentStatus.FAILED, _error_detail(e))

        return CategoryAssignmentOutcome(product_id, AssignmentStatus.SUCCESS)


def assign_category_to_products(
    category_input: Union[CategoryInput, Mapping[str, Any]],
    product_ids: Iterable[str],
    product_repository: ProductRepository,
    category_repository: CategoryRepository,
) -> AssignmentReport:
    """카테고리 생성 후 상품 일괄 지정"""
    coordinator = CategoryAssignmentCoordinator(product_repository, category_repository)
    return coordinator.assign(category_input, product_ids)
