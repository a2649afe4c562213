"""
리뷰 검수 모듈
리뷰 상태(대기/승인/거절) 분류, 상태 전이 검증, 목록 화면용 집계
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from catalog_core.exceptions import IllegalTransitionError, ReviewNotFoundError
from catalog_core.models.review import Review, ReviewStatus
from catalog_core.monitoring.logger import get_logger
from catalog_core.storage.base import ReviewRepository

logger = get_logger(__name__)


def classify(approved: Optional[bool], comment: Optional[str]) -> ReviewStatus:
    """(approved, comment) 조합으로 리뷰 상태 계산"""
    return ReviewStatus.derive(approved, comment)


@dataclass
class ReviewCounts:
    """상품별 리뷰 집계"""

    pending: int = 0
    approved: int = 0
    rejected: int = 0

    @property
    def total(self) -> int:
        return self.pending + self.approved + self.rejected

    def to_dict(self) -> Dict[str, int]:
        return {
            "pending": self.pending,
            "approved": self.approved,
            "rejected": self.rejected,
            "total": self.total,
        }


def has_pending(reviews: Iterable[Review]) -> bool:
    """검수 대기 리뷰 존재 여부"""
    return any(review.status == ReviewStatus.PENDING for review in reviews)


def count_by_status(reviews: Iterable[Review], rejected_snapshot: int = 0) -> ReviewCounts:
    """
    상태별 리뷰 수

    거절된 리뷰는 삭제되므로 현재 목록만으로는 다시 셀 수 없다.
    삭제 전에 기록한 거절 건수를 rejected_snapshot으로 전달한다.
    """
    counts = ReviewCounts(rejected=rejected_snapshot)
    for review in reviews:
        if review.status == ReviewStatus.APPROVED:
            counts.approved += 1
        elif review.status == ReviewStatus.PENDING:
            counts.pending += 1
        else:
            counts.rejected += 1
    return counts


def filter_reviews(
    reviews: Iterable[Review],
    status: Optional[ReviewStatus] = None,
    query: Optional[str] = None,
) -> List[Review]:
    """
    리뷰 목록 필터

    Args:
        reviews: 리뷰 목록
        status: 상태 필터 (None이면 전체)
        query: 코멘트/작성자 검색어 (대소문자 무시)
    """
    filtered = list(reviews)

    if status is not None:
        filtered = [r for r in filtered if r.status == ReviewStatus(status)]

    if query and query.strip():
        needle = query.strip().lower()
        filtered = [
            r
            for r in filtered
            if needle in (r.comment or "").lower()
            or needle in (r.username or r.user_id or "").lower()
        ]

    return filtered


def approved_comments(reviews: Iterable[Review]) -> List[str]:
    """공개 화면용 승인 리뷰 코멘트"""
    return [r.comment for r in reviews if r.status == ReviewStatus.APPROVED and r.comment]


def average_rating(reviews: Iterable[Review]) -> Optional[float]:
    """승인 리뷰 평균 평점 (승인 리뷰가 없으면 None)"""
    ratings = [r.rating for r in reviews if r.status == ReviewStatus.APPROVED]
    if not ratings:
        return None
    return round(sum(ratings) / len(ratings), 2)


class ModerationLedger:
    """삭제 전 거절 리뷰 스냅샷 기록"""

    def __init__(self):
        self._rejected: Dict[str, List[Review]] = defaultdict(list)

    def record_rejection(self, review: Review):
        self._rejected[review.product_id].append(review)

    def rejected_count(self, product_id: str) -> int:
        return len(self._rejected.get(product_id, []))

    def rejected_reviews(self, product_id: str) -> List[Review]:
        return list(self._rejected.get(product_id, []))

    def counts_for(self, product_id: str, current_reviews: Iterable[Review]) -> ReviewCounts:
        """현재 리뷰와 거절 스냅샷을 합친 집계"""
        return count_by_status(current_reviews, rejected_snapshot=self.rejected_count(product_id))


class ReviewModerator:
    """
    리뷰 검수 상태 머신

    전이는 두 가지뿐이며 모두 단방향이다:
        - 대기 -> 승인: approved = True (코멘트 유지)
        - 대기 -> 거절: 리뷰 레코드 삭제
    """

    def __init__(self, repository: ReviewRepository, ledger: Optional[ModerationLedger] = None):
        self.repository = repository
        self.ledger = ledger or ModerationLedger()

    def _current(self, review: Union[Review, str]) -> Optional[Review]:
        # 전달된 인스턴스가 오래된 상태일 수 있으므로 항상 저장소에서 다시 조회
        review_id = review.review_id if isinstance(review, Review) else review
        return self.repository.find_review(review_id)

    def status_of(self, review: Union[Review, str]) -> Optional[ReviewStatus]:
        """현재 상태 (리뷰가 없으면 None)"""
        review = self._current(review)
        return review.status if review else None

    def approve(self, review: Union[Review, str]) -> Review:
        """
        리뷰 승인

        이미 승인된 리뷰는 아무것도 하지 않고 성공으로 처리한다.

        Raises:
            ReviewNotFoundError: 리뷰가 없을 때
            IllegalTransitionError: 거절 상태의 리뷰일 때
        """
        review_id = review.review_id if isinstance(review, Review) else review
        review = self._current(review)
        if review is None:
            raise ReviewNotFoundError(f"review not found: {review_id}")

        if review.status == ReviewStatus.APPROVED:
            logger.debug(f"이미 승인된 리뷰: {review_id}")
            return review

        if review.status != ReviewStatus.PENDING:
            raise IllegalTransitionError(review_id, review.status.value, "approve")

        self.repository.set_approved(review_id)
        logger.bind(product_id=review.product_id).info(f"리뷰 승인: {review_id}")
        return review.model_copy(update={"approved": True, "status": ReviewStatus.APPROVED})

    def reject(self, review: Union[Review, str]) -> bool:
        """
        리뷰 거절 (레코드 삭제)

        존재하지 않거나 이미 거절된 리뷰는 성공으로 처리한다 (멱등 삭제).

        Returns:
            실제로 삭제했으면 True

        Raises:
            IllegalTransitionError: 승인된 리뷰일 때
        """
        review_id = review.review_id if isinstance(review, Review) else review
        review = self._current(review)
        if review is None:
            logger.debug(f"이미 삭제된 리뷰: {review_id}")
            return False

        if review.status == ReviewStatus.APPROVED:
            raise IllegalTransitionError(review_id, review.status.value, "reject")

        # 삭제가 성공한 경우에만 삭제 전 스냅샷을 기록
        self.repository.delete(review_id)
        self.ledger.record_rejection(review)
        logger.bind(product_id=review.product_id).info(f"리뷰 거절 및 삭제: {review_id}")
        return True

    def counts_for(self, product_id: str) -> ReviewCounts:
        """상품별 리뷰 집계 (거절 스냅샷 포함)"""
        return self.ledger.counts_for(product_id, self.repository.list_by_product(product_id))
