"""
카탈로그 코어 예외 정의
배치 이전의 치명적 오류만 예외로 전파하고, 배치 중 상품별 실패는 결과 데이터로 수집한다
"""


class CatalogCoreError(Exception):
    """카탈로그 코어 최상위 예외"""

    pass


class ValidationError(CatalogCoreError):
    """잘못된 입력 (부수 효과 없음 보장)"""

    pass


class InvalidInputError(ValidationError):
    """가격 계산에 사용할 수 없는 값"""

    pass


class CategoryCreationError(CatalogCoreError):
    """카테고리 생성 실패 (상품은 변경되지 않음)"""

    pass


class InvariantViolationError(CatalogCoreError):
    """저장소가 구조적으로 불가능한 데이터를 반환함"""

    pass


class IllegalTransitionError(CatalogCoreError):
    """현재 리뷰 상태에서 허용되지 않는 전이"""

    def __init__(self, review_id: str, current_status: str, action: str):
        self.review_id = review_id
        self.current_status = current_status
        self.action = action
        super().__init__(f"cannot {action} review {review_id} in state {current_status}")


class ReviewNotFoundError(CatalogCoreError):
    """리뷰를 찾을 수 없음"""

    pass


class StorageError(CatalogCoreError):
    """저장소 쓰기/읽기 실패"""

    pass
