"""
저장소 기본 인터페이스
원격 API, 파일 등 다양한 저장소 구현을 위한 추상 클래스
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from catalog_core.models.category import Category
from catalog_core.models.product import Product
from catalog_core.models.review import Review


class ProductRepository(ABC):
    """상품 저장소"""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        상품 조회

        Args:
            product_id: 상품 ID

        Returns:
            상품 또는 None
        """
        pass

    @abstractmethod
    def update(self, product_id: str, fields: Dict[str, Any]) -> Product:
        """
        상품 전체 레코드 갱신

        Args:
            product_id: 상품 ID
            fields: 갱신할 전체 필드

        Returns:
            갱신된 상품

        Raises:
            Exception: 저장 실패시 (구현체별 예외)
        """
        pass


class CategoryRepository(ABC):
    """카테고리 저장소"""

    @abstractmethod
    def create(self, category_name: str, description: Optional[str] = None) -> Category:
        """
        카테고리 생성 (ID는 저장소가 발급)

        Args:
            category_name: 카테고리명
            description: 설명

        Returns:
            생성된 카테고리
        """
        pass


class ReviewRepository(ABC):
    """리뷰 저장소"""

    @abstractmethod
    def find_review(self, review_id: str) -> Optional[Review]:
        """리뷰 조회"""
        pass

    @abstractmethod
    def set_approved(self, review_id: str) -> None:
        """리뷰 승인 (approved = True, 코멘트 유지)"""
        pass

    @abstractmethod
    def delete(self, review_id: str) -> None:
        """리뷰 삭제 (존재하지 않아도 오류 아님)"""
        pass

    @abstractmethod
    def list_by_product(self, product_id: str) -> List[Review]:
        """상품별 리뷰 목록"""
        pass


class BaseStorage(ProductRepository, CategoryRepository, ReviewRepository):
    """상품/카테고리/리뷰 저장소를 한 번에 구현하는 저장소"""

    pass
