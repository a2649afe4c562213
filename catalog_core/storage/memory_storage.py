"""
메모리 기반 저장소
원격 API 없이 개발/테스트에서 사용하는 상품/카테고리/리뷰 저장소
"""

import uuid
from threading import Lock
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger

from catalog_core.exceptions import StorageError
from catalog_core.models.category import Category
from catalog_core.models.product import Product
from catalog_core.models.review import Review
from catalog_core.storage.base import BaseStorage

ProductRecord = Union[Product, Mapping[str, Any]]
ReviewRecord = Union[Review, Mapping[str, Any]]


class InMemoryStorage(BaseStorage):
    """메모리 저장소 구현"""

    def __init__(
        self,
        products: Optional[Iterable[ProductRecord]] = None,
        reviews: Optional[Iterable[ReviewRecord]] = None,
    ):
        # 레코드는 모델 필드명(snake_case) 기준 dict로 보관
        self._products: Dict[str, Dict[str, Any]] = {}
        self._categories: Dict[str, Dict[str, Any]] = {}
        self._reviews: Dict[str, Dict[str, Any]] = {}
        self._lock = Lock()

        for product in products or []:
            self.add_product(product)
        for review in reviews or []:
            self.add_review(review)

    def _persist(self):
        """변경 사항 영속화 (메모리 저장소는 없음)"""
        pass

    def _commit(
        self, table: Dict[str, Dict[str, Any]], key: str, record: Optional[Dict[str, Any]]
    ):
        """
        레코드를 반영하고 영속화 (호출자가 락 보유)

        영속화에 실패하면 이전 레코드로 되돌리고 예외를 그대로 전파한다.
        record가 None이면 삭제.
        """
        previous = table.get(key)
        if record is None:
            table.pop(key, None)
        else:
            table[key] = record

        try:
            self._persist()
        except Exception:
            if previous is None:
                table.pop(key, None)
            else:
                table[key] = previous
            raise

    # 상품

    def add_product(self, record: ProductRecord) -> Product:
        """상품 등록 (타입이 불완전한 레코드는 숫자 변환 규칙 적용)"""
        product = record if isinstance(record, Product) else Product.coerce(record)
        with self._lock:
            self._commit(self._products, product.product_id, product.model_dump())
        return product

    def find_by_id(self, product_id: str) -> Optional[Product]:
        record = self._products.get(product_id)
        if record is None:
            return None
        return Product.coerce(record)

    def update(self, product_id: str, fields: Dict[str, Any]) -> Product:
        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                raise StorageError(f"product not found: {product_id}")

            product = Product.coerce({**current, **fields, "product_id": product_id})
            self._commit(self._products, product_id, product.model_dump())

        logger.debug(f"상품 갱신: {product_id}")
        return product

    def list_products(self) -> List[Product]:
        return [Product.coerce(record) for record in self._products.values()]

    # 카테고리

    def create(self, category_name: str, description: Optional[str] = None) -> Category:
        category = Category(
            category_id=uuid.uuid4().hex, category_name=category_name, description=description
        )
        with self._lock:
            self._commit(self._categories, category.category_id, category.model_dump())

        logger.debug(f"카테고리 생성: {category.category_name} ({category.category_id})")
        return category

    def list_categories(self) -> List[Category]:
        return [Category.model_validate(record) for record in self._categories.values()]

    # 리뷰

    def add_review(self, record: ReviewRecord) -> Review:
        """리뷰 등록 (고객 작성 리뷰 수집)"""
        review = record if isinstance(record, Review) else Review.model_validate(record)
        with self._lock:
            self._commit(self._reviews, review.review_id, review.model_dump(exclude={"status"}))
        return review

    def find_review(self, review_id: str) -> Optional[Review]:
        record = self._reviews.get(review_id)
        if record is None:
            return None
        return Review.model_validate(record)

    def set_approved(self, review_id: str) -> None:
        with self._lock:
            record = self._reviews.get(review_id)
            if record is None:
                raise StorageError(f"review not found: {review_id}")
            self._commit(self._reviews, review_id, {**record, "approved": True})

    def delete(self, review_id: str) -> None:
        with self._lock:
            if review_id in self._reviews:
                self._commit(self._reviews, review_id, None)

    def list_by_product(self, product_id: str) -> List[Review]:
        reviews = [
            Review.model_validate(record)
            for record in self._reviews.values()
            if record.get("product_id") == product_id
        ]
        return sorted(reviews, key=lambda r: r.created_at)
