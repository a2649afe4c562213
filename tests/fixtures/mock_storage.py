"""
테스트용 기록 저장소
호출 기록과 상품별 실패 주입을 지원
"""

from typing import Any, Dict, List, Optional, Tuple

from catalog_core.models.product import Product
from catalog_core.storage.memory_storage import InMemoryStorage


class RecordingStorage(InMemoryStorage):
    """호출을 기록하는 메모리 저장소"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls: List[Tuple[str, Any]] = []
        self.update_errors: Dict[str, Exception] = {}
        self.lookup_errors: Dict[str, Exception] = {}

    @property
    def update_calls(self) -> List[str]:
        return [arg for name, arg in self.calls if name == "update"]

    def find_by_id(self, product_id: str) -> Optional[Product]:
        self.calls.append(("find_by_id", product_id))
        if product_id in self.lookup_errors:
            raise self.lookup_errors[product_id]
        return super().find_by_id(product_id)

    def update(self, product_id: str, fields: Dict[str, Any]) -> Product:
        self.calls.append(("update", product_id))
        if product_id in self.update_errors:
            raise self.update_errors[product_id]
        return super().update(product_id, fields)

    def create(self, category_name: str, description: Optional[str] = None):
        self.calls.append(("create", category_name))
        return super().create(category_name, description)

    def set_approved(self, review_id: str) -> None:
        self.calls.append(("set_approved", review_id))
        super().set_approved(review_id)

    def delete(self, review_id: str) -> None:
        self.calls.append(("delete", review_id))
        super().delete(review_id)
