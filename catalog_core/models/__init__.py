"""데이터 모델"""

from catalog_core.models.category import Category, CategoryInput
from catalog_core.models.product import Product, coerce_decimal, coerce_int
from catalog_core.models.review import Review, ReviewStatus

__all__ = [
    "Product",
    "Category",
    "CategoryInput",
    "Review",
    "ReviewStatus",
    "coerce_decimal",
    "coerce_int",
]
