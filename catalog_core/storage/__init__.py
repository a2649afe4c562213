"""Storage package"""

from catalog_core.storage.base import (
    BaseStorage,
    CategoryRepository,
    ProductRepository,
    ReviewRepository,
)
from catalog_core.storage.json_storage import JSONStorage
from catalog_core.storage.memory_storage import InMemoryStorage

__all__ = [
    "BaseStorage",
    "ProductRepository",
    "CategoryRepository",
    "ReviewRepository",
    "InMemoryStorage",
    "JSONStorage",
]
