"""
JSON 파일 기반 저장소
개발용으로 원격 API 없이 로컬 파일에 상품/카테고리/리뷰 저장
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from catalog_core.config import get_settings
from catalog_core.storage.memory_storage import InMemoryStorage


def _json_default(value: Any):
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class JSONStorage(InMemoryStorage):
    """JSON 파일 기반 저장소 구현"""

    def __init__(self, base_path: Optional[str] = None):
        """
        Args:
            base_path: 데이터 저장 경로 (None이면 설정의 local_data_path)
        """
        super().__init__()

        self.base_path = Path(base_path) if base_path else get_settings().local_data_path
        self.base_path.mkdir(parents=True, exist_ok=True)

        # 데이터 파일 경로
        self.products_file = self.base_path / "products.json"
        self.categories_file = self.base_path / "categories.json"
        self.reviews_file = self.base_path / "reviews.json"

        self._load_data()

    def _read_file(self, path: Path, label: str) -> Dict[str, Dict[str, Any]]:
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"{label} 데이터 로드 실패: {e}")
            return {}

        logger.info(f"{label} 데이터 {len(data)}개 로드됨")
        return data

    def _load_data(self):
        """파일에서 데이터 로드"""
        self._products = self._read_file(self.products_file, "상품")
        self._categories = self._read_file(self.categories_file, "카테고리")
        self._reviews = self._read_file(self.reviews_file, "리뷰")

    def _persist(self):
        """메모리 데이터를 파일에 저장 (호출자가 락 보유)"""
        try:
            for path, data in (
                (self.products_file, self._products),
                (self.categories_file, self._categories),
                (self.reviews_file, self._reviews),
            ):
                with open(path, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2, default=_json_default)
        except OSError as e:
            logger.error(f"데이터 저장 실패: {e}")
            raise
