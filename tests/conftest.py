"""
pytest 공통 fixtures 및 설정
"""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from catalog_core.config import get_settings  # noqa: E402
from tests.fixtures.mock_storage import RecordingStorage  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """테스트마다 설정 캐시 초기화"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_env(monkeypatch, tmp_path):
    """테스트 환경 변수 설정"""
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOCAL_DATA_PATH", str(tmp_path / "data"))
    yield


@pytest.fixture
def sample_products():
    """샘플 상품 레코드 (원격 API 형식)"""
    return [
        {
            "productId": "p1",
            "productName": "무선 마우스",
            "price": 100,
            "discount": 25,
            "quantity": 10,
            "inStock": True,
            "categoryIds": ["cat-electronics"],
        },
        {
            "productId": "p3",
            "productName": "마우스 패드",
            "price": "19.90",
            "discount": None,
            "quantity": "3",
            "inStock": True,
            "categoryIds": ["cat-accessories"],
        },
        {
            "productId": "p4",
            "productName": "USB 허브",
            "price": Decimal("45.00"),
            "discount": "abc",
            "quantity": None,
            "inStock": False,
            "categoryIds": [],
        },
    ]


@pytest.fixture
def sample_reviews():
    """샘플 리뷰 레코드"""
    return [
        {"reviewId": "r1", "productId": "p1", "userId": "u1", "username": "kim", "rating": 5,
         "comment": "great", "approved": False},
        {"reviewId": "r2", "productId": "p1", "userId": "u2", "username": "lee", "rating": 4,
         "comment": "좋아요", "approved": True},
        {"reviewId": "r3", "productId": "p1", "userId": "u3", "username": "park", "rating": 1,
         "comment": "", "approved": False},
        {"reviewId": "r4", "productId": "p3", "userId": "u1", "username": "kim", "rating": 3,
         "comment": "so-so", "approved": None},
    ]


@pytest.fixture
def storage(sample_products, sample_reviews):
    """샘플 데이터가 들어 있는 기록용 저장소"""
    return RecordingStorage(products=sample_products, reviews=sample_reviews)
