"""
카탈로그 일관성 코어
상품 가격 계산, 카테고리 일괄 지정, 리뷰 검수 상태 관리
"""

__version__ = "0.1.0"
