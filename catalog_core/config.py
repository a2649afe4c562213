"""
설정 관리 모듈
환경 변수를 읽어 Pydantic 모델로 변환하여 타입 안전성 보장
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env 파일 로드 (이미 설정된 환경 변수는 유지)
load_dotenv(dotenv_path=".env", override=False)


class Settings(BaseSettings):
    """전체 애플리케이션 설정"""

    # 환경
    env: Literal["development", "staging", "production", "test"] = Field(default="development")
    debug: bool = Field(default=False)

    # 로깅
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    json_logs: bool = Field(default=False)

    # 로컬 JSON 저장소 경로
    local_data_path: Path = Field(default=Path("./data"))

    # 가격 표시 정밀도 (소수점 자리수)
    price_decimal_places: int = Field(default=2, ge=0, le=6)

    # 리뷰 평점 범위
    review_min_rating: int = Field(default=1)
    review_max_rating: int = Field(default=5)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def create_log_path(cls, v):
        if v:
            path = Path(v)
            path.parent.mkdir(parents=True, exist_ok=True)
            return path
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def check_rating_scale(self):
        if self.review_min_rating > self.review_max_rating:
            raise ValueError("review_min_rating은 review_max_rating보다 클 수 없습니다")
        return self

    def is_production(self) -> bool:
        """프로덕션 환경 여부"""
        return self.env == "production"

    def is_development(self) -> bool:
        """개발 환경 여부"""
        return self.env == "development"


@lru_cache()
def get_settings() -> Settings:
    """설정 싱글톤 인스턴스 반환"""
    return Settings()
