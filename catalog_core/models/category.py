"""
카테고리 데이터 모델
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CategoryInput(BaseModel):
    """카테고리 생성 요청"""

    category_name: str = Field(default="", description="카테고리명 (필수)")
    description: Optional[str] = Field(None, description="설명")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @property
    def normalized_name(self) -> str:
        return self.category_name.strip()

    @property
    def normalized_description(self) -> Optional[str]:
        """빈 설명은 None으로 전달"""
        return self.description or None


class Category(BaseModel):
    """카테고리 (ID는 저장소가 발급)"""

    category_id: Optional[str] = Field(None, description="카테고리 ID")
    category_name: str = Field(..., description="카테고리명")
    description: Optional[str] = Field(None, description="설명")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @property
    def has_identifier(self) -> bool:
        return bool(self.category_id and self.category_id.strip())
