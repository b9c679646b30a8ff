"""category_schemas: 카테고리 관련 Pydantic 모델 모듈.

카테고리 생성/수정 요청 스키마, 응답 스키마, 요청 검증 함수를 정의합니다.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.category_models import Category
from utils.formatters import format_datetime


SORT_ORDER_MAX = 4294967295


class CategoryRequest(BaseModel):
    """카테고리 생성/수정 요청 모델.

    문자열 길이 제한은 앞뒤 공백을 제거한 값에 적용됩니다.

    Attributes:
        name: 카테고리 이름 (1~50자).
        slug: URL용 식별자 (영문 소문자, 숫자, 하이픈, 1~50자).
        description: 설명 (선택, 최대 255자).
        sort_order: 정렬 순서 (0 ~ INT UNSIGNED 최댓값, 정수만 허용).
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=50)
    slug: str = Field(..., min_length=1, max_length=50, pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$")
    description: str | None = Field(None, max_length=255)
    # category.sort_order 컬럼은 INT UNSIGNED
    sort_order: int = Field(0, ge=0, le=SORT_ORDER_MAX, strict=True)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        """이름의 앞뒤 공백을 길이 검증 전에 제거합니다.

        Args:
            v: 입력된 이름.

        Returns:
            공백이 제거된 이름. 문자열이 아니면 그대로 반환하여 타입 검증에 맡깁니다.
        """
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v: Any) -> Any:
        """설명의 앞뒤 공백을 제거하고, 빈 문자열은 None으로 처리합니다."""
        if isinstance(v, str):
            return v.strip() or None
        return v


class CategoryResponse(BaseModel):
    """카테고리 응답 모델."""

    category_id: int
    name: str
    slug: str
    description: str | None
    sort_order: int
    created_at: str | None

    @classmethod
    def from_raw(cls, category: Category) -> "CategoryResponse":
        """Category 엔티티를 응답 모델로 변환합니다."""
        return cls(
            category_id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            sort_order=category.sort_order,
            created_at=format_datetime(category.created_at),
        )


def _format_error(error: dict[str, Any]) -> dict[str, str]:
    """Pydantic 에러 항목을 응답용 딕셔너리로 변환합니다."""
    loc = [str(part) for part in error.get("loc", ())]
    return {
        "field": ".".join(loc) or "body",
        "message": error["msg"],
        "type": error["type"],
    }


def validate_category_request(
    payload: Any,
) -> tuple[CategoryRequest | None, list[dict[str, str]]]:
    """요청 본문으로 CategoryRequest를 생성하고 검증합니다.

    예외를 던지지 않고 (DTO, 에러 목록) 쌍을 반환합니다.
    검증에 성공하면 에러 목록이 비어 있고, 실패하면 DTO가 None입니다.

    Args:
        payload: 파싱된 JSON 요청 본문.

    Returns:
        검증된 요청 모델과 필드별 에러 목록.
    """
    try:
        return CategoryRequest.model_validate(payload), []
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        return None, [_format_error(error) for error in errors]
