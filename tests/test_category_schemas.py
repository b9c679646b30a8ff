"""category_schemas 단위 테스트."""

from datetime import datetime, timezone, timedelta

from models.category_models import Category
from schemas.category_schemas import (
    CategoryRequest,
    CategoryResponse,
    validate_category_request,
)


class TestValidateCategoryRequest:
    """validate_category_request 함수 테스트."""

    def test_valid_payload(self):
        """유효한 요청은 DTO와 빈 에러 목록을 반환합니다."""
        dto, errors = validate_category_request(
            {"name": "  자유게시판 ", "slug": "free", "description": "  ", "sort_order": 1}
        )

        assert errors == []
        assert isinstance(dto, CategoryRequest)
        assert dto.name == "자유게시판"
        assert dto.description is None
        assert dto.sort_order == 1

    def test_missing_fields(self):
        """필수 필드가 없으면 필드마다 에러를 반환합니다."""
        dto, errors = validate_category_request({})

        assert dto is None
        assert {error["field"] for error in errors} == {"name", "slug"}
        assert all(error["type"] == "missing" for error in errors)
        assert all(error["message"] for error in errors)

    def test_invalid_slug(self):
        """slug는 소문자, 숫자, 하이픈만 허용합니다."""
        for slug in ("Free", "free board", "-free", "free-", "free--board"):
            dto, errors = validate_category_request({"name": "자유", "slug": slug})
            assert dto is None
            assert errors[0]["field"] == "slug"

    def test_too_long_name(self):
        """이름은 50자를 넘을 수 없습니다."""
        dto, errors = validate_category_request({"name": "가" * 51, "slug": "long"})

        assert dto is None
        assert errors[0]["field"] == "name"

    def test_name_length_checked_after_strip(self):
        """길이 제한은 공백을 제거한 이름에 적용됩니다."""
        dto, errors = validate_category_request({"name": "가" * 50 + " ", "slug": "long"})

        assert errors == []
        assert dto.name == "가" * 50

    def test_description_length_checked_after_strip(self):
        """설명도 공백을 제거한 뒤 길이를 검사합니다."""
        dto, errors = validate_category_request(
            {"name": "자유", "slug": "free", "description": " " + "a" * 255 + " "}
        )

        assert errors == []
        assert dto.description == "a" * 255

    def test_sort_order_bounds(self):
        """sort_order는 INT UNSIGNED 범위만 허용합니다."""
        dto, errors = validate_category_request(
            {"name": "자유", "slug": "free", "sort_order": 4294967295}
        )
        assert errors == []
        assert dto.sort_order == 4294967295

        for value in (2**40, 4294967296, -1):
            dto, errors = validate_category_request(
                {"name": "자유", "slug": "free", "sort_order": value}
            )
            assert dto is None
            assert errors[0]["field"] == "sort_order"

    def test_sort_order_rejects_coercible_values(self):
        """정수로 변환 가능한 bool, 문자열, 실수도 거부합니다."""
        for value in (True, False, "7", 7.0):
            dto, errors = validate_category_request(
                {"name": "자유", "slug": "free", "sort_order": value}
            )
            assert dto is None
            assert errors[0]["field"] == "sort_order"

    def test_wrong_type(self):
        """sort_order가 정수가 아니면 에러를 반환합니다."""
        dto, errors = validate_category_request(
            {"name": "자유", "slug": "free", "sort_order": "first"}
        )

        assert dto is None
        assert errors[0]["field"] == "sort_order"

    def test_non_object_payload(self):
        """객체가 아닌 본문은 body 에러로 보고합니다."""
        for payload in (None, [], "free", 3):
            dto, errors = validate_category_request(payload)
            assert dto is None
            assert errors[0]["field"] == "body"

    def test_errors_are_json_serializable(self):
        """에러 항목은 문자열로만 구성됩니다."""
        _, errors = validate_category_request({"name": 1, "slug": None, "x": b"\x00"})

        for error in errors:
            assert set(error) == {"field", "message", "type"}
            assert all(isinstance(value, str) for value in error.values())


class TestCategoryResponse:
    """CategoryResponse.from_raw 테스트."""

    def test_from_raw(self):
        """엔티티 필드를 그대로 옮기고 생성 시간을 ISO 8601로 변환합니다."""
        category = Category(
            id=3,
            name="정보공유",
            slug="info",
            description=None,
            sort_order=3,
            created_at=datetime(2024, 1, 2, 3, 4, 5),
        )

        dto = CategoryResponse.from_raw(category)

        assert dto.model_dump() == {
            "category_id": 3,
            "name": "정보공유",
            "slug": "info",
            "description": None,
            "sort_order": 3,
            "created_at": "2024-01-02T03:04:05Z",
        }

    def test_from_raw_converts_to_utc(self):
        """타임존이 있는 생성 시간은 UTC로 변환합니다."""
        kst = timezone(timedelta(hours=9))
        category = Category(
            id=1,
            name="자유",
            slug="free",
            description="설명",
            sort_order=0,
            created_at=datetime(2024, 1, 2, 9, 0, 0, tzinfo=kst),
        )

        assert CategoryResponse.from_raw(category).created_at == "2024-01-02T00:00:00Z"

    def test_from_raw_without_created_at(self):
        """생성 시간이 없으면 None입니다."""
        category = Category(id=1, name="자유", slug="free", description=None, sort_order=0)

        assert CategoryResponse.from_raw(category).created_at is None
