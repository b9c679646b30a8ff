"""category_service: 카테고리 관련 비즈니스 로직을 처리하는 서비스."""

from typing import List, Optional

from models import category_models
from models.category_models import Category
from schemas.category_schemas import CategoryRequest


class CategoryService:
    """카테고리 관리 서비스."""

    @staticmethod
    async def create(category_data: CategoryRequest) -> Category:
        """카테고리 생성."""
        return await category_models.create_category(
            name=category_data.name,
            slug=category_data.slug,
            description=category_data.description,
            sort_order=category_data.sort_order,
        )

    @staticmethod
    async def find_by_id(category_id: int) -> Optional[Category]:
        """ID로 카테고리 조회. 없으면 None."""
        return await category_models.get_category_by_id(category_id)

    @staticmethod
    async def update(
        category_id: int, category_data: CategoryRequest
    ) -> Optional[Category]:
        """카테고리 수정. 대상이 없으면 None."""
        return await category_models.update_category(
            category_id,
            name=category_data.name,
            slug=category_data.slug,
            description=category_data.description,
            sort_order=category_data.sort_order,
        )

    @staticmethod
    async def delete(category_id: int) -> None:
        """카테고리 삭제.

        대상이 없으면 RecordNotFoundError가 전파됩니다.
        """
        await category_models.delete_category(category_id)

    @staticmethod
    async def find_all() -> List[Category]:
        """전체 카테고리 목록 조회 (정렬 순서 기준)."""
        return await category_models.get_all_categories()
