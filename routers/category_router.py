"""category_router: 카테고리 관련 라우터 모듈.

카테고리 CRUD 엔드포인트를 제공합니다.
요청 본문 검증은 컨트롤러에서 수행하므로 본문은 Request로 직접 전달합니다.
"""

from fastapi import APIRouter, Request, Response, status
from controllers import category_controller

category_router = APIRouter(prefix="/v1/categories", tags=["categories"])
"""카테고리 관련 라우터 인스턴스."""


@category_router.get("/", status_code=status.HTTP_200_OK)
async def get_categories(request: Request) -> Response:
    """카테고리 목록을 조회합니다."""
    return await category_controller.get_categories(request)


@category_router.post("/", status_code=status.HTTP_201_CREATED)
async def create_category(request: Request) -> Response:
    """새 카테고리를 생성합니다.

    Args:
        request: FastAPI Request 객체 (JSON 본문: name, slug, description, sort_order).

    Returns:
        생성된 카테고리.
    """
    return await category_controller.create_category(request)


@category_router.get("/{category_id}", status_code=status.HTTP_200_OK)
async def get_category(category_id: str, request: Request) -> Response:
    """특정 카테고리를 조회합니다."""
    return await category_controller.get_category(category_id, request)


@category_router.put("/{category_id}", status_code=status.HTTP_200_OK)
async def update_category(category_id: str, request: Request) -> Response:
    """카테고리를 수정합니다.

    Args:
        category_id: 수정할 카테고리 ID.
        request: FastAPI Request 객체 (JSON 본문).

    Returns:
        수정된 카테고리.
    """
    return await category_controller.update_category(category_id, request)


@category_router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str, request: Request) -> Response:
    """카테고리를 삭제합니다."""
    return await category_controller.delete_category(category_id, request)
