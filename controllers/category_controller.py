"""category_controller: 카테고리 관련 컨트롤러 모듈.

카테고리 생성, 조회, 수정, 삭제 핸들러를 제공합니다.
검증 실패(400)와 미존재(404)만 여기서 처리하고,
그 외 예외는 전역 예외 핸들러로 전파됩니다.
"""

import logging
from typing import Any

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from schemas.category_schemas import CategoryResponse, validate_category_request
from services.category_service import CategoryService
from utils.exceptions import RecordNotFoundError


logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND_MESSAGE = "Category not found"


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": CATEGORY_NOT_FOUND_MESSAGE},
    )


def _parse_category_id(raw_id: str) -> int | None:
    """경로의 ID 문자열을 정수로 변환합니다. 정수가 아니면 None."""
    try:
        return int(raw_id)
    except ValueError:
        return None


async def _read_body(request: Request) -> tuple[Any, list[dict[str, str]]]:
    """요청 본문을 JSON으로 파싱합니다."""
    try:
        return await request.json(), []
    except ValueError:
        return None, [
            {
                "field": "body",
                "message": "요청 본문이 올바른 JSON 형식이 아닙니다.",
                "type": "json_invalid",
            }
        ]


async def create_category(request: Request) -> Response:
    """카테고리를 생성합니다.

    Args:
        request: FastAPI Request 객체.

    Returns:
        201 생성된 카테고리, 검증 실패 시 400 에러 목록.
    """
    payload, errors = await _read_body(request)
    if not errors:
        category_data, errors = validate_category_request(payload)

    if errors:
        logger.debug("카테고리 생성 요청 검증 실패: %s", errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors}
        )

    category = await CategoryService.create(category_data)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=CategoryResponse.from_raw(category).model_dump(),
    )


async def get_category(category_id: str, request: Request) -> Response:
    """카테고리 하나를 조회합니다.

    Args:
        category_id: 경로의 카테고리 ID.
        request: FastAPI Request 객체.

    Returns:
        200 카테고리, 없으면 404.
    """
    parsed_id = _parse_category_id(category_id)
    if parsed_id is None:
        return _not_found()

    category = await CategoryService.find_by_id(parsed_id)
    if not category:
        return _not_found()

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=CategoryResponse.from_raw(category).model_dump(),
    )


async def update_category(category_id: str, request: Request) -> Response:
    """카테고리를 수정합니다.

    검증은 생성과 동일하게 수행되며, 실패 시 서비스를 호출하지 않습니다.
    저장소 예외는 잡지 않고 전역 예외 핸들러로 전파합니다.

    Args:
        category_id: 경로의 카테고리 ID.
        request: FastAPI Request 객체.

    Returns:
        200 수정된 카테고리, 검증 실패 시 400, 없으면 404.
    """
    payload, errors = await _read_body(request)
    if not errors:
        category_data, errors = validate_category_request(payload)

    if errors:
        logger.debug("카테고리 수정 요청 검증 실패: %s", errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors}
        )

    parsed_id = _parse_category_id(category_id)
    if parsed_id is None:
        return _not_found()

    category = await CategoryService.update(parsed_id, category_data)
    if not category:
        return _not_found()

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=CategoryResponse.from_raw(category).model_dump(),
    )


async def delete_category(category_id: str, request: Request) -> Response:
    """카테고리를 삭제합니다.

    Args:
        category_id: 경로의 카테고리 ID.
        request: FastAPI Request 객체.

    Returns:
        204 빈 응답, 없으면 404.
    """
    parsed_id = _parse_category_id(category_id)
    if parsed_id is None:
        return _not_found()

    try:
        await CategoryService.delete(parsed_id)
    except RecordNotFoundError:
        logger.info("삭제 대상 카테고리 없음: %s", parsed_id)
        return _not_found()

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def get_categories(request: Request) -> Response:
    """카테고리 목록을 조회합니다.

    Args:
        request: FastAPI Request 객체.

    Returns:
        200 카테고리 배열 (서비스가 반환한 순서 유지).
    """
    categories = await CategoryService.find_all()

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=[CategoryResponse.from_raw(cat).model_dump() for cat in categories],
    )
