"""exception_handler: 전역 예외 처리 핸들러 모듈.

컨트롤러에서 처리하지 않은 예외를 일관된 형식의 응답으로 변환합니다.
"""

import uuid
import logging
import traceback
from logging.handlers import RotatingFileHandler
from fastapi import Request, status
from fastapi.responses import JSONResponse

from core.config import settings
from dependencies.request_context import get_request_timestamp


logger = logging.getLogger("api")

# 에러 전용 파일 로거 설정
error_logger = logging.getLogger("api.error")
error_logger.setLevel(logging.ERROR)

# RotatingFileHandler: 10MB 단위로 로테이션, 최대 5개 백업 파일
if not error_logger.handlers:
    error_file_handler = RotatingFileHandler(
        settings.ERROR_LOG_PATH,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
        delay=True,
    )
    error_file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    error_logger.addHandler(error_file_handler)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """전역 예외 처리 핸들러.

    모든 예외를 잡아서 일관된 형식의 500 에러 응답을 반환합니다.
    프로덕션 환경(DEBUG=False)에서는 상세 에러 정보를 숨깁니다.

    Args:
        request: FastAPI Request 객체.
        exc: 발생한 예외.

    Returns:
        500 에러 JSON 응답.
    """
    tracking_id = str(uuid.uuid4())
    timestamp = get_request_timestamp(request)

    logger.error(
        f"[{tracking_id}] Unhandled exception on "
        f"{request.method} {request.url.path}: {exc}"
    )

    error_logger.error(
        f"[{tracking_id}] Unhandled exception: {exc}\n"
        + "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )

    content = {
        "trackingID": tracking_id,
        "error": "Internal Server Error",
        "timestamp": timestamp,
    }

    # DEBUG 모드에서만 상세 정보 포함
    if settings.DEBUG:
        content["detail"] = str(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )
