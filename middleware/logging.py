# logging: 요청/응답 로깅 미들웨어
# 모든 HTTP 요청과 응답에 로그를 남긴다.

import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# 로거 설정
logger = logging.getLogger("api")
logger.setLevel(logging.INFO)

# 콘솔 핸들러 추가 (없는 경우)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    요청/응답 로깅 미들웨어

    모든 HTTP 요청의 메소드, 경로, 상태 코드, 처리 시간을 로그로 남긴다.
    처리되지 않은 예외는 전역 핸들러에서 기록하므로 여기서는 다시 던지기만 한다.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        logger.info(f"-> {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.perf_counter() - start_time

        logger.info(
            f"<- {request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.3f}s"
        )

        return response
