# timing: 요청 타이밍 미들웨어
# 각 요청에 타임스탬프를 주입하여 일관된 시간 정보를 제공합니다.

from datetime import datetime, timezone
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class TimingMiddleware(BaseHTTPMiddleware):
    """
    요청 타이밍 미들웨어

    각 요청이 들어올 때 UTC 타임스탬프를 request.state에 저장하고,
    같은 값을 X-Request-Time 응답 헤더로 돌려준다.
    """

    async def dispatch(self, request: Request, call_next):
        request_time = datetime.now(timezone.utc)
        request.state.request_time = request_time

        response = await call_next(request)

        response.headers["X-Request-Time"] = request_time.strftime("%Y-%m-%dT%H:%M:%SZ")
        return response
