"""전역 예외 핸들러 및 요청 컨텍스트 단위 테스트."""

import json
from datetime import datetime, timezone

import pytest
from starlette.requests import Request

from core.config import settings
from dependencies.request_context import get_request_timestamp
from middleware.exception_handler import global_exception_handler


def _make_request(path: str = "/v1/categories/1", method: str = "PUT") -> Request:
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "headers": [],
            "query_string": b"",
            "scheme": "http",
            "server": ("test", 80),
        }
    )


@pytest.mark.asyncio
async def test_global_exception_handler_debug(monkeypatch):
    """DEBUG 모드에서는 예외 메시지를 detail로 포함합니다."""
    monkeypatch.setattr(settings, "DEBUG", True)
    request = _make_request()
    request.state.request_time = datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc)

    response = await global_exception_handler(request, RuntimeError("db down"))

    assert response.status_code == 500
    body = json.loads(response.body)
    assert body["error"] == "Internal Server Error"
    assert body["detail"] == "db down"
    assert body["timestamp"] == "2024-05-01T10:00:00Z"
    assert len(body["trackingID"]) == 36


@pytest.mark.asyncio
async def test_global_exception_handler_production(monkeypatch):
    """운영 모드에서는 상세 에러를 숨깁니다."""
    monkeypatch.setattr(settings, "DEBUG", False)

    response = await global_exception_handler(_make_request(), ValueError("secret"))

    body = json.loads(response.body)
    assert response.status_code == 500
    assert "detail" not in body


@pytest.mark.asyncio
async def test_global_exception_handler_unique_tracking_id():
    """요청마다 다른 추적 ID를 발급합니다."""
    first = json.loads((await global_exception_handler(_make_request(), Exception())).body)
    second = json.loads((await global_exception_handler(_make_request(), Exception())).body)

    assert first["trackingID"] != second["trackingID"]


def test_get_request_timestamp_fallback():
    """미들웨어가 시간을 설정하지 않았으면 현재 시각을 사용합니다."""
    timestamp = get_request_timestamp(_make_request())

    parsed = datetime.strptime(timestamp, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
    assert abs((datetime.now(timezone.utc) - parsed).total_seconds()) < 5
