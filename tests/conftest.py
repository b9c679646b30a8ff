import sys
import os
import tempfile

# 설정 로딩에 필요한 DB 환경 변수 (테스트에서는 실제 MySQL에 연결하지 않음)
os.environ.setdefault("DB_HOST", "127.0.0.1")
os.environ.setdefault("DB_PORT", "3306")
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_NAME", "test_community")
os.environ.setdefault(
    "ERROR_LOG_PATH", os.path.join(tempfile.gettempdir(), "category_api_test_error.log")
)

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from main import app
from models import category_models
from models.category_models import Category
from utils.exceptions import RecordNotFoundError
from faker import Faker


class InMemoryCategoryStore:
    """테스트용 헬퍼: category_models 함수를 대체하는 메모리 저장소."""

    def __init__(self) -> None:
        self.rows: dict[int, Category] = {}
        self._next_id = 1

    async def get_all_categories(self) -> list[Category]:
        return sorted(self.rows.values(), key=lambda c: (c.sort_order, c.id))

    async def get_category_by_id(self, category_id: int) -> Category | None:
        return self.rows.get(category_id)

    async def create_category(
        self,
        name: str,
        slug: str,
        description: str | None = None,
        sort_order: int = 0,
    ) -> Category:
        category = Category(
            id=self._next_id,
            name=name,
            slug=slug,
            description=description,
            sort_order=sort_order,
            created_at=datetime.now(timezone.utc).replace(microsecond=0),
        )
        self.rows[category.id] = category
        self._next_id += 1
        return category

    async def update_category(
        self,
        category_id: int,
        name: str,
        slug: str,
        description: str | None = None,
        sort_order: int = 0,
    ) -> Category | None:
        existing = self.rows.get(category_id)
        if existing is None:
            return None
        updated = Category(
            id=category_id,
            name=name,
            slug=slug,
            description=description,
            sort_order=sort_order,
            created_at=existing.created_at,
        )
        self.rows[category_id] = updated
        return updated

    async def delete_category(self, category_id: int) -> None:
        if self.rows.pop(category_id, None) is None:
            raise RecordNotFoundError("category", category_id)


@pytest.fixture
def category_store(monkeypatch):
    """category_models의 DB 함수를 메모리 저장소로 교체합니다."""
    store = InMemoryCategoryStore()
    for name in (
        "get_all_categories",
        "get_category_by_id",
        "create_category",
        "update_category",
        "delete_category",
    ):
        monkeypatch.setattr(category_models, name, getattr(store, name))
    return store


@pytest_asyncio.fixture
async def client(category_store):
    """API 테스트를 위한 Async Client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def lenient_client(category_store):
    """처리되지 않은 예외가 테스트로 전파되지 않는 클라이언트 (500 응답 확인용)."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fake():
    return Faker("ko_KR")


@pytest.fixture
def category_payload(fake):
    """카테고리 생성용 페이로드 생성"""
    return {
        "name": fake.word(),
        "slug": fake.lexify(text="????").lower() + "-" + str(fake.random_int(10, 99)),
        "description": fake.sentence()[:200],
        "sort_order": fake.random_int(0, 50),
    }
