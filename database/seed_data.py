"""seed_data.py: 카테고리 테이블 생성 및 더미 데이터 생성 스크립트.

사용법:
    source .venv/bin/activate
    pip install -e ".[seed]"
    python database/seed_data.py

수행 작업:
    - schema.sql 적용 (category 테이블 + 기본 카테고리)
    - 200 dummy categories
"""

import asyncio
import random
from datetime import datetime, timedelta
from faker import Faker

# 프로젝트 루트를 PYTHONPATH에 추가
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from database.connection import init_db, close_db, transactional

fake = Faker("ko_KR")
Faker.seed(42)  # 재현 가능한 데이터
random.seed(42)

# 설정
NUM_CATEGORIES = 200
SCHEMA_PATH = Path(__file__).parent / "schema.sql"


async def apply_schema():
    """schema.sql의 구문을 순서대로 실행합니다."""
    print("Applying schema...")
    sql = "\n".join(
        line
        for line in SCHEMA_PATH.read_text(encoding="utf-8").splitlines()
        if not line.lstrip().startswith("--")
    )
    statements = [stmt.strip() for stmt in sql.split(";") if stmt.strip()]
    async with transactional() as cur:
        for stmt in statements:
            await cur.execute(stmt)
    print(f"✓ {len(statements)} statements applied")


async def clear_existing_data():
    """기존 데이터 삭제 (개발 환경 전용)."""
    print("Clearing existing data...")
    async with transactional() as cur:
        await cur.execute("DELETE FROM category WHERE id > 4")
    print("Existing data cleared.")


async def seed_categories():
    """카테고리 데이터 생성."""
    print(f"Seeding {NUM_CATEGORIES} categories...")

    categories_data = []
    for i in range(1, NUM_CATEGORIES + 1):
        name = fake.word()[:40] + f" {i}"
        slug = f"seed-{i:04d}"
        description = fake.sentence()[:255]
        sort_order = 100 + i
        created_at = datetime.now() - timedelta(days=random.randint(1, 365))
        categories_data.append((name, slug, description, sort_order, created_at))

    async with transactional() as cur:
        await cur.executemany(
            """
            INSERT IGNORE INTO category (name, slug, description, sort_order, created_at)
            VALUES (%s, %s, %s, %s, %s)
            """,
            categories_data,
        )

    print(f"✓ {NUM_CATEGORIES} categories created")


async def main():
    """메인 실행 함수."""
    print("=" * 50)
    print("Starting seed data generation...")
    print("=" * 50)

    await init_db()

    try:
        await apply_schema()

        confirm = input("Clear existing data? (yes/no): ")
        if confirm.lower() == "yes":
            await clear_existing_data()

        start = datetime.now()

        await seed_categories()

        elapsed = datetime.now() - start
        print("=" * 50)
        print(f"✓ Seed complete! Time: {elapsed.total_seconds():.1f}s")
        print("=" * 50)

    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
