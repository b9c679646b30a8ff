"""category_models: 카테고리 관련 데이터 모델 및 함수 모듈."""

from dataclasses import dataclass
from datetime import datetime

from database.connection import get_connection, transactional
from utils.exceptions import RecordNotFoundError


_CATEGORY_COLUMNS = "id, name, slug, description, sort_order, created_at"


@dataclass(frozen=True)
class Category:
    """카테고리 데이터 클래스."""

    id: int
    name: str
    slug: str
    description: str | None
    sort_order: int
    created_at: datetime | None = None


def _row_to_category(row: tuple) -> Category:
    """데이터베이스 행을 Category 객체로 변환합니다."""
    return Category(
        id=row[0],
        name=row[1],
        slug=row[2],
        description=row[3],
        sort_order=row[4],
        created_at=row[5],
    )


async def get_all_categories() -> list[Category]:
    """모든 카테고리를 정렬 순서대로 조회합니다."""
    async with get_connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {_CATEGORY_COLUMNS} "
                "FROM category ORDER BY sort_order ASC, id ASC"
            )
            rows = await cur.fetchall()
            return [_row_to_category(row) for row in rows]


async def get_category_by_id(category_id: int) -> Category | None:
    """ID로 카테고리를 조회합니다."""
    async with get_connection() as conn:
        async with conn.cursor() as cur:
            await cur.execute(
                f"SELECT {_CATEGORY_COLUMNS} FROM category WHERE id = %s",
                (category_id,),
            )
            row = await cur.fetchone()
            return _row_to_category(row) if row else None


async def create_category(
    name: str,
    slug: str,
    description: str | None = None,
    sort_order: int = 0,
) -> Category:
    """새 카테고리를 생성합니다.

    INSERT와 조회를 같은 트랜잭션의 커서로 수행합니다.

    Args:
        name: 카테고리 이름.
        slug: URL용 식별자 (고유).
        description: 설명 (선택).
        sort_order: 정렬 순서.

    Returns:
        생성된 카테고리 객체.

    Raises:
        pymysql.err.IntegrityError: slug가 중복된 경우.
    """
    async with transactional() as cur:
        await cur.execute(
            """
            INSERT INTO category (name, slug, description, sort_order)
            VALUES (%s, %s, %s, %s)
            """,
            (name, slug, description, sort_order),
        )
        category_id = cur.lastrowid

        await cur.execute(
            f"SELECT {_CATEGORY_COLUMNS} FROM category WHERE id = %s",
            (category_id,),
        )
        row = await cur.fetchone()
        return _row_to_category(row)


async def update_category(
    category_id: int,
    name: str,
    slug: str,
    description: str | None = None,
    sort_order: int = 0,
) -> Category | None:
    """카테고리 전체 필드를 수정합니다.

    Args:
        category_id: 수정할 카테고리 ID.
        name: 새 이름.
        slug: 새 slug.
        description: 새 설명.
        sort_order: 새 정렬 순서.

    Returns:
        수정된 카테고리 객체, 없는 경우 None.
    """
    async with transactional() as cur:
        # 값이 같으면 rowcount가 0이므로 존재 여부는 SELECT로 판단
        await cur.execute(
            """
            UPDATE category
            SET name = %s, slug = %s, description = %s, sort_order = %s
            WHERE id = %s
            """,
            (name, slug, description, sort_order, category_id),
        )

        await cur.execute(
            f"SELECT {_CATEGORY_COLUMNS} FROM category WHERE id = %s",
            (category_id,),
        )
        row = await cur.fetchone()
        return _row_to_category(row) if row else None


async def delete_category(category_id: int) -> None:
    """카테고리를 삭제합니다.

    Args:
        category_id: 삭제할 카테고리 ID.

    Raises:
        RecordNotFoundError: 삭제된 행이 없는 경우.
    """
    async with transactional() as cur:
        await cur.execute("DELETE FROM category WHERE id = %s", (category_id,))
        if cur.rowcount == 0:
            raise RecordNotFoundError("category", category_id)
