"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides a generic paginate function used by repositories and
the page-count calculation used when building responses.
"""

import math
from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 20,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT. Both share the same
    WHERE clause, so the count always matches the filtered set.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed, default: 1)
        per_page: 페이지당 항목 수 (Items per page, default: 20)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of paginated items and total count)
    """
    # 전체 개수 조회: 정렬 제거 후 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 마지막 페이지 이후: 조회 없이 빈 목록 (Past the last page: nothing to fetch)
    offset: int = (page - 1) * per_page
    if offset >= total:
        return [], total

    # 페이지 항목 조회: OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    result = await db.execute(query.offset(offset).limit(per_page))
    items: Sequence[Any] = result.scalars().all()

    return items, total


def total_pages(total: int, per_page: int) -> int:
    """전체 페이지 수를 계산합니다: 결과가 없으면 0.

    Number of pages needed for ``total`` rows at ``per_page`` rows each.
    """
    if per_page <= 0:
        return 0
    return math.ceil(total / per_page)
