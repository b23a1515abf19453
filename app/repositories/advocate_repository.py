"""어드보킷 레포지토리: 검색 및 페이지네이션 쿼리.

Advocate Repository: Search and pagination queries for advocates.
Translates a search term into a WHERE clause: either a minimum-experience
threshold or a case-insensitive substring match across the text fields.
"""

from typing import Sequence

from sqlalchemy import ColumnElement, Select, Text, cast, false, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.advocate import Advocate
from app.repositories.base import BaseRepository
from app.utils.search import parse_min_experience

# years_of_experience 컬럼(INTEGER)의 최대값: Largest value the INTEGER column holds
MAX_YEARS_OF_EXPERIENCE: int = 2**31 - 1


def build_search_filter(search: str) -> ColumnElement[bool] | None:
    """검색어로부터 WHERE 조건을 생성합니다.

    Build the WHERE clause for a normalized search term.

    - 빈 검색어: 조건 없음 (Empty term: no filter, returns None)
    - "<N> years" 형식: 경력 N년 이상 (Experience term: years >= N)
    - 그 외: 여러 필드에 대한 ILIKE 부분 일치 (Otherwise: ILIKE across fields)

    Phone number, years of experience, and the JSONB specialties list are
    cast to text so they take part in the substring match. LIKE wildcards
    in the term are escaped and match literally.

    Args:
        search: 정규화된 검색어 (Normalized search term)

    Returns:
        ColumnElement[bool] | None: WHERE 조건 또는 None (Filter or None)
    """
    if not search:
        return None

    min_years: int | None = parse_min_experience(search)
    if min_years is not None:
        # INTEGER 컬럼 범위 초과: 일치 불가 (No INTEGER value can reach it)
        if min_years > MAX_YEARS_OF_EXPERIENCE:
            return false()
        return Advocate.years_of_experience >= min_years

    return or_(
        Advocate.first_name.icontains(search, autoescape=True),
        Advocate.last_name.icontains(search, autoescape=True),
        Advocate.city.icontains(search, autoescape=True),
        Advocate.degree.icontains(search, autoescape=True),
        cast(Advocate.phone_number, Text).icontains(search, autoescape=True),
        cast(Advocate.years_of_experience, Text).icontains(search, autoescape=True),
        cast(Advocate.specialties, Text).icontains(search, autoescape=True),
    )


class AdvocateRepository(BaseRepository[Advocate]):
    """어드보킷 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the advocates table.
    """

    def __init__(self) -> None:
        super().__init__(Advocate)

    async def search(
        self,
        db: AsyncSession,
        search: str = "",
        page: int = 1,
        per_page: int = settings.DEFAULT_PAGE_SIZE,
    ) -> tuple[Sequence[Advocate], int]:
        """검색어로 필터링된 어드보킷을 페이지네이션하여 조회합니다.

        Retrieve a page of advocates matching ``search`` plus the total
        number of matching rows. Rows are ordered by id so that pages are
        stable between requests.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 정규화된 검색어 (Normalized search term, "" for all)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지당 항목 수 (Items per page)

        Returns:
            tuple[Sequence[Advocate], int]: (어드보킷 목록, 전체 개수)
                                            (Advocates on the page, total count)
        """
        query: Select = select(Advocate)

        condition = build_search_filter(search)
        if condition is not None:
            query = query.where(condition)

        query = query.order_by(Advocate.id)
        return await self.get_paginated(db, query, page, per_page)


# 싱글턴 인스턴스: Singleton instance
advocate_repository: AdvocateRepository = AdvocateRepository()
