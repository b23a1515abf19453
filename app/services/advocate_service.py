"""어드보킷 서비스: 디렉터리 검색 비즈니스 로직.

Advocate Service: Business logic for the advocate directory search.
Normalizes the search term, runs the paginated query, and turns
database failures into a generic 500 response.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.advocate import Advocate
from app.repositories.advocate_repository import advocate_repository
from app.schemas.advocate import AdvocatePageResponse, AdvocateResponse
from app.utils.exceptions import InternalServerError
from app.utils.logger import get_module_logger
from app.utils.pagination import total_pages
from app.utils.search import normalize_search_term

logger = get_module_logger(__name__)

FETCH_FAILED_DETAIL = "Failed to fetch advocates"


class AdvocateService:
    """어드보킷 관련 비즈니스 로직을 처리하는 서비스.

    Service handling advocate directory business logic.
    """

    def _to_response(self, advocate: Advocate) -> AdvocateResponse:
        """어드보킷 모델을 응답 스키마로 변환합니다."""
        return AdvocateResponse(
            id=advocate.id,
            first_name=advocate.first_name,
            last_name=advocate.last_name,
            city=advocate.city,
            degree=advocate.degree,
            specialties=list(advocate.specialties or []),
            years_of_experience=advocate.years_of_experience,
            phone_number=advocate.phone_number,
            created_at=advocate.created_at,
        )

    async def list_advocates(
        self,
        db: AsyncSession,
        search: str | None = None,
        page: int = 1,
        limit: int = settings.DEFAULT_PAGE_SIZE,
    ) -> AdvocatePageResponse:
        """검색어와 페이지 정보로 어드보킷 목록을 조회합니다.

        List one page of advocates matching the search term.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 자유 검색어 (Free-text term; "<N> years" means at least N years)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            limit: 페이지당 항목 수 (Page size)

        Returns:
            AdvocatePageResponse: 페이지 데이터와 메타데이터 (Page data and metadata)

        Raises:
            InternalServerError: 데이터베이스 조회 실패 (Database query failed)
        """
        term: str = normalize_search_term(search)
        logger.debug("Fetching advocates: page=%d, limit=%d, search=%r", page, limit, term)

        try:
            advocates, total = await advocate_repository.search(
                db, search=term, page=page, per_page=limit
            )
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Error fetching advocates")
            raise InternalServerError(FETCH_FAILED_DETAIL) from exc

        return AdvocatePageResponse(
            data=[self._to_response(a) for a in advocates],
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages(total, limit),
        )


# 싱글턴 인스턴스: Singleton instance
advocate_service: AdvocateService = AdvocateService()
