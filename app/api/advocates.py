"""어드보킷 라우터: 디렉터리 검색 엔드포인트.

Advocate Router: Search and pagination endpoint for the advocate directory.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.advocate import AdvocatePageResponse
from app.schemas.common import ErrorResponse
from app.services.advocate_service import advocate_service

router: APIRouter = APIRouter()


@router.get(
    "",
    response_model=AdvocatePageResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_advocates(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: Annotated[str, Query(max_length=200)] = "",
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> AdvocatePageResponse:
    """어드보킷 목록을 검색하고 페이지네이션하여 조회합니다.

    Search the advocate directory and return one page of results.
    ``search`` matches names, city, degree, phone number, experience, and
    specialties case-insensitively; a term like "5 years" returns advocates
    with at least that much experience.
    """
    return await advocate_service.list_advocates(db, search=search, page=page, limit=limit)
