"""API 라우터 패키지: 모든 엔드포인트 통합.

API Router package: Aggregates the JSON API routers into a single router
for inclusion in the FastAPI application.

Included routers:
    - advocates: 어드보킷 검색 (Advocate directory search)
"""

from fastapi import APIRouter

from app.api.advocates import router as advocates_router

api_router: APIRouter = APIRouter()

# 어드보킷: /api/advocates (Advocate directory search)
api_router.include_router(advocates_router, prefix="/advocates", tags=["Advocates"])
