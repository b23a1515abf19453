"""FastAPI 애플리케이션 엔트리포인트: 미들웨어 및 라우터 등록.

FastAPI application entry point: Middleware and router registration.
Configures logging, CORS, health check, the advocate API, and the
directory page.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.schemas.common import HealthResponse
from app.utils.logger import setup_logging

setup_logging(settings.LOG_LEVEL)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# API 로깅 미들웨어: Request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어: Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록: Router registration
# ---------------------------------------------------------------------------
from app.api import api_router  # noqa: E402
from app.api.pages import router as pages_router  # noqa: E402

app.include_router(api_router, prefix="/api")
app.include_router(pages_router, tags=["Directory Page"])
