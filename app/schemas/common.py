"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared across endpoints.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """오류 응답 스키마.

    Error body produced by ``HTTPException`` (documented in OpenAPI responses).

    Attributes:
        detail: 오류 메시지 (Human-readable error message)
    """

    detail: str


class HealthResponse(BaseModel):
    """헬스 체크 응답 스키마."""

    status: str
