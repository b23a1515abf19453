"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses so services can raise
errors without specifying status codes at each call site.

Usage:
    from app.utils.exceptions import InternalServerError
    raise InternalServerError("Failed to fetch advocates")
"""

from fastapi import HTTPException, status


class InternalServerError(HTTPException):
    """500 Internal Server Error 예외: 요청 처리 중 내부 오류 발생 시 사용.

    500 Internal Server Error exception.
    Raised at the request boundary when a backing resource (the database)
    fails. The detail stays generic; the cause is logged server-side.

    Args:
        detail: 오류 메시지 (Error message, default: "Internal server error")
    """

    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
