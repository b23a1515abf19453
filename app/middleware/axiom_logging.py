"""API 요청 로깅 미들웨어.

API request logging middleware.
Records one structured event per request (method, path, query params,
status code, duration, error detail) to the application log, and ships it
to Axiom when a token and dataset are configured.
"""

import json
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings
from app.utils.logger import get_module_logger

logger = get_module_logger(__name__)

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 오류 상세 최대 길이: Max length of error detail kept in an event
_MAX_DETAIL_LEN = 500


def _truncate(value: str, max_len: int = _MAX_DETAIL_LEN) -> str:
    """로그 크기 제한: Truncate long strings to keep events small."""
    if len(value) > max_len:
        return value[:max_len] + "..."
    return value


def _error_detail(body: bytes) -> str:
    """오류 응답 본문에서 사유를 추출합니다: Extract the reason from an error body."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _truncate(body.decode("utf-8", errors="replace"))
    if isinstance(data, dict) and "detail" in data:
        detail = data["detail"]
        return _truncate(detail if isinstance(detail, str) else json.dumps(detail))
    return _truncate(str(data))


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 로깅하는 미들웨어.

    Middleware that logs every API request and response.
    Events always go to the ``app`` logger at DEBUG; they are also
    ingested into Axiom when AXIOM_API_TOKEN and AXIOM_DATASET are set.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 스킵: Skip excluded paths
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        error_detail: str | None = None
        status_code: int = 500

        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출: Extract error detail from error responses
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_detail(resp_body)

                # 소비한 body를 다시 응답으로 반환: Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {_truncate(str(exc), 300)}"
            raise
        finally:
            log_event: dict[str, Any] = {
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
            }
            if request.query_params:
                log_event["query_params"] = dict(request.query_params)
            if error_detail:
                log_event["error"] = error_detail

            self._emit(log_event)

        return response

    def _emit(self, log_event: dict[str, Any]) -> None:
        """로그 이벤트를 기록하고 Axiom으로 전송합니다.

        Log the event locally and ingest it into Axiom when configured.
        Ingest failures are logged and never break the request.
        """
        logger.debug("api request %s", log_event)
        if self._client is None:
            return
        try:
            self._client.ingest_events(self._dataset, [log_event])
        except Exception:
            logger.warning("Failed to ship request log to Axiom", exc_info=True)
