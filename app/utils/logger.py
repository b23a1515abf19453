"""로깅 설정 유틸리티.

Logging configuration and helpers.
All application loggers live under the ``app.`` namespace so one level
setting controls them.
"""

import logging
import sys

# 헬스 체크 경로: Paths whose successful access logs are dropped
_QUIET_PATHS = ("/health",)


class HealthEndpointFilter(logging.Filter):
    """성공한 헬스 체크 요청의 uvicorn 접근 로그를 숨깁니다.

    Suppress uvicorn access log lines for successful health probes.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn access args: (client, method, path, http_version, status_code)
        args = record.args
        if isinstance(args, tuple) and len(args) >= 5:
            method, path, status_code = args[1], args[2], args[4]
            if (
                method == "GET"
                and path in _QUIET_PATHS
                and isinstance(status_code, int)
                and 200 <= status_code < 300
            ):
                return False
        return True


def setup_logging(log_level: str = "INFO") -> None:
    """stdout 기반 로깅을 구성합니다.

    Configure root logging to stdout.

    Args:
        log_level: 로그 레벨 이름 (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        ValueError: 알 수 없는 로그 레벨 (Unknown log level name)
    """
    numeric_level = logging.getLevelName(log_level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("app").setLevel(numeric_level)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    # SQL 에코는 DEBUG 설정으로만 제어: SQL echo is driven by settings.DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthEndpointFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthEndpointFilter())


def get_module_logger(module_name: str) -> logging.Logger:
    """모듈 로거를 반환합니다: ``app.`` 네임스페이스로 정규화.

    Return a logger for ``module_name`` (usually ``__name__``) under the
    ``app.`` namespace.
    """
    if module_name != "app" and not module_name.startswith("app."):
        module_name = f"app.{module_name}"
    return logging.getLogger(module_name)
