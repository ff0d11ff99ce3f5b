import time

import structlog
from django.db import connections
from django.http import HttpRequest, HttpResponse, JsonResponse

from modules.core.exceptions import (
    PROBLEM_CONTENT_TYPE,
    SERVER_ERROR_TITLE,
    problem_detail,
)

logger = structlog.get_logger()

HEALTHY_MESSAGE = "Database connection is healthy"


def health_check(request: HttpRequest) -> HttpResponse:
    """Liveness probe: open a database connection and run a trivial query.

    Does not validate schema or data.  Any failure is reported as a 500
    problem document carrying the error message.
    """
    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except Exception as exc:  # noqa: BLE001
        logger.error("health_check_db_failure", error=str(exc))
        return JsonResponse(
            problem_detail(
                500,
                SERVER_ERROR_TITLE,
                f"Database connection failed: {exc}",
            ),
            status=500,
            content_type=PROBLEM_CONTENT_TYPE,
        )

    logger.info(
        "health_check_completed",
        status="healthy",
        response_time_ms=round((time.monotonic() - start) * 1000, 2),
    )
    return HttpResponse(HEALTHY_MESSAGE, content_type="text/plain; charset=utf-8")
