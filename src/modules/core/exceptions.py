"""Problem-details error responses (RFC 7807).

``api_exception_handler`` is installed as DRF's ``EXCEPTION_HANDLER``:
- exceptions DRF already understands (parse errors, 404, 405, ...) keep
  their status code and are reshaped into a problem document;
- ``DatabaseError`` escaping a view becomes an opaque 500; the store's
  message is logged, never sent to the client.

``validation_problem`` renders a Pydantic ``ValidationError`` raised
while building a request DTO.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import DatabaseError
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"
SERVER_ERROR_TITLE = "An error occurred while processing your request."
VALIDATION_ERROR_TITLE = "One or more validation errors occurred."


def problem_detail(
    status_code: int,
    title: str,
    detail: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """Build a problem document body."""
    body: Dict[str, Any] = {
        "type": "about:blank",
        "title": title,
        "status": status_code,
    }
    if detail is not None:
        body["detail"] = detail
    body.update(extra)
    return body


def problem_response(
    status_code: int,
    title: str,
    detail: Optional[str] = None,
    **extra: Any,
) -> Response:
    return Response(
        problem_detail(status_code, title, detail, **extra),
        status=status_code,
        content_type=PROBLEM_CONTENT_TYPE,
    )


def validation_problem(exc: PydanticValidationError) -> Response:
    """Translate DTO validation errors into a 400 problem document.

    ``errors`` maps the offending wire field (``$`` for the body as a
    whole) to its messages.
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = ".".join(str(part) for part in loc) or "$"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value."))
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        VALIDATION_ERROR_TITLE,
        errors=errors,
    )


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = exception_handler(exc, context)

    if response is not None:
        data = response.data
        detail = data.get("detail") if isinstance(data, dict) else None
        extra: Dict[str, Any] = {}
        if detail is None:
            extra["errors"] = data
        response.data = problem_detail(
            response.status_code,
            str(getattr(exc, "default_detail", SERVER_ERROR_TITLE)),
            str(detail) if detail is not None else None,
            **extra,
        )
        response.content_type = PROBLEM_CONTENT_TYPE
        return response

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "store.failure",
            view=type(view).__name__ if view is not None else None,
            error=str(exc),
        )
        set_rollback()
        return problem_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            SERVER_ERROR_TITLE,
        )

    return None
