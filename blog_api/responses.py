"""
Blog API: Result → HTTP Response Mapping
==========================================

What:  The single stage that converts a service `Result` into a response.
How:   Success values are JSON-encoded (camelCase aliases applied) with the
       caller's status code; an empty success value becomes an empty body.
       Errors are looked up in ERROR_STATUS by kind.

Mapping:
    ValidationError     → 400  {"error": "validation_error", ...details.errors}
    InvalidPageError    → 400  (empty)
    BadIdentifierError  → 400  (empty)
    NotFoundError       → 404  (empty)
    StoreError          → 500  {"error": "store_error", ...details.error_type}
    other BlogApiError  → 500  {"error": "server_error", ...}
"""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from blog_api.exceptions import (
    BadIdentifierError,
    BlogApiError,
    InvalidPageError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from blog_api.middleware.request_id import request_id_var
from blog_api.result import Result

logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[type, int] = {
    ValidationError: 400,
    InvalidPageError: 400,
    BadIdentifierError: 400,
    NotFoundError: 404,
    StoreError: 500,
}

# Error kinds answered with a JSON body; the rest get an empty body.
ERROR_CODES: Dict[type, str] = {
    ValidationError: "validation_error",
    StoreError: "store_error",
}


def status_for(error: BlogApiError) -> int:
    for kind in type(error).__mro__:
        if kind in ERROR_STATUS:
            return ERROR_STATUS[kind]
    return 500


def error_response(error: BlogApiError) -> Response:
    status_code = status_for(error)
    rid = request_id_var.get("")

    if status_code >= 500:
        logger.error("[%s] %s | Context: %s", rid, error.message, error.context)
    else:
        logger.warning("[%s] %s: %s", rid, type(error).__name__, error.message)

    code = ERROR_CODES.get(type(error))
    if code is None and status_code < 500:
        return Response(status_code=status_code)

    return JSONResponse(
        status_code=status_code,
        content={
            "error": code or "server_error",
            "message": error.message,
            "details": error.context,
            "request_id": rid,
        },
    )


def render(
    result: Result[Any],
    *,
    status_code: int = 200,
    content: Optional[Callable[[Any], Any]] = None,
    headers: Optional[Callable[[Any], Dict[str, str]]] = None,
) -> Response:
    """
    Build the HTTP response for a service result.

    Args:
        result:      What the service returned
        status_code: Status used on success (200, 201, 204)
        content:     Picks the body out of the success value (default: the value)
        headers:     Builds extra headers from the success value

    Example:
        render(result, content=lambda page: page.posts,
               headers=lambda page: {"Last-Page": str(page.last_page)})
    """
    if not result.ok:
        return error_response(result.error)

    value = result.value
    extra_headers = headers(value) if headers else None
    if value is None:
        return Response(status_code=status_code, headers=extra_headers)

    body = content(value) if content else value
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, by_alias=True),
        headers=extra_headers,
    )
