"""
Blog API: Error Taxonomy
==========================

What:  Application-specific error types for the post handlers.
How:   Each error carries a message and an optional context dict. Services
       return them inside a `Result` instead of raising them; the mapping
       stage in `blog_api.responses` turns each kind into a status code.
Who:   Built by the guards, the validation gate and the post service.

Error Hierarchy:
    BlogApiError (base)
    ├── ValidationError      → 400 Bad Request, field error detail
    ├── InvalidPageError     → 400 Bad Request, empty body
    ├── BadIdentifierError   → 400 Bad Request, empty body
    ├── NotFoundError        → 404 Not Found, empty body
    └── StoreError           → 500 Internal Server Error, error detail
"""

from typing import Any, Dict, List, Optional


class BlogApiError(Exception):
    """
    Base class for all Blog API errors.

    Attributes:
        message:  Human-readable error description (safe to return in API response)
        context:  Additional debug info (logged; returned only where the mapping allows)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BlogApiError):
    """
    Raised when a request body fails validation.

    `errors` is a list of `{"field": ..., "message": ...}` entries, one per
    offending field, in the order the validator reported them.

    Example response:
        {
            "error": "validation_error",
            "message": "Request body failed validation",
            "details": {"errors": [{"field": "title", "message": "Field required"}]}
        }
    """

    def __init__(
        self,
        errors: List[Dict[str, str]],
        message: str = "Request body failed validation",
    ):
        super().__init__(message=message, context={"errors": errors})
        self.errors = errors


class InvalidPageError(BlogApiError):
    """The `page` query parameter is below 1 or not an integer."""

    def __init__(self, page: Any):
        super().__init__(
            message=f"Page must be an integer greater than or equal to 1, got {page!r}",
            context={"page": page},
        )
        self.page = page


class BadIdentifierError(BlogApiError):
    """
    The path id is not a syntactically valid ObjectId.

    Detected before the store is touched, so no query runs for these ids.
    """

    def __init__(self, value: str):
        super().__init__(
            message=f"'{value}' is not a valid post identifier",
            context={"id": value},
        )
        self.value = value


class NotFoundError(BlogApiError):
    """
    The id is well-formed but no matching record exists.

    pymongo returns None for missing documents (not an exception); the service
    converts that None into this error.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
    ):
        message = f"The requested {resource} was not found"
        ctx: Dict[str, Any] = {"resource": resource}
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StoreError(BlogApiError):
    """
    Any unexpected failure from the persistence layer.

    What:    An insert, query, update or delete against MongoDB failed.
    When:    Server selection timeout, network error, write error, etc.
    HTTP:    500 Internal Server Error

    The driver exception type is attached as `error_type` so the client sees
    which failure happened; the full traceback is only logged.
    """

    def __init__(
        self,
        operation: str,
        original: Optional[BaseException] = None,
    ):
        ctx: Dict[str, Any] = {"operation": operation}
        if original is not None:
            ctx["error_type"] = type(original).__name__
        super().__init__(
            message=f"Post store failed during {operation}",
            context=ctx,
        )
        self.operation = operation
        self.original = original
