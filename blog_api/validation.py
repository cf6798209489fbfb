"""
Blog API: Request Validation Gate
===================================

What:  Evaluates request input against the declarative rules in
       `blog_api.schemas.post` and returns a tagged `Result`.
How:   `validate_body` runs a Pydantic model over the raw JSON body and turns
       every reported problem into a `{"field", "message"}` entry.
       `parse_page` checks the list endpoint's `page` query parameter.
When:  Before any store interaction; an invalid request never reaches MongoDB.
"""

import re
from typing import Any, Dict, List, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel

from blog_api.exceptions import InvalidPageError, ValidationError
from blog_api.models.post import PAGE_SIZE
from blog_api.result import Result

M = TypeVar("M", bound=BaseModel)

_PAGE_PATTERN = re.compile(r"[0-9]+")
MAX_PAGE = 2**62 // PAGE_SIZE

# Field label used when the body itself (not one of its keys) is wrong,
# e.g. a JSON array or a string instead of an object.
ROOT_FIELD = "(body)"


def _field_errors(exc: pydantic.ValidationError) -> List[Dict[str, str]]:
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or ROOT_FIELD
        errors.append({"field": field, "message": err["msg"]})
    return errors


def validate_body(model: Type[M], payload: Any) -> Result[M]:
    """
    Validate a raw request body against a schema model.

    Returns:
        Result.success(model instance) when every rule holds, otherwise
        Result.failure(ValidationError) listing each failing field.
    """
    try:
        return Result.success(model.model_validate(payload))
    except pydantic.ValidationError as e:
        return Result.failure(ValidationError(errors=_field_errors(e)))


def parse_page(raw: Optional[str]) -> Result[int]:
    """
    Parse the `page` query parameter.

    Absent → 1. Only plain ASCII digits are accepted ("1_0", " 2 " and
    non-ASCII digits are not), and the page must lie in 1..MAX_PAGE so the
    skip offset still fits MongoDB's 64-bit integers.
    Anything else → InvalidPageError.
    """
    if raw is None:
        return Result.success(1)
    if not _PAGE_PATTERN.fullmatch(raw):
        return Result.failure(InvalidPageError(raw))
    page = int(raw)
    if page < 1 or page > MAX_PAGE:
        return Result.failure(InvalidPageError(page))
    return Result.success(page)
