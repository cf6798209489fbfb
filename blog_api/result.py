"""
Blog API: Operation Result
============================

What:  A small tagged result type: either a success value or a typed error.
How:   Every post service operation returns a `Result`. Routes hand it to
       `blog_api.responses.render`, the single place where error kinds become
       HTTP status codes.

Example:
    result = await post_service.read(collection, post_id)
    if result.ok:
        post = result.value
    else:
        error = result.error   # NotFoundError, StoreError, ...
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from blog_api.exceptions import BlogApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[BlogApiError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BlogApiError) -> "Result[T]":
        return cls(error=error)
