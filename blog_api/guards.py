"""
Blog API: Id-Format Guard
===========================

What:  Precondition filter for operations addressed by a post id.
How:   `require_object_id` wraps a service method whose first argument after
       the collection is the raw path id. A malformed id returns
       `Result.failure(BadIdentifierError)` and the wrapped method never runs;
       a valid id is handed through as a `bson.ObjectId`.
Who:   Applied to PostService.read, .update and .remove.
"""

import functools
import logging
from typing import Any, Awaitable, Callable

from bson import ObjectId

from blog_api.exceptions import BadIdentifierError
from blog_api.result import Result

logger = logging.getLogger(__name__)


def require_object_id(
    func: Callable[..., Awaitable[Result[Any]]],
) -> Callable[..., Awaitable[Result[Any]]]:
    @functools.wraps(func)
    async def wrapper(self, collection, post_id: str, *args, **kwargs) -> Result[Any]:
        if not ObjectId.is_valid(post_id):
            logger.info("Rejected malformed post id %r in %s", post_id, func.__name__)
            return Result.failure(BadIdentifierError(post_id))
        return await func(self, collection, ObjectId(post_id), *args, **kwargs)

    return wrapper
