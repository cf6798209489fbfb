"""
Blog API: Post Service (the five post handlers)
=================================================

What:  create / list / read / update / remove for posts.
How:   Each operation runs its preconditions (id guard, validation gate),
       makes one MongoDB call, and returns a `Result`. Nothing here raises
       for expected failures; routes pass the Result to
       `blog_api.responses.render`.
Who:   Called by the route handlers in `blog_api.routes.posts`.

Flow per operation:
    ┌────────────┐   ┌──────────────┐   ┌──────────────┐   ┌──────────┐
    │  Id guard  │──▶│  Validation  │──▶│  Store call  │──▶│  Result  │
    │ (read/upd/ │   │ (create/upd) │   │  (pymongo)   │   │          │
    │   remove)  │   └──────────────┘   └──────────────┘   └──────────┘
    └────────────┘

Error Handling Strategy:
    Any exception from the driver is logged with its traceback and returned
    as StoreError (→ 500). Store calls are not retried.

The service is stateless; the collection is passed in on every call.
"""

import logging
import math
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from blog_api.exceptions import NotFoundError, StoreError
from blog_api.guards import require_object_id
from blog_api.models.post import PAGE_SIZE, new_post_document
from blog_api.result import Result
from blog_api.schemas.post import PostCreate, PostPage, PostResponse, PostUpdate
from blog_api.validation import validate_body

logger = logging.getLogger(__name__)

BODY_PREVIEW_LENGTH = 200


def preview_body(body: str, limit: int = BODY_PREVIEW_LENGTH) -> str:
    """Shortens `body` to `limit` characters plus "..." when it is longer."""
    if len(body) <= limit:
        return body
    return body[:limit] + "..."


class PostService:
    """
    Handler set for the `posts` collection.

    Responsibilities:
        - create():  validate body, insert, return the stored post
        - list():    newest-first page of 10 with the last page number
        - read():    single post by id
        - update():  partial $set of the provided fields
        - remove():  idempotent delete
    """

    async def create(self, collection, payload: Any) -> Result[PostResponse]:
        """
        Insert a new post.

        Returns:
            success(PostResponse) including the assigned id and publishedDate,
            failure(ValidationError) when the body breaks a PostCreate rule,
            failure(StoreError) when the insert fails.
        """
        checked = validate_body(PostCreate, payload)
        if not checked.ok:
            return checked

        doc = new_post_document(**checked.value.model_dump())
        try:
            inserted = await collection.insert_one(doc)
        except Exception as e:
            logger.error("Insert failed: %s", str(e), exc_info=True)
            return Result.failure(StoreError("create", e))

        doc["_id"] = inserted.inserted_id
        logger.info("Post %s created", doc["_id"])
        return Result.success(PostResponse.from_document(doc))

    async def list(
        self,
        collection,
        page: int = 1,
        tag: Optional[str] = None,
    ) -> Result[PostPage]:
        """
        One page of posts, newest first.

        The caller has already checked `page >= 1` (see validation.parse_page).

        Query plan:
            find(filter).sort(_id desc).skip((page-1)*10).limit(10)
            count_documents(filter) → last_page = ceil(count / 10)

        Each listed post's body is cut to 200 characters plus "..."; the
        stored documents are not modified.
        """
        query: Dict[str, Any] = {"tags": tag} if tag else {}
        try:
            cursor = (
                collection.find(query)
                .sort("_id", DESCENDING)
                .skip((page - 1) * PAGE_SIZE)
                .limit(PAGE_SIZE)
            )
            docs = await cursor.to_list(length=PAGE_SIZE)
            total_count = await collection.count_documents(query)
        except Exception as e:
            logger.error("Listing posts failed: %s", str(e), exc_info=True)
            return Result.failure(StoreError("list", e))

        posts = []
        for doc in docs:
            post = PostResponse.from_document(doc)
            posts.append(post.model_copy(update={"body": preview_body(post.body)}))

        return Result.success(
            PostPage(posts=posts, last_page=math.ceil(total_count / PAGE_SIZE))
        )

    @require_object_id
    async def read(self, collection, post_id: ObjectId) -> Result[PostResponse]:
        try:
            doc = await collection.find_one({"_id": post_id})
        except Exception as e:
            logger.error("Reading post %s failed: %s", post_id, str(e), exc_info=True)
            return Result.failure(StoreError("read", e))

        if doc is None:
            return Result.failure(NotFoundError(resource="post", resource_id=str(post_id)))
        return Result.success(PostResponse.from_document(doc))

    @require_object_id
    async def remove(self, collection, post_id: ObjectId) -> Result[None]:
        """Delete the post if it exists. A missing post is still a success."""
        try:
            removed = await collection.find_one_and_delete({"_id": post_id})
        except Exception as e:
            logger.error("Removing post %s failed: %s", post_id, str(e), exc_info=True)
            return Result.failure(StoreError("remove", e))

        if removed is not None:
            logger.info("Post %s removed", post_id)
        return Result.success(None)

    @require_object_id
    async def update(
        self,
        collection,
        post_id: ObjectId,
        payload: Any,
    ) -> Result[PostResponse]:
        """
        Apply the provided fields to an existing post.

        Fields absent from the body are left as stored; `_id` and
        `publishedDate` are never part of the update. An empty body reads
        the post back unchanged.
        """
        checked = validate_body(PostUpdate, payload)
        if not checked.ok:
            return checked

        changes = checked.value.model_dump(exclude_unset=True)
        try:
            if changes:
                doc = await collection.find_one_and_update(
                    {"_id": post_id},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                doc = await collection.find_one({"_id": post_id})
        except Exception as e:
            logger.error("Updating post %s failed: %s", post_id, str(e), exc_info=True)
            return Result.failure(StoreError("update", e))

        if doc is None:
            return Result.failure(NotFoundError(resource="post", resource_id=str(post_id)))
        logger.info("Post %s updated: %s", post_id, sorted(changes))
        return Result.success(PostResponse.from_document(doc))


post_service = PostService()
