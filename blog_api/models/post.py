"""
Blog API: Post Document Model
===============================

What:  Shape of a post as stored in the MongoDB `posts` collection.
How:   Plain dicts built by `new_post_document`; MongoDB assigns `_id` on insert.
Who:   Used by PostService when inserting and by PostResponse when reading.

Document layout:
    {
        "_id":           ObjectId,          # assigned by the store, never reused
        "title":         str,
        "body":          str,               # stored in full, truncated only in list output
        "tags":          [str, ...],
        "publishedDate": datetime (UTC),    # set once at creation
    }

Query Patterns:
    - List newest first: find().sort("_id", -1).skip(n).limit(10)
      → served by the default `_id` index (ObjectIds grow with insert time)
    - Filter by tag: find({"tags": tag}) matches any element of the array
    - Single post: find_one({"_id": oid})
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

PAGE_SIZE = 10


def bson_timestamp(moment: datetime) -> datetime:
    """Drops sub-millisecond precision, which BSON datetimes cannot hold."""
    return moment.replace(microsecond=moment.microsecond // 1000 * 1000)


def new_post_document(
    title: str,
    body: str,
    tags: List[str],
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Builds the document inserted for a new post, stamping `publishedDate`.

    The timestamp is cut to milliseconds so the create response matches what
    a later read returns from MongoDB.
    """
    return {
        "title": title,
        "body": body,
        "tags": list(tags),
        "publishedDate": bson_timestamp(now or datetime.now(timezone.utc)),
    }
