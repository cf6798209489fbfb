"""
Blog API: MongoDB Client Management
=====================================

What:  Async MongoDB client, posts collection accessor and FastAPI dependency.
How:   One `AsyncMongoClient` per process (the driver pools connections
       internally); route handlers receive the posts collection through
       the `get_posts_collection` dependency.
Who:   Used by route handlers via FastAPI's dependency injection system,
       by the health check, and by the lifespan shutdown hook.
When:  Client is created at module import; it connects lazily on first use.

Tests replace the collection with an in-memory fake through
`app.dependency_overrides[get_posts_collection]`, so no server is needed.
"""

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from blog_api.config import settings


# ── Client Configuration ──────────────────────────────────────────────────
# tz_aware: datetimes read back from the store carry tzinfo=UTC
# connect=False: no background connection until the first operation
client: AsyncMongoClient = AsyncMongoClient(
    settings.mongo_url,
    tz_aware=True,
    connect=False,
    serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
)


def get_posts_collection() -> AsyncCollection:
    """
    FastAPI dependency that provides the posts collection.

    Example usage in a route:
        @router.get("/posts/{post_id}")
        async def read_post(post_id: str, posts=Depends(get_posts_collection)):
            ...
    """
    return client[settings.mongo_database][settings.posts_collection]


async def ping() -> None:
    """Round-trips a `ping` command; raises if the server is unreachable."""
    await client.admin.command("ping")


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def close_client() -> None:
    """
    What:  Closes the client and all pooled connections.
    When:  Called during application shutdown (lifespan handler).
    """
    await client.close()
