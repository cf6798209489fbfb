"""
Blog API: Pydantic Request/Response Schemas
=============================================

What:  Pydantic models defining the API contract for posts.
How:   Request models are the validation rules, expressed as data: field name,
       whether it is required, and its expected shape. `blog_api.validation`
       evaluates them against raw request bodies. Response models serialize
       stored documents.

Validation rules:
    PostCreate   title: str (required)   body: str (required)   tags: [str] (required, may be empty)
    PostUpdate   title: str (optional)   body: str (optional)   tags: [str] (optional)

    Both models are strict (no "123" → 123 style coercion) and forbid unknown
    keys, so `id`, `_id` and `publishedDate` cannot be set by a client.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What the client sends in the body
# ══════════════════════════════════════════════════════════════════════════


class PostCreate(BaseModel):
    """Body of POST /api/posts. Every field is required."""

    model_config = ConfigDict(strict=True, extra="forbid")

    title: str = Field(description="Post title")
    body: str = Field(description="Post body, stored in full")
    tags: List[str] = Field(description="Ordered list of tags, may be empty")


class PostUpdate(BaseModel):
    """
    Body of PATCH /api/posts/{id}. Every field is optional.

    Only the fields present in the request are applied; read them back with
    `model_dump(exclude_unset=True)`. An explicit null is a type error rather
    than "clear this field".
    """

    model_config = ConfigDict(strict=True, extra="forbid")

    title: Optional[str] = Field(default=None, description="New title")
    body: Optional[str] = Field(default=None, description="New body")
    tags: Optional[List[str]] = Field(default=None, description="Replacement tag list")

    @field_validator("title", "body", "tags", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Value must not be null")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models: What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """
    What:  Full representation of a post.
    Who:   Returned by create, read and update; list items use the same shape
           with `body` shortened.

    `publishedDate` keeps its camelCase wire name through a serialization alias.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Store-assigned identifier (24-char hex ObjectId)")
    title: str = Field(description="Post title")
    body: str = Field(description="Post body")
    tags: List[str] = Field(default_factory=list, description="Post tags")
    published_date: Optional[datetime] = Field(
        default=None,
        alias="publishedDate",
        description="When the post was created (UTC ISO 8601)",
    )

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "PostResponse":
        """Builds the response from a raw MongoDB document."""
        return cls(
            id=str(doc["_id"]),
            title=doc.get("title", ""),
            body=doc.get("body", ""),
            tags=doc.get("tags", []),
            published_date=doc.get("publishedDate"),
        )


class PostPage(BaseModel):
    """One page of the post listing plus the highest valid page number."""

    posts: List[PostResponse]
    last_page: int = Field(description="ceil(total matching posts / page size)")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models: Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body for 400 validation failures and 500 store failures.

    Example:
        {
            "error": "validation_error",
            "message": "Request body failed validation",
            "details": {"errors": [{"field": "tags.1", "message": "Input should be a valid string"}]},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and MongoDB status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="MongoDB connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
