"""
Blog API: Validation Gate & Id Guard Tests
============================================

What:  Tests for validate_body, parse_page and require_object_id.
"""

import pytest
from bson import ObjectId

from blog_api.exceptions import BadIdentifierError, InvalidPageError, ValidationError
from blog_api.guards import require_object_id
from blog_api.models.post import PAGE_SIZE
from blog_api.result import Result
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.validation import MAX_PAGE, ROOT_FIELD, parse_page, validate_body


class TestValidateBody:
    def test_valid_create(self):
        result = validate_body(PostCreate, {"title": "T", "body": "B", "tags": []})

        assert result.ok
        assert result.value.tags == []

    def test_all_missing_fields_reported(self):
        result = validate_body(PostCreate, {})

        fields = {e["field"] for e in result.error.errors}
        assert fields == {"title", "body", "tags"}

    def test_no_coercion(self):
        result = validate_body(PostCreate, {"title": 123, "body": "B", "tags": []})

        assert isinstance(result.error, ValidationError)
        assert result.error.errors[0]["field"] == "title"

    def test_tag_element_must_be_text(self):
        result = validate_body(PostCreate, {"title": "T", "body": "B", "tags": ["ok", 5]})

        assert result.error.errors[0]["field"] == "tags.1"

    def test_non_object_body(self):
        result = validate_body(PostCreate, ["not", "an", "object"])

        assert result.error.errors[0]["field"] == ROOT_FIELD

    def test_update_accepts_partial(self):
        result = validate_body(PostUpdate, {"body": "only body"})

        assert result.value.model_dump(exclude_unset=True) == {"body": "only body"}

    def test_update_rejects_null(self):
        result = validate_body(PostUpdate, {"title": None})

        assert isinstance(result.error, ValidationError)

    def test_update_rejects_unknown_keys(self):
        result = validate_body(PostUpdate, {"id": "abc"})

        assert result.error.errors[0]["field"] == "id"


class TestParsePage:
    def test_default_is_first_page(self):
        assert parse_page(None).value == 1

    def test_numeric_page(self):
        assert parse_page("4").value == 4

    @pytest.mark.parametrize("raw", ["0", "-1", "abc", "1.5", "", "+2", "1_0", " 2 ", "٣"])
    def test_invalid_page(self, raw):
        assert isinstance(parse_page(raw).error, InvalidPageError)

    def test_largest_page_accepted(self):
        assert parse_page(str(MAX_PAGE)).value == MAX_PAGE

    @pytest.mark.parametrize("raw", [str(MAX_PAGE + 1), str(10**19)])
    def test_page_past_storable_offset_rejected(self, raw):
        result = parse_page(raw)

        assert isinstance(result.error, InvalidPageError)
        assert (MAX_PAGE - 1) * PAGE_SIZE < 2**63


class _Handlers:
    def __init__(self):
        self.calls = []

    @require_object_id
    async def fetch(self, collection, post_id):
        self.calls.append(post_id)
        return Result.success(post_id)


class TestRequireObjectId:
    @pytest.mark.asyncio
    async def test_valid_id_passes_parsed_object_id(self):
        handlers = _Handlers()
        oid = ObjectId()

        result = await handlers.fetch(None, str(oid))

        assert result.value == oid
        assert handlers.calls == [oid]

    @pytest.mark.asyncio
    async def test_invalid_id_short_circuits(self):
        handlers = _Handlers()

        result = await handlers.fetch(None, "12345")

        assert isinstance(result.error, BadIdentifierError)
        assert handlers.calls == []
