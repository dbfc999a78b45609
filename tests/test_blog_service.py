"""
Bloglist Backend — Blog Service Unit Tests
===========================================

What:  Tests for BlogService outcome mapping.
How:   Uses a mock DocumentStore (no database).
"""

import pytest

from bloglist.exceptions import DatabaseError, NotFoundError, ValidationError
from bloglist.models.blog import Blog
from bloglist.schemas.blog import BlogCreate, BlogUpdate
from bloglist.services.blog_service import BlogService

BLOG_ID = "65a1b2c3d4e5f6a7b8c9d0e1"


def make_blog(**overrides) -> Blog:
    fields = {
        "doc_id": BLOG_ID,
        "version": 1,
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    }
    fields.update(overrides)
    return Blog(**fields)


class TestBlogServiceCreate:

    @pytest.mark.asyncio
    async def test_likes_default_to_zero(self, mock_store):
        mock_store.insert.return_value = make_blog(likes=0)

        result = await BlogService(mock_store).create_blog(
            BlogCreate(title="A", author="B", url="u")
        )

        mock_store.insert.assert_awaited_once_with(title="A", author="B", url="u", likes=0)
        assert result.likes == 0
        assert result.id == BLOG_ID

    @pytest.mark.asyncio
    async def test_missing_author_never_reaches_store(self, mock_store):
        with pytest.raises(ValidationError) as exc_info:
            await BlogService(mock_store).create_blog(BlogCreate(title="A", url="u"))

        assert exc_info.value.field == "author"
        mock_store.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, mock_store):
        mock_store.insert.side_effect = DatabaseError()

        with pytest.raises(DatabaseError):
            await BlogService(mock_store).create_blog(BlogCreate(title="A", author="B"))


class TestBlogServiceUpdate:

    @pytest.mark.asyncio
    async def test_only_supplied_fields_are_sent(self, mock_store):
        mock_store.update_by_id.return_value = make_blog(likes=8)

        result = await BlogService(mock_store).update_blog(BLOG_ID, BlogUpdate(likes=8))

        mock_store.update_by_id.assert_awaited_once_with(BLOG_ID, {"likes": 8})
        assert result.likes == 8

    @pytest.mark.asyncio
    async def test_unresolved_id_is_validation_error(self, mock_store):
        mock_store.update_by_id.return_value = None

        with pytest.raises(ValidationError):
            await BlogService(mock_store).update_blog("0", BlogUpdate(likes=8))

    @pytest.mark.asyncio
    async def test_null_likes_resets_to_zero(self, mock_store):
        mock_store.update_by_id.return_value = make_blog(likes=0)

        await BlogService(mock_store).update_blog(BLOG_ID, BlogUpdate(likes=None))

        mock_store.update_by_id.assert_awaited_once_with(BLOG_ID, {"likes": 0})


class TestBlogServiceGetAndDelete:

    @pytest.mark.asyncio
    async def test_malformed_id_is_validation_error(self, mock_store):
        with pytest.raises(ValidationError):
            await BlogService(mock_store).get_blog("xyz")
        mock_store.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_blog_is_not_found(self, mock_store):
        with pytest.raises(NotFoundError):
            await BlogService(mock_store).get_blog(BLOG_ID)

    @pytest.mark.asyncio
    async def test_delete_of_missing_blog_succeeds(self, mock_store):
        mock_store.delete_by_id.return_value = False

        assert await BlogService(mock_store).delete_blog(BLOG_ID) is None
        mock_store.delete_by_id.assert_awaited_once_with(BLOG_ID)

    @pytest.mark.asyncio
    async def test_list_serializes_every_blog(self, mock_store):
        mock_store.find_all.return_value = [
            make_blog(),
            make_blog(doc_id="65a1b2c3d4e5f6a7b8c9d0e2", title="Other"),
        ]

        result = await BlogService(mock_store).list_blogs()

        assert [b.title for b in result] == ["React patterns", "Other"]
