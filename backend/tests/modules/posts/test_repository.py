"""Tests for modules/posts/repository.py."""

import pytest
from unittest.mock import MagicMock

from modules.posts.models import PostCreator
from modules.posts.repository import POST_COLUMNS, PostRepository

POST_ID = "6f1c2b1e-8a4d-4c1b-9e55-2f4a7d0c9b31"


def post_row(**overrides):
    row = {
        "id": "post-1",
        "seq": 1,
        "title": "First post",
        "content": "Hello, world",
        "image_url": "https://storage.test/a.png",
        "image_key": "a.png",
        "creator_id": "user-1",
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


class TestPostRepository:
    @pytest.fixture
    def db(self):
        return MagicMock()

    @pytest.fixture
    def repo(self, db):
        return PostRepository(db)

    def test_create_embeds_given_creator(self, repo, db):
        db.table.return_value.insert.return_value.execute.return_value.data = [post_row()]

        post = repo.create({"title": "First post"}, PostCreator(id="user-1", name="Ann"))

        db.table.assert_called_with("posts")
        assert post.id == "post-1"
        assert post.creator.name == "Ann"

    def test_get_by_id_maps_embedded_creator(self, repo, db):
        query = db.table.return_value.select.return_value.eq.return_value
        query.execute.return_value.data = [post_row(creator={"id": "user-1", "name": "Ann"})]

        post = repo.get_by_id(POST_ID)

        db.table.return_value.select.assert_called_once_with(POST_COLUMNS)
        assert post.creator.id == "user-1"
        assert post.creator.name == "Ann"

    def test_get_by_id_missing(self, repo, db):
        db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_by_id(POST_ID) is None

    def test_get_by_id_non_uuid_is_missing(self, repo, db):
        assert repo.get_by_id("not-a-uuid") is None
        db.table.assert_not_called()

    def test_count(self, repo, db):
        db.table.return_value.select.return_value.limit.return_value.execute.return_value.count = 7
        assert repo.count() == 7
        db.table.return_value.select.assert_called_once_with("id", count="exact")

    def test_list_page_orders_newest_first(self, repo, db):
        ordered = db.table.return_value.select.return_value.order.return_value.order.return_value
        ordered.range.return_value.execute.return_value.data = [post_row(id="p2"), post_row(id="p1")]

        posts = repo.list_page(offset=2, limit=2)

        db.table.return_value.select.return_value.order.assert_called_once_with(
            "created_at", desc=True
        )
        db.table.return_value.select.return_value.order.return_value.order.assert_called_once_with(
            "seq", desc=True
        )
        ordered.range.assert_called_once_with(2, 3)
        assert [p.id for p in posts] == ["p2", "p1"]

    def test_update_missing(self, repo, db):
        db.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []
        assert repo.update("post-1", {"title": "x"}) is None

    def test_delete(self, repo, db):
        repo.delete("post-1")
        db.table.return_value.delete.return_value.eq.assert_called_once_with("id", "post-1")
