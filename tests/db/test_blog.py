"""Tests for BlogOperations (core.blog)."""

import sqlite3

import pytest

from bloglist.exceptions import MalformedId
from bloglist.utils import uid


class TestInsertAndFind:

    def test_insert_returns_uuid(self, core):
        blog_id = core.blog.insert(title="T", url="http://example.com")

        assert uid.is_valid_uuid(blog_id)

    def test_insert_defaults(self, core):
        blog_id = core.blog.insert(title="T", url="http://example.com")

        row = core.blog.find_by_id(blog_id)
        assert row["likes"] == 0
        assert row["author"] is None
        assert row["owner"] is None
        assert row["created_at"] == row["updated_at"]

    def test_find_returns_insertion_order(self, core):
        ids = [core.blog.insert(title=f"T{i}", url="http://example.com") for i in range(5)]

        assert [row["id"] for row in core.blog.find()] == ids

    def test_find_by_owner(self, core, test_user, other_user, initial_blogs):
        user, _password = test_user
        core.blog.insert(title="Other", url="http://example.com", owner=other_user.id)

        rows = core.blog.find(owner=user.id)

        assert [row["id"] for row in rows] == initial_blogs

    def test_find_ignores_none_conditions(self, core, initial_blogs):
        assert len(core.blog.find(owner=None)) == len(initial_blogs)

    def test_find_rejects_unknown_filters(self, core):
        with pytest.raises(ValueError):
            core.blog.find(password_hash="x")

    def test_rows_include_owner_fields(self, core, test_user, initial_blogs):
        user, _password = test_user

        row = core.blog.find_by_id(initial_blogs[0])

        assert row["owner_username"] == user.username
        assert row["owner_name"] == user.name

    def test_find_by_id_missing_returns_none(self, core):
        assert core.blog.find_by_id(uid.generate_uuid()) is None

    @pytest.mark.parametrize("bad_id", ["zxsddddd1", "", "123", "550e8400e29b41d4a716446655440000"])
    def test_find_by_id_malformed_raises(self, core, bad_id):
        with pytest.raises(MalformedId):
            core.blog.find_by_id(bad_id)

    def test_empty_title_violates_schema(self, core):
        with pytest.raises(sqlite3.IntegrityError):
            core.blog.insert(title="", url="http://example.com")


class TestUpdateById:

    def test_updates_only_given_fields(self, core, initial_blogs):
        before = core.blog.find_by_id(initial_blogs[0])

        after = core.blog.update_by_id(initial_blogs[0], {"likes": 99})

        assert after["likes"] == 99
        assert after["title"] == before["title"]
        assert after["url"] == before["url"]

    def test_none_values_ignored(self, core, initial_blogs):
        before = core.blog.find_by_id(initial_blogs[0])

        after = core.blog.update_by_id(initial_blogs[0], {"title": None, "likes": 1})

        assert after["title"] == before["title"]

    def test_owner_and_id_never_written(self, core, initial_blogs, other_user):
        before = core.blog.find_by_id(initial_blogs[0])

        after = core.blog.update_by_id(
            initial_blogs[0],
            {"owner": other_user.id, "id": uid.generate_uuid()}
        )

        assert after["id"] == before["id"]
        assert after["owner"] == before["owner"]

    def test_missing_returns_none(self, core):
        assert core.blog.update_by_id(uid.generate_uuid(), {"likes": 1}) is None

    def test_malformed_raises(self, core):
        with pytest.raises(MalformedId):
            core.blog.update_by_id("zxsddddd1", {"likes": 1})


class TestDeleteById:

    def test_delete_existing(self, core, initial_blogs):
        assert core.blog.delete_by_id(initial_blogs[0]) is True
        assert core.blog.find_by_id(initial_blogs[0]) is None
        assert core.blog.count() == len(initial_blogs) - 1

    def test_delete_missing(self, core):
        assert core.blog.delete_by_id(uid.generate_uuid()) is False

    def test_delete_malformed_raises(self, core, initial_blogs):
        with pytest.raises(MalformedId):
            core.blog.delete_by_id("zxsddddd1")
        assert core.blog.count() == len(initial_blogs)

    def test_delete_cascades_to_owner_collection(self, core, test_user, initial_blogs):
        user, _password = test_user

        core.blog.delete_by_id(initial_blogs[0])

        assert core.user.blog_ids(user.id) == initial_blogs[1:]
