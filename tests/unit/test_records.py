"""Unit tests for record introspection helpers."""

from __future__ import annotations

import pytest
from sample_models import Article, Comment, User

from jsonapi_mapper.core.exceptions import UnsupportedDataError
from jsonapi_mapper.utils import records

BASE = "http://api.test"


class TestClassification:
    def test_model(self) -> None:
        assert records.is_model(Article(id=1))
        assert not records.is_collection(Article(id=1))

    def test_collection(self) -> None:
        assert records.is_collection([Article(id=1)])
        assert not records.is_model([Article(id=1)])

    def test_neither(self) -> None:
        assert not records.is_model(object())
        assert not records.is_collection(object())


class TestGetDataAttributesList:
    def test_record(self) -> None:
        article = Article(
            id=1,
            title="t",
            body="b",
            author=User(id=2, name="Ann"),
            comments=[Comment(id=3, body="c")],
        )
        attributes = records.get_data_attributes_list(article)
        assert attributes == ["title", "body"]
        assert len(attributes) == len(set(attributes))

    def test_collection_uses_first_member(self) -> None:
        comments = [Comment(id=3, body="c"), Comment(id=4)]
        assert records.get_data_attributes_list(comments) == ["body"]

    def test_empty_collection(self) -> None:
        assert records.get_data_attributes_list([]) == []

    def test_none(self) -> None:
        assert records.get_data_attributes_list(None) == []

    def test_unsupported(self) -> None:
        with pytest.raises(UnsupportedDataError):
            records.get_data_attributes_list("articles")

    def test_returns_new_list(self) -> None:
        article = Article(id=1, title="t")
        first = records.get_data_attributes_list(article)
        first.append("comments")
        assert records.get_data_attributes_list(article) == ["title"]


class TestBuildRelation:
    def test_with_links(self) -> None:
        relation = records.build_relation(BASE, "articles", "comments", ["body"], True)
        assert relation.type_ == "comments"
        assert relation.ref == "id"
        assert relation.attributes == ["body"]
        assert relation.included is True
        assert relation.relationship_links("1") == {
            "self": "http://api.test/articles/1/relationships/comments",
            "related": "http://api.test/articles/1/comments",
        }
        assert relation.included_links("3") == "http://api.test/comments/3"

    def test_without_links(self) -> None:
        relation = records.build_relation(BASE, "articles", "comments", [], False)
        assert relation.relationship_links is None
        assert relation.included_links is None
        assert relation.included is False

    def test_attribute_list_copied(self) -> None:
        attributes = ["body"]
        relation = records.build_relation(BASE, "articles", "comments", attributes, True)
        attributes.append("other")
        assert relation.attributes == ["body"]


class TestToJSON:
    def test_record(self) -> None:
        assert records.to_json(Article(id=1, title="t")) == {"id": "1", "title": "t"}

    def test_empty_collection(self) -> None:
        assert records.to_json([]) == []

    def test_unsupported(self) -> None:
        with pytest.raises(UnsupportedDataError):
            records.to_json({"id": 1})
