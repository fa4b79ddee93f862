"""Unit tests for template merging."""

from __future__ import annotations

import dataclasses

import pytest

from jsonapi_mapper.core.template import RelationTemplate, Template, merge_template


@pytest.fixture
def template() -> Template:
    return Template(
        top_level_links={"self": "http://api.test/articles"},
        attributes=["title", "body", "comments"],
        relations={
            "comments": RelationTemplate(type_="comments", attributes=["body"]),
            "author": RelationTemplate(type_="author", attributes=["name"]),
        },
    )


class TestMergeTemplate:
    def test_no_overrides_returns_same_template(self, template: Template) -> None:
        assert merge_template(template, None) is template
        assert merge_template(template, {}) is template

    def test_override_wins(self, template: Template) -> None:
        merged = merge_template(template, {"attributes": ["onlyField"]})
        assert merged.attributes == ["onlyField"]
        assert merged.top_level_links == template.top_level_links

    def test_inputs_untouched(self, template: Template) -> None:
        overrides = {"attributes": ["onlyField"], "meta": {"count": 1}}
        merged = merge_template(template, overrides)
        assert template.attributes == ["title", "body", "comments"]
        assert template.meta is None
        assert overrides == {"attributes": ["onlyField"], "meta": {"count": 1}}
        assert merged.attributes is not overrides["attributes"]

    def test_relations_merged_per_name(self, template: Template) -> None:
        people = RelationTemplate(type_="people", attributes=["name", "email"])
        merged = merge_template(template, {"relations": {"author": people}})
        assert merged.relations["author"] is people
        assert merged.relations["comments"] == template.relations["comments"]
        assert template.relations["author"].type_ == "author"

    def test_unknown_option(self, template: Template) -> None:
        with pytest.raises(TypeError, match="topLevelLinks"):
            merge_template(template, {"topLevelLinks": {}})

    def test_template_is_frozen(self, template: Template) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            template.attributes = []  # type: ignore[misc]
