"""Template driven JSON:API serializer."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from jsonapi_mapper.core.document import JSONAPIDocumentBuilder
from jsonapi_mapper.core.template import RelationTemplate, Template


class DocumentEncoder(Protocol):
    """Turn a snapshot and its template into a document."""

    def __call__(self, type_: str, data: Any, template: Template) -> Any:
        ...


class JSONAPISerializer:
    """Serialize record snapshots into JSON:API documents.

    The snapshot is the plain structure produced by a record adapter: a dict
    per record (or a list of them) holding an ``id``, attribute values and
    nested related snapshots. Which keys become attributes, relationships
    and links is decided solely by the template.
    """

    document_builder_class: type = JSONAPIDocumentBuilder

    def __call__(self, type_: str, data: Any, template: Template) -> dict[str, Any]:
        return self.serialize(type_, data, template)

    def get_document_builder(self) -> JSONAPIDocumentBuilder:
        """Instantiate the document builder."""
        return self.document_builder_class()

    def serialize(self, type_: str, data: Any, template: Template) -> dict[str, Any]:
        """Return the JSON:API document for ``data``."""
        included: dict[tuple[str, str], dict[str, Any]] = {}
        builder = self.get_document_builder()
        common = {
            "links": template.top_level_links,
            "meta": template.meta,
            "jsonapi": template.jsonapi,
        }
        if isinstance(data, list):
            resources = [self.to_resource(type_, item, template, included) for item in data]
            return builder.build_collection(resources, included=included.values(), **common)
        resource = None if data is None else self.to_resource(type_, data, template, included)
        return builder.build_single(resource, included=included.values(), **common)

    def to_resource(
        self,
        type_: str,
        record: Mapping[str, Any],
        template: Template,
        included: dict[tuple[str, str], dict[str, Any]],
    ) -> dict[str, Any]:
        """Serialize one record snapshot into a resource object."""
        resource_id = self.get_id(record)
        resource: dict[str, Any] = {"type": type_, "id": resource_id}
        attributes: dict[str, Any] = {}
        relationships: dict[str, Any] = {}
        for name in template.attributes or []:
            if name not in record:
                continue
            relation = template.relations.get(name)
            if relation is None:
                attributes[name] = record[name]
            else:
                relationships[name] = self.relationship_object(
                    record[name], relation, resource_id, included
                )
        if attributes:
            resource["attributes"] = attributes
        if relationships:
            resource["relationships"] = relationships
        if template.data_links:
            resource["links"] = {key: link(resource_id) for key, link in template.data_links.items()}
        return resource

    def relationship_object(
        self,
        value: Any,
        relation: RelationTemplate,
        parent_id: str,
        included: dict[tuple[str, str], dict[str, Any]],
    ) -> dict[str, Any]:
        """Return the relationship object for a related snapshot."""
        relationship: dict[str, Any] = {}
        if relation.relationship_links is not None:
            relationship["links"] = relation.relationship_links(parent_id)
        if value is None:
            relationship["data"] = None
        elif isinstance(value, list):
            relationship["data"] = [self._linkage(item, relation, included) for item in value]
        else:
            relationship["data"] = self._linkage(value, relation, included)
        return relationship

    def get_id(self, record: Mapping[str, Any], ref: str = "id") -> str:
        """Return the resource id as a string."""
        value = record.get(ref)
        return "" if value is None else str(value)

    def _linkage(
        self,
        related: Mapping[str, Any],
        relation: RelationTemplate,
        included: dict[tuple[str, str], dict[str, Any]],
    ) -> dict[str, str]:
        identifier = {"type": relation.type_, "id": self.get_id(related, relation.ref)}
        key = (identifier["type"], identifier["id"])
        if relation.included and key not in included:
            included[key] = self._included_resource(related, relation, identifier)
        return identifier

    def _included_resource(
        self,
        related: Mapping[str, Any],
        relation: RelationTemplate,
        identifier: dict[str, str],
    ) -> dict[str, Any]:
        resource: dict[str, Any] = dict(identifier)
        attributes = {
            name: related[name] for name in relation.attributes if name in related
        }
        if attributes:
            resource["attributes"] = attributes
        if relation.included_links is not None:
            resource["links"] = {"self": relation.included_links(identifier["id"])}
        return resource
