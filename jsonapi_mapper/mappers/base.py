"""Map ORM records to JSON:API documents."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from jsonapi_mapper.adapters.base import RecordAdapter
from jsonapi_mapper.core.exceptions import UnsupportedDataError
from jsonapi_mapper.core.links import build_self, build_top
from jsonapi_mapper.core.options import MappingOptions, warn_include_relations
from jsonapi_mapper.core.template import RelationTemplate, Template, merge_template
from jsonapi_mapper.serializers.base import DocumentEncoder, JSONAPISerializer
from jsonapi_mapper.utils import records

logger = logging.getLogger(__name__)


class Mapper:
    """Build JSON:API documents from records loaded by an ORM.

    The mapper decides which fields become attributes, which loaded
    relations become relationships, and which links are generated. The
    resulting template and a plain snapshot of the data are then handed to
    the serializer, whose result is returned unchanged.

    Instances hold only configuration set at construction and can be shared
    between threads.
    """

    def __init__(
        self,
        base_url: str,
        serializer_options: Mapping[str, Any] | None = None,
        *,
        adapter: RecordAdapter | None = None,
        serializer: DocumentEncoder | None = None,
    ) -> None:
        """Store the link root and the template overrides applied to every call."""
        self._base_url = base_url
        self._serializer_options = MappingProxyType(dict(serializer_options or {}))
        self._adapter = adapter or records.default_adapter
        self._serializer = serializer or JSONAPISerializer()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def serializer_options(self) -> Mapping[str, Any]:
        return self._serializer_options

    def map(
        self,
        data: Any,
        type_: str,
        options: MappingOptions | Mapping[str, Any] | None = None,
        *,
        overrides: Mapping[str, Any] | None = None,
    ) -> Any:
        """Map ``data`` to a JSON:API document of ``type_`` resources."""
        options = self._normalize_options(options)
        template = self.build_template(data, type_, options, overrides=overrides)
        snapshot = records.to_json(data, adapter=self._adapter)
        logger.debug("Encoding %s document with attributes %s", type_, template.attributes)
        return self._serializer(type_, snapshot, template)

    def build_template(
        self,
        data: Any,
        type_: str,
        options: MappingOptions | Mapping[str, Any] | None = None,
        *,
        overrides: Mapping[str, Any] | None = None,
    ) -> Template:
        """Return the encoding template for ``data`` without encoding it."""
        options = self._normalize_options(options)
        top_level_links = build_top(self._base_url, type_, options.pagination, options.query)
        data_links = {"self": build_self(self._base_url, type_, options.query)}

        if records.is_model(data, adapter=self._adapter):
            attributes, relations = self._model_template(data, type_, options)
        elif records.is_collection(data, adapter=self._adapter):
            attributes, relations = self._collection_template(data, type_, options)
        else:
            raise UnsupportedDataError(data)

        template = Template(
            top_level_links=top_level_links,
            data_links=data_links,
            attributes=attributes,
            relations=relations,
        )
        template = merge_template(template, self._serializer_options)
        return merge_template(template, overrides)

    def _normalize_options(
        self, options: MappingOptions | Mapping[str, Any] | None
    ) -> MappingOptions:
        if options is None:
            return MappingOptions()
        if isinstance(options, MappingOptions):
            return options
        # Reported against the caller of map() or build_template().
        warn_include_relations(options, stacklevel=3)
        return MappingOptions.model_validate(dict(options))

    def _relation(self, type_: str, name: str, related: Any) -> RelationTemplate:
        related_attributes = records.get_data_attributes_list(related, adapter=self._adapter)
        return records.build_relation(self._base_url, type_, name, related_attributes, True)

    def _model_template(
        self, model: Any, type_: str, options: MappingOptions
    ) -> tuple[list[str], dict[str, RelationTemplate]]:
        attributes = records.get_data_attributes_list(model, adapter=self._adapter)
        relations: dict[str, RelationTemplate] = {}
        for name, related in self._adapter.relations(model).items():
            if not options.permits(name):
                logger.debug("Skipping relation %s of %s: not permitted", name, type_)
                continue
            attributes.append(name)
            relations[name] = self._relation(type_, name, related)
        return attributes, relations

    def _collection_template(
        self, collection: Any, type_: str, options: MappingOptions
    ) -> tuple[list[str] | None, dict[str, RelationTemplate]]:
        relations: dict[str, RelationTemplate] = {}
        first = self._adapter.first(collection)
        if first is None:
            return None, relations

        attributes = records.get_data_attributes_list(first, adapter=self._adapter)
        for member in self._adapter.members(collection):
            for name, related in self._adapter.relations(member).items():
                if not options.permits(name):
                    logger.debug("Skipping relation %s of %s: not permitted", name, type_)
                    continue
                if name not in attributes:
                    attributes.append(name)
                # The first member supplying a non-empty attribute list wins.
                existing = relations.get(name)
                if existing is None or not existing.attributes:
                    relations[name] = self._relation(type_, name, related)
        return attributes, relations
