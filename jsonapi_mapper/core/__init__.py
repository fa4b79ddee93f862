"""Core templates, options, links and document helpers."""

from .document import JSONAPIDocumentBuilder
from .exceptions import InvalidResourceTypeError, JSONAPIMapperError, UnsupportedDataError
from .links import build_relationship, build_self, build_top
from .options import MappingOptions, PaginationInfo
from .template import RelationTemplate, Template, merge_template

__all__ = [
    "InvalidResourceTypeError",
    "JSONAPIDocumentBuilder",
    "JSONAPIMapperError",
    "MappingOptions",
    "PaginationInfo",
    "RelationTemplate",
    "Template",
    "UnsupportedDataError",
    "build_relationship",
    "build_self",
    "build_top",
    "merge_template",
]
