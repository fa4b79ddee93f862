"""Map SQLAlchemy records to JSON:API v1.1 documents."""

from .adapters import RecordAdapter, SQLAlchemyAdapter
from .core.exceptions import InvalidResourceTypeError, JSONAPIMapperError, UnsupportedDataError
from .core.options import MappingOptions, PaginationInfo
from .core.template import RelationTemplate, Template
from .mappers import Mapper
from .serializers import JSONAPISerializer

__all__ = [
    "InvalidResourceTypeError",
    "JSONAPIMapperError",
    "JSONAPISerializer",
    "Mapper",
    "MappingOptions",
    "PaginationInfo",
    "RecordAdapter",
    "RelationTemplate",
    "SQLAlchemyAdapter",
    "Template",
    "UnsupportedDataError",
]
