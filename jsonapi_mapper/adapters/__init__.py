"""Record adapters for supported ORMs."""

from .base import RecordAdapter
from .sqlalchemy import SQLAlchemyAdapter

__all__ = ["RecordAdapter", "SQLAlchemyAdapter"]
