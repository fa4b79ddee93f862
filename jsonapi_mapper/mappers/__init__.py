"""Record to document mappers."""

from .base import Mapper

__all__ = ["Mapper"]
