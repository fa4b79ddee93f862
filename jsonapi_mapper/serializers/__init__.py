"""Document encoders."""

from .base import DocumentEncoder, JSONAPISerializer

__all__ = ["DocumentEncoder", "JSONAPISerializer"]
