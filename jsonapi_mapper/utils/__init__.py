"""Query string helpers and request integration."""

from .query_params import encode_query_params, parse_query_params
from .requests import mapping_options_from_request

__all__ = ["encode_query_params", "mapping_options_from_request", "parse_query_params"]
