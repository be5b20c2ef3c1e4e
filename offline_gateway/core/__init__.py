"""
Core logic package.

Provides the request -> proxy event transform and its building blocks.
"""

from .authorizer import AuthorizerResolver, decode_claims, extract_bearer_token
from .event_builder import EventBuilder, LambdaProxyIntegrationEventBuilder
from .headers import normalize_body, normalize_headers
from .query import parse_multi_value_query_string_parameters, parse_query_string_parameters
from .request_adapter import raw_request_from_starlette

__all__ = [
    "AuthorizerResolver",
    "decode_claims",
    "extract_bearer_token",
    "EventBuilder",
    "LambdaProxyIntegrationEventBuilder",
    "normalize_body",
    "normalize_headers",
    "parse_multi_value_query_string_parameters",
    "parse_query_string_parameters",
    "raw_request_from_starlette",
]
