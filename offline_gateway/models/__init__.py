"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .authorizer import AuthorizerState, Overridden, Synthesized, Unset
from .aws_v1 import APIGatewayProxyEvent, ApiGatewayIdentity, ApiGatewayRequestContext
from .context import (
    NormalizedHeaders,
    RawRequest,
    RequestAuth,
    RequestInfo,
    RouteInfo,
    StageContext,
)

__all__ = [
    "AuthorizerState",
    "Overridden",
    "Synthesized",
    "Unset",
    "APIGatewayProxyEvent",
    "ApiGatewayIdentity",
    "ApiGatewayRequestContext",
    "NormalizedHeaders",
    "RawRequest",
    "RequestAuth",
    "RequestInfo",
    "RouteInfo",
    "StageContext",
]
