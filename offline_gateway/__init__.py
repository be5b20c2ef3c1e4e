"""
Local API Gateway proxy integration event adapter.

Turns a captured HTTP request into the event a Lambda function receives
from an API Gateway REST API proxy integration.
"""

from .config import EventConfig
from .core.event_builder import EventBuilder, LambdaProxyIntegrationEventBuilder
from .models.context import RawRequest, RequestAuth, RequestInfo, RouteInfo, StageContext

__all__ = [
    "EventConfig",
    "EventBuilder",
    "LambdaProxyIntegrationEventBuilder",
    "RawRequest",
    "RequestAuth",
    "RequestInfo",
    "RouteInfo",
    "StageContext",
]
