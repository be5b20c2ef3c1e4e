"""
Input context models.

Encapsulates everything the HTTP layer captured about one request, plus the
stage it was routed to. Both are read-only to the event builder.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class RouteInfo(BaseModel):
    """Route matched by the HTTP layer."""

    path: str


class RequestAuth(BaseModel):
    """Credentials attached to the request by an upstream authorizer."""

    principal_id: Optional[str] = None
    context: Optional[Dict[str, Any]] = None


class RequestInfo(BaseModel):
    """Connection info."""

    received: int = Field(..., description="Arrival time (epoch milliseconds)")
    remote_address: Optional[str] = None


class RawRequest(BaseModel):
    """
    Request as captured by the HTTP layer.

    ``payload`` is the parsed body (text, a decoded JSON document, bytes or
    None); ``raw_payload`` is the body before parsing.
    """

    method: str
    url: str
    raw_headers: List[Tuple[str, str]] = Field(default_factory=list)
    payload: Any = None
    raw_payload: Optional[bytes] = None
    params: Dict[str, str] = Field(default_factory=dict)
    route: RouteInfo
    auth: Optional[RequestAuth] = None
    info: RequestInfo


class StageContext(BaseModel):
    """Stage the request was routed to."""

    stage: str
    path: str
    stage_variables: Optional[Dict[str, Any]] = None
    route_key: Optional[str] = None


class NormalizedHeaders(BaseModel):
    """Header maps derived from the raw header lines."""

    headers: Dict[str, str] = Field(default_factory=dict)
    multi_value_headers: Optional[Dict[str, List[str]]] = None
    # Lower-cased view, first occurrence wins.
    lowercase: Dict[str, str] = Field(default_factory=dict)
