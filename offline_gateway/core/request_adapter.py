"""
Where: offline_gateway/core/request_adapter.py
What: Capture a Starlette/FastAPI Request as a RawRequest.
Why: Keep the event builder independent of the web framework's request object.
"""

import json
import time
from typing import Any, Dict, Optional

from fastapi import Request

from offline_gateway.models.context import RawRequest, RequestAuth, RequestInfo, RouteInfo


def parse_payload(body: bytes, content_type: str) -> Any:
    """
    Parsed view of a request body.

    JSON bodies become documents, other UTF-8 bodies stay text, anything else
    stays bytes. An empty body is None.
    """
    if not body:
        return None

    if "json" in content_type.lower():
        try:
            return json.loads(body)
        except ValueError:
            pass

    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return body


def raw_request_from_starlette(
    request: Request,
    body: bytes,
    route_path: str,
    path_params: Optional[Dict[str, str]] = None,
    auth: Optional[RequestAuth] = None,
    received: Optional[int] = None,
) -> RawRequest:
    """
    Build a RawRequest from a Starlette request and its already-read body.

    Args:
        request: incoming request
        body: bytes from ``await request.body()``
        route_path: declared path of the matched route
        path_params: values captured by the route
        auth: credentials attached by an upstream authorizer
        received: arrival time in epoch milliseconds (defaults to now)
    """
    raw_headers = [
        (name.decode("latin-1"), value.decode("latin-1")) for name, value in request.headers.raw
    ]
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"

    return RawRequest(
        method=request.method,
        url=url,
        raw_headers=raw_headers,
        payload=parse_payload(body, request.headers.get("content-type", "")),
        raw_payload=body or None,
        params=path_params or {},
        route=RouteInfo(path=route_path),
        auth=auth,
        info=RequestInfo(
            received=received if received is not None else int(time.time() * 1000),
            remote_address=request.client.host if request.client else None,
        ),
    )
