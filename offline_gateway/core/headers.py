"""
Where: offline_gateway/core/headers.py
What: Build header maps from raw header lines and settle the event body.
Why: Header case is preserved, so defaults must check every spelling callers use.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from offline_gateway.models.context import NormalizedHeaders

CONTENT_LENGTH_HEADERS = ("Content-Length", "content-length", "Content-length")
CONTENT_TYPE_HEADERS = ("Content-Type", "content-type", "Content-type")
DEFAULT_CONTENT_TYPE = "application/json"

RawHeaders = Iterable[Tuple[str, str]]


def parse_headers(raw_headers: RawHeaders) -> Dict[str, str]:
    """Single-value header map. A repeated name keeps its last value."""
    headers: Dict[str, str] = {}
    for name, value in raw_headers:
        headers[name] = value
    return headers


def parse_multi_value_headers(raw_headers: RawHeaders) -> Optional[Dict[str, List[str]]]:
    """Header name -> every value in arrival order; None when there are no headers."""
    multi_headers: Dict[str, List[str]] = {}
    for name, value in raw_headers:
        multi_headers.setdefault(name, []).append(value)
    return multi_headers or None


def parse_lowercase_headers(raw_headers: RawHeaders) -> Dict[str, str]:
    lowered: Dict[str, str] = {}
    for name, value in raw_headers:
        lowered.setdefault(name.lower(), value)
    return lowered


def normalize_headers(raw_headers: List[Tuple[str, str]]) -> NormalizedHeaders:
    return NormalizedHeaders(
        headers=parse_headers(raw_headers),
        multi_value_headers=parse_multi_value_headers(raw_headers),
        lowercase=parse_lowercase_headers(raw_headers),
    )


def has_header(headers: Dict[str, str], variants: Tuple[str, ...]) -> bool:
    """True if any spelling in variants carries a non-empty value."""
    return any(headers.get(name) for name in variants)


def byte_length(body: str) -> int:
    return len(body.encode("utf-8"))


def _is_present(payload: Any) -> bool:
    if isinstance(payload, (str, bytes, bytearray, memoryview)):
        return len(payload) > 0
    return payload is not None


def normalize_body(payload: Any, raw_payload: Optional[bytes], headers: Dict[str, str]) -> Any:
    """
    Pick the event body and add default Content-Length / Content-Type headers.

    Content-Length counts the UTF-8 bytes of the returned text.

    Args:
        payload: parsed payload from the HTTP layer
        raw_payload: body bytes before parsing
        headers: single-value header map, updated in place

    Returns:
        The body as text, or None when the request had no body. Non-UTF-8
        bytes are decoded with replacement characters.
    """
    if not _is_present(payload):
        return None

    body = payload
    if not isinstance(body, str):
        # Parsed documents are not sent on; the raw bytes are.
        body = raw_payload
    # Decode before measuring so Content-Length matches the emitted text.
    body = body_to_text(body)

    if not has_header(headers, CONTENT_LENGTH_HEADERS) and isinstance(body, str):
        headers["Content-Length"] = str(byte_length(body))

    if not has_header(headers, CONTENT_TYPE_HEADERS):
        headers["Content-Type"] = DEFAULT_CONTENT_TYPE

    return body


def body_to_text(body: Any) -> Optional[str]:
    """Render a normalized body as event text. Empty bodies become None."""
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray, memoryview)):
        body = bytes(body).decode("utf-8", errors="replace")
    return body or None
