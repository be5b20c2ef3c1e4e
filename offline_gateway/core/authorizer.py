"""
Authorizer resolution.

Derives requestContext.authorizer from, in order of precedence:
1. the ``sls-offline-authorizer-override`` request header (JSON)
2. the ``AUTHORIZER`` environment variable (JSON)
3. a record synthesized from request credentials and bearer-token claims

Only the result of authorization is produced here; nothing is verified.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import jwt

from offline_gateway.config import EventConfig
from offline_gateway.exceptions import MalformedAuthorizerOverride, MalformedToken
from offline_gateway.models.authorizer import AuthorizerState, Overridden, Synthesized, Unset
from offline_gateway.models.context import RequestAuth

logger = logging.getLogger("gateway.authorizer")

AUTHORIZER_OVERRIDE_HEADER = "sls-offline-authorizer-override"
AUTHORIZATION_HEADERS = ("Authorization", "authorization")
BEARER_SCHEME = "Bearer"
FALLBACK_PRINCIPAL_ID = "offlineContext_authorizer_principalId"


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def extract_bearer_token(headers: Dict[str, str]) -> Optional[str]:
    """
    Return the token from an Authorization header.

    "Bearer <token>" yields <token>; any other value is returned as-is.
    """
    token = None
    for name in AUTHORIZATION_HEADERS:
        token = headers.get(name)
        if token:
            break

    if token and token.split(" ")[0] == BEARER_SCHEME:
        parts = token.split(" ")
        token = parts[1] if len(parts) > 1 else None

    return token or None


def decode_claims(token: str) -> Dict[str, Any]:
    """
    Decode a JWT payload without verifying its signature.

    Raises:
        MalformedToken: the token is not a decodable JWT
    """
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except (jwt.exceptions.PyJWTError, ValueError) as e:
        raise MalformedToken(e) from e


def split_scopes(claims: Optional[Dict[str, Any]]) -> Optional[List[str]]:
    scope = claims.get("scope") if claims else None
    if scope and isinstance(scope, str):
        return scope.split(" ")
    return None


def is_json_truthy(value: Any) -> bool:
    """
    Truthiness of a decoded JSON value.

    Only null, false, 0 and "" are falsy; empty objects and arrays count as set.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


class AuthorizerResolver:
    """Resolve the authorizer result for one request."""

    def __init__(self, config: EventConfig, log: Optional[logging.Logger] = None):
        self.config = config
        self.log = log or logger

    def resolve(self, headers: Dict[str, str], auth: Optional[RequestAuth]) -> AuthorizerState:
        state: AuthorizerState = Unset()

        if self.config.AUTHORIZER:
            state = self._apply_override(
                state, self.config.AUTHORIZER, source="env", label="AUTHORIZER environment variable"
            )

        header_value = headers.get(AUTHORIZER_OVERRIDE_HEADER)
        if header_value:
            state = self._apply_override(
                state, header_value, source="header", label=f"header {AUTHORIZER_OVERRIDE_HEADER}"
            )

        if isinstance(state, Overridden) and is_json_truthy(state.value):
            return state

        return self.synthesize(headers, auth)

    def _apply_override(
        self, state: AuthorizerState, raw: str, source: str, label: str
    ) -> AuthorizerState:
        """Parse an override; a parse failure keeps the previous state."""
        try:
            return Overridden(value=self._parse_override(raw, source), source=source)
        except MalformedAuthorizerOverride as e:
            self.log.error(
                f"Could not parse {label}, make sure it is correct JSON",
                extra={"override_source": e.source, "error_detail": str(e.cause)},
            )
            return state

    @staticmethod
    def _parse_override(raw: str, source: str) -> Any:
        try:
            return json.loads(raw, parse_constant=_reject_constant)
        except ValueError as e:
            raise MalformedAuthorizerOverride(source, e) from e

    def synthesize(self, headers: Dict[str, str], auth: Optional[RequestAuth]) -> Synthesized:
        """Merge credentials context with token claims and the resolved principalId."""
        claims = None
        token = extract_bearer_token(headers)
        if token:
            try:
                claims = decode_claims(token)
            except MalformedToken:
                pass
        scopes = split_scopes(claims)

        record: Dict[str, Any] = dict(auth.context) if auth and auth.context else {}
        # Absent claims/scopes also clear any the credentials context carried.
        record.pop("claims", None)
        record.pop("scopes", None)
        if claims is not None:
            record["claims"] = claims
        if scopes is not None:
            record["scopes"] = scopes
        record["principalId"] = (
            (auth.principal_id if auth else None) or self.config.PRINCIPAL_ID or FALLBACK_PRINCIPAL_ID
        )

        return Synthesized(record=record)
