import itertools

import jwt
import pytest

from offline_gateway.config import EventConfig
from offline_gateway.models.context import (
    RawRequest,
    RequestAuth,
    RequestInfo,
    RouteInfo,
    StageContext,
)

ENV_KEYS = (
    "AUTHORIZER",
    "PRINCIPAL_ID",
    "SLS_ACCOUNT_ID",
    "SLS_API_KEY",
    "SLS_API_KEY_ID",
    "SLS_CALLER",
    "SLS_COGNITO_AUTHENTICATION_PROVIDER",
    "SLS_COGNITO_AUTHENTICATION_TYPE",
    "SLS_COGNITO_IDENTITY_ID",
    "SLS_COGNITO_IDENTITY_POOL_ID",
)

# 2023-11-14T22:13:20Z
RECEIVED_MS = 1700000000000


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment overrides out of every test."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def make_config():
    def _make(**overrides) -> EventConfig:
        return EventConfig(_env_file=None, **overrides)

    return _make


@pytest.fixture
def config(make_config):
    return make_config()


@pytest.fixture
def make_request():
    def _make(**overrides) -> RawRequest:
        fields = {
            "method": "get",
            "url": "/dev/foo/bar",
            "raw_headers": [("Host", "localhost:3000"), ("user-agent", "pytest-agent")],
            "payload": None,
            "raw_payload": None,
            "params": {},
            "route": RouteInfo(path="/dev/foo/bar"),
            "auth": None,
            "info": RequestInfo(received=RECEIVED_MS, remote_address="127.0.0.1"),
        }
        fields.update(overrides)
        return RawRequest(**fields)

    return _make


@pytest.fixture
def stage_context():
    return StageContext(stage="dev", path="/foo/bar", stage_variables={"env": "dev"})


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def make_token():
    def _make(claims: dict) -> str:
        return jwt.encode(claims, "test-secret-key-must-be-at-least-32-chars", algorithm="HS256")

    return _make


@pytest.fixture
def credentials():
    return RequestAuth(principal_id="user-123", context={"tenant": "acme"})
