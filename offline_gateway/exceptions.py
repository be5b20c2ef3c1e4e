"""
Custom exception classes.

Represent recoverable failures while building a proxy integration event.
None of them escape EventBuilder.build(); they exist so the failure is named
when it is logged or inspected in tests.
"""

from typing import Optional


class EventBuildError(Exception):
    """Base exception class for event building."""

    pass


class MalformedAuthorizerOverride(EventBuildError):
    """Raised when an authorizer override is not valid JSON."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"Could not parse authorizer override from {source}: {cause}")


class MalformedToken(EventBuildError):
    """Raised when a bearer token cannot be decoded."""

    def __init__(self, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(f"Could not decode bearer token: {cause}")
