"""
Where: offline_gateway/models/authorizer.py
What: Tagged states for the requestContext.authorizer value.
Why: Make each step of the override chain an explicit transition.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Unset:
    """No override has been parsed yet."""

    def to_result(self) -> Optional[Any]:
        return None


@dataclass(frozen=True)
class Overridden:
    """A JSON value supplied through the environment or a request header."""

    value: Any
    source: str

    def to_result(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Synthesized:
    """Record built from request credentials and bearer-token claims."""

    record: Dict[str, Any] = field(default_factory=dict)

    def to_result(self) -> Dict[str, Any]:
        return self.record


AuthorizerState = Union[Unset, Overridden, Synthesized]
