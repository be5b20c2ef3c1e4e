"""
Event builder configuration.

Loads the environment overrides read while building proxy events.
Uses pydantic-settings so tests can construct an explicit instance instead of
mutating the process environment.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_PREFIX = "offlineContext_"


class EventConfig(BaseSettings):
    """
    Environment overrides for the proxy integration event.

    Every field is optional; an unset or empty value falls back to the
    ``offlineContext_*`` placeholder chosen by the builder.
    """

    # Authorizer overrides
    AUTHORIZER: Optional[str] = Field(
        default=None, description="JSON authorizer result replacing the synthesized one"
    )
    PRINCIPAL_ID: Optional[str] = Field(
        default=None, description="principalId used when the request carries none"
    )

    # requestContext.identity overrides
    SLS_ACCOUNT_ID: Optional[str] = Field(default=None, description="identity.accountId")
    SLS_API_KEY: Optional[str] = Field(default=None, description="identity.apiKey")
    SLS_API_KEY_ID: Optional[str] = Field(default=None, description="identity.apiKeyId")
    SLS_CALLER: Optional[str] = Field(default=None, description="identity.caller")
    SLS_COGNITO_AUTHENTICATION_PROVIDER: Optional[str] = Field(
        default=None, description="identity.cognitoAuthenticationProvider"
    )
    SLS_COGNITO_AUTHENTICATION_TYPE: Optional[str] = Field(
        default=None, description="identity.cognitoAuthenticationType"
    )
    SLS_COGNITO_IDENTITY_ID: Optional[str] = Field(
        default=None, description="identity.cognitoIdentityId"
    )
    SLS_COGNITO_IDENTITY_POOL_ID: Optional[str] = Field(
        default=None, description="identity.cognitoIdentityPoolId"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    @field_validator(
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
        mode="before",
    )
    @classmethod
    def empty_as_unset(cls, value):
        # An exported-but-empty variable counts as unset.
        if value == "":
            return None
        return value


def load_config() -> EventConfig:
    """Read a fresh EventConfig from the current environment."""
    return EventConfig()
