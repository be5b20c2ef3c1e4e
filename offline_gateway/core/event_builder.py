import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from offline_gateway.config import PLACEHOLDER_PREFIX, EventConfig, load_config
from offline_gateway.core.authorizer import AuthorizerResolver
from offline_gateway.core.headers import body_to_text, normalize_body, normalize_headers
from offline_gateway.core.query import (
    parse_multi_value_query_string_parameters,
    parse_query_string_parameters,
)
from offline_gateway.core.utils import create_unique_id, format_to_clf_time, null_if_empty
from offline_gateway.models.aws_v1 import (
    ApiGatewayIdentity,
    APIGatewayProxyEvent,
    ApiGatewayRequestContext,
)
from offline_gateway.models.context import NormalizedHeaders, RawRequest, StageContext

PROTOCOL = "HTTP/1.1"


def _placeholder(name: str) -> str:
    return f"{PLACEHOLDER_PREFIX}{name}"


def resolve_resource(route_path: str, stage: str, route_key: Optional[str] = None) -> str:
    """
    Resource path for the event.

    An explicit route key wins; otherwise the first "/<stage>" is cut from
    the route path ("/dev/foo/bar" on stage "dev" -> "/foo/bar").
    """
    if route_key:
        return route_key
    return route_path.replace(f"/{stage}", "", 1)


class EventBuilder(ABC):
    @abstractmethod
    def build(self, request: RawRequest, stage_context: StageContext) -> Dict[str, Any]:
        """
        Build an event dictionary from a captured request.
        """
        pass


class LambdaProxyIntegrationEventBuilder(EventBuilder):
    """API Gateway V1 (REST API) Lambda proxy integration event builder."""

    def __init__(
        self,
        config: Optional[EventConfig] = None,
        log: Optional[logging.Logger] = None,
        id_factory: Callable[[], str] = create_unique_id,
    ):
        # config=None reads the environment on every build.
        self.config = config
        self.log = log
        self.id_factory = id_factory

    def build(self, request: RawRequest, stage_context: StageContext) -> Dict[str, Any]:
        """
        Build an API Gateway Lambda Proxy Integration-compatible event object.
        """
        return self.build_model(request, stage_context).model_dump()

    def build_model(self, request: RawRequest, stage_context: StageContext) -> APIGatewayProxyEvent:
        config = self.config or load_config()

        normalized = normalize_headers(request.raw_headers)
        headers = normalized.headers
        body = normalize_body(request.payload, request.raw_payload, headers)

        authorizer = AuthorizerResolver(config, log=self.log).resolve(headers, request.auth)

        http_method = request.method.upper()
        received = request.info.received

        return APIGatewayProxyEvent(
            body=body_to_text(body),
            headers=headers,
            httpMethod=http_method,
            isBase64Encoded=False,
            multiValueHeaders=normalized.multi_value_headers,
            multiValueQueryStringParameters=parse_multi_value_query_string_parameters(request.url),
            path=stage_context.path,
            pathParameters=null_if_empty(request.params),
            queryStringParameters=parse_query_string_parameters(request.url),
            requestContext=ApiGatewayRequestContext(
                accountId=_placeholder("accountId"),
                apiId=_placeholder("apiId"),
                authorizer=authorizer.to_result(),
                domainName=_placeholder("domainName"),
                domainPrefix=_placeholder("domainPrefix"),
                extendedRequestId=self.id_factory(),
                httpMethod=http_method,
                identity=self._build_identity(request, normalized, config),
                path=stage_context.path,
                protocol=PROTOCOL,
                requestId=self.id_factory(),
                requestTime=format_to_clf_time(received),
                requestTimeEpoch=received,
                resourceId=_placeholder("resourceId"),
                resourcePath=request.route.path,
                stage=stage_context.stage,
            ),
            resource=resolve_resource(
                request.route.path, stage_context.stage, stage_context.route_key
            ),
            stageVariables=stage_context.stage_variables,
        )

    @staticmethod
    def _build_identity(
        request: RawRequest, normalized: NormalizedHeaders, config: EventConfig
    ) -> ApiGatewayIdentity:
        lowercase = normalized.lowercase
        return ApiGatewayIdentity(
            accessKey=None,
            accountId=config.SLS_ACCOUNT_ID or _placeholder("accountId"),
            apiKey=config.SLS_API_KEY or _placeholder("apiKey"),
            apiKeyId=config.SLS_API_KEY_ID or _placeholder("apiKeyId"),
            caller=config.SLS_CALLER or _placeholder("caller"),
            cognitoAuthenticationProvider=(
                lowercase.get("cognito-authentication-provider")
                or config.SLS_COGNITO_AUTHENTICATION_PROVIDER
                or _placeholder("cognitoAuthenticationProvider")
            ),
            cognitoAuthenticationType=(
                config.SLS_COGNITO_AUTHENTICATION_TYPE or _placeholder("cognitoAuthenticationType")
            ),
            cognitoIdentityId=(
                lowercase.get("cognito-identity-id")
                or config.SLS_COGNITO_IDENTITY_ID
                or _placeholder("cognitoIdentityId")
            ),
            cognitoIdentityPoolId=(
                config.SLS_COGNITO_IDENTITY_POOL_ID or _placeholder("cognitoIdentityPoolId")
            ),
            principalOrgId=None,
            sourceIp=request.info.remote_address,
            user=_placeholder("user"),
            userAgent=lowercase.get("user-agent") or "",
            userArn=_placeholder("userArn"),
        )
