# offline_gateway/models/aws_v1.py

"""
Pydantic models for AWS API Gateway v1 (REST API) event structure.

Reference: https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html#api-gateway-simple-proxy-for-lambda-input-format

Nullable fields are part of the wire format: dump with model_dump() (not
exclude_none) so they reach the function as JSON null.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class ApiGatewayIdentity(BaseModel):
    """API Gateway Identity object."""

    accessKey: Optional[str] = None
    accountId: str
    apiKey: str
    apiKeyId: str
    caller: str
    cognitoAuthenticationProvider: str
    cognitoAuthenticationType: str
    cognitoIdentityId: str
    cognitoIdentityPoolId: str
    principalOrgId: Optional[str] = None
    sourceIp: Optional[str] = None
    user: str
    userAgent: str = ""
    userArn: str


class ApiGatewayRequestContext(BaseModel):
    """API Gateway Request Context object."""

    accountId: str
    apiId: str
    # Either an override supplied verbatim or the synthesized record.
    authorizer: Any = None
    domainName: str
    domainPrefix: str
    extendedRequestId: str
    httpMethod: str
    identity: ApiGatewayIdentity
    path: str
    protocol: str = "HTTP/1.1"
    requestId: str
    requestTime: str
    requestTimeEpoch: int
    resourceId: str
    resourcePath: str
    stage: str


class APIGatewayProxyEvent(BaseModel):
    """
    AWS API Gateway Proxy Integration (v1) Event Structure

    Defines the structure of the event object received by Lambda functions.
    """

    body: Optional[str] = None
    headers: Dict[str, str]
    httpMethod: str
    isBase64Encoded: bool = False
    multiValueHeaders: Optional[Dict[str, List[str]]] = None
    multiValueQueryStringParameters: Dict[str, List[str]]
    path: str
    pathParameters: Optional[Dict[str, str]] = None
    queryStringParameters: Optional[Dict[str, str]] = None
    requestContext: ApiGatewayRequestContext
    resource: str
    stageVariables: Optional[Dict[str, Any]] = None
