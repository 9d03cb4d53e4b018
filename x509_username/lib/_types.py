"""Type definitions for the API Gateway mTLS request context."""

from typing import TypedDict


class CertValidity(TypedDict):
    notBefore: str
    notAfter: str


class ClientCert(TypedDict, total=False):
    clientCertPem: str
    subjectDN: str
    issuerDN: str
    serialNumber: str
    validity: CertValidity


class Authentication(TypedDict, total=False):
    clientCert: ClientCert


class RequestContext(TypedDict, total=False):
    authentication: Authentication
    accountId: str
    apiId: str
    http: dict[str, str]


class APIGatewayEventV2(TypedDict, total=False):
    """API Gateway HTTP API v2 event carrying an mTLS client certificate."""

    routeKey: str
    rawPath: str
    headers: dict[str, str]
    requestContext: RequestContext
