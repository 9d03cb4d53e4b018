"""Client certificate retrieval from the request."""

from collections.abc import Sequence

from cryptography import x509

from ._types import APIGatewayEventV2
from .cert_utils import load_certificate
from .logging_config import LOGGER


def extract_client_cert_pem(event: APIGatewayEventV2) -> str | None:
    """Extract the client certificate PEM from the mTLS context."""
    request_context = event.get("requestContext", {})
    authentication = request_context.get("authentication", {})
    client_cert = authentication.get("clientCert", {})
    return client_cert.get("clientCertPem") or None


def extract_client_certificate(event: APIGatewayEventV2) -> x509.Certificate | None:
    """Parse the client certificate presented during the mTLS handshake."""
    pem = extract_client_cert_pem(event)
    if pem is None:
        LOGGER.debug("No client certificate found in the request.")
        return None
    return load_certificate(pem)


def get_client_certificate(
    attribute: x509.Certificate | Sequence[x509.Certificate] | str | None,
) -> x509.Certificate | None:
    """Take the client certificate from a request attribute.

    The attribute may hold the certificate, the presented chain (the
    client certificate first), or the certificate as a PEM string.
    """
    if isinstance(attribute, x509.Certificate):
        return attribute
    if isinstance(attribute, str):
        LOGGER.debug("Received a string, converting it into a certificate.")
        return load_certificate(attribute)
    if isinstance(attribute, Sequence) and attribute:
        first = attribute[0]
        if isinstance(first, x509.Certificate):
            return first
    LOGGER.debug("No client certificate found in the request.")
    return None
