"""Test fixtures for x509_username tests."""

import ipaddress
from datetime import UTC, datetime, timedelta

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.x509.oid import ExtensionOID, NameOID

from x509_username.lib.constants import MICROSOFT_UPN_OID
from x509_username.tests.helpers import UPN, CertificateFactory, utf8_der


@pytest.fixture(scope="session")
def client_key() -> RSAPrivateKey:
    """Generate RSA private key for test client certificates."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)  # Faster for tests


@pytest.fixture
def subject_name() -> x509.Name:
    """Return client subject, in certificate encoding order."""
    return x509.Name(
        [
            x509.NameAttribute(NameOID.COUNTRY_NAME, "US"),
            x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "Eng"),
            x509.NameAttribute(NameOID.EMAIL_ADDRESS, "bob@example.com"),
            x509.NameAttribute(NameOID.COMMON_NAME, "Bob"),
        ]
    )


@pytest.fixture
def make_certificate(client_key: RSAPrivateKey) -> CertificateFactory:
    """Return a builder for self-signed client certificates with optional SANs.

    raw_san is the DER of a GeneralNames SEQUENCE, used as-is.
    """

    def _make(
        subject: x509.Name,
        general_names: list[x509.GeneralName] | None = None,
        raw_san: bytes | None = None,
    ) -> x509.Certificate:
        not_before = datetime.now(UTC)
        builder = (
            x509.CertificateBuilder()
            .subject_name(subject)
            .issuer_name(subject)
            .public_key(client_key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(not_before)
            .not_valid_after(not_before + timedelta(days=30))
            .add_extension(
                x509.BasicConstraints(ca=False, path_length=None),
                critical=True,
            )
        )
        if general_names:
            builder = builder.add_extension(
                x509.SubjectAlternativeName(general_names),
                critical=False,
            )
        if raw_san is not None:
            # Lets tests carry GeneralName types cryptography can not build
            builder = builder.add_extension(
                x509.UnrecognizedExtension(ExtensionOID.SUBJECT_ALTERNATIVE_NAME, raw_san),
                critical=False,
            )
        return builder.sign(client_key, hashes.SHA256())

    return _make


@pytest.fixture
def san_names() -> list[x509.GeneralName]:
    """Return one SAN of every supported type, plus a second rfc822Name."""
    return [
        x509.DNSName("example1.com"),
        x509.RFC822Name("bobRFC822AltName@example.com"),
        x509.OtherName(MICROSOFT_UPN_OID, utf8_der(UPN)),
        x509.DirectoryName(
            x509.Name(
                [
                    x509.NameAttribute(NameOID.COUNTRY_NAME, "US"),
                    x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Gold Music"),
                    x509.NameAttribute(NameOID.COMMON_NAME, "bob"),
                ]
            )
        ),
        x509.UniformResourceIdentifier("http://example.com/"),
        x509.IPAddress(ipaddress.IPv4Address("192.168.7.1")),
        x509.RegisteredID(x509.ObjectIdentifier("1.2.3.4")),
        x509.RFC822Name("second@example.com"),
    ]


@pytest.fixture
def client_cert(
    make_certificate: CertificateFactory,
    subject_name: x509.Name,
    san_names: list[x509.GeneralName],
) -> x509.Certificate:
    """Client certificate with a full set of Subject Alternative Names."""
    return make_certificate(subject_name, san_names)


@pytest.fixture
def client_cert_without_san(
    make_certificate: CertificateFactory,
    subject_name: x509.Name,
) -> x509.Certificate:
    """Client certificate without a Subject Alternative Name extension."""
    return make_certificate(subject_name)
