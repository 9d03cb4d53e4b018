"""Certificate loading and Subject / Subject Alternative Name access."""

from cryptography import x509

from .constants import DN_ATTRIBUTE_NAMES, SanCategory
from .der import decode_subject_alt_name, encode_other_name
from .logging_config import LOGGER
from .models import SanEntry

_TEXT_CATEGORIES: dict[type, SanCategory] = {
    x509.RFC822Name: SanCategory.RFC822_NAME,
    x509.DNSName: SanCategory.DNS_NAME,
    x509.UniformResourceIdentifier: SanCategory.UNIFORM_RESOURCE_IDENTIFIER,
}


def deserialize_certificate(data: bytes) -> x509.Certificate:
    """Deserialize certificate from PEM or DER bytes.

    Raises:
        ValueError: If data is neither a PEM nor a DER certificate
    """
    if b"-----BEGIN" in data:
        return x509.load_pem_x509_certificate(data)
    return x509.load_der_x509_certificate(data)


def load_certificate(data: str | bytes) -> x509.Certificate | None:
    """Load a certificate, returning None if it cannot be parsed."""
    if isinstance(data, str):
        data = data.encode()
    try:
        return deserialize_certificate(data)
    except ValueError as e:
        LOGGER.info("Failed to convert data into certificate: %s", e)
        return None


def format_name(name: x509.Name) -> str:
    """Render a Name as an RFC 4514 string readable by the DN extractor."""
    return name.rfc4514_string(DN_ATTRIBUTE_NAMES)


def get_subject_dn(cert: x509.Certificate | None) -> str | None:
    """Return the whole Subject DN of the certificate."""
    if cert is None:
        LOGGER.debug("Can not get SubjectDN, clientCert is None")
        return None
    return format_name(cert.subject)


def to_san_entry(general_name: x509.GeneralName) -> SanEntry:
    """Convert a cryptography GeneralName into a SAN entry.

    Raises:
        ValueError: If the GeneralName type has no SAN category
    """
    if isinstance(general_name, x509.OtherName):
        return SanEntry(
            SanCategory.OTHER_NAME,
            encode_other_name(general_name.type_id.dotted_string, general_name.value),
        )
    if isinstance(general_name, x509.DirectoryName):
        return SanEntry(SanCategory.DIRECTORY_NAME, format_name(general_name.value))
    if isinstance(general_name, x509.IPAddress):
        return SanEntry(SanCategory.IP_ADDRESS, str(general_name.value))
    if isinstance(general_name, x509.RegisteredID):
        return SanEntry(SanCategory.REGISTERED_ID, general_name.value.dotted_string)

    category = _TEXT_CATEGORIES.get(type(general_name))
    if category is None:
        raise ValueError(f"Unsupported GeneralName {general_name!r}")
    return SanEntry(category, general_name.value)


def _decode_san_entries(cert: x509.Certificate) -> list[SanEntry] | None:
    """Read the SAN extension with pyasn1 when cryptography can not."""
    try:
        general_names = decode_subject_alt_name(cert.tbs_certificate_bytes)
        if general_names is None:
            return None

        entries = []
        for category, value in general_names:
            if category is SanCategory.DIRECTORY_NAME:
                value = format_name(
                    x509.Name(
                        [
                            x509.RelativeDistinguishedName(
                                [
                                    x509.NameAttribute(x509.ObjectIdentifier(oid), text)
                                    for oid, text in rdn
                                ]
                            )
                            for rdn in value
                        ]
                    )
                )
            entries.append(SanEntry(category, value))
        return entries
    except ValueError as e:
        LOGGER.info("Can not decode subjectAlternativeNames from certificate [%s].", e)
        return None


def get_san_entries(cert: x509.Certificate) -> list[SanEntry] | None:
    """Return the SAN entries in certificate order.

    x400Address and ediPartyName entries are kept as DER bytes, so the
    entries around them stay reachable.

    Returns:
        Entries, or None when the extension is absent or cannot be read
    """
    try:
        extension = cert.extensions.get_extension_for_class(x509.SubjectAlternativeName)
    except x509.ExtensionNotFound:
        return None
    except x509.UnsupportedGeneralNameType as e:
        LOGGER.info("subjectAlternativeNames hold [%s], decoding the extension directly.", e)
        return _decode_san_entries(cert)
    except (ValueError, x509.DuplicateExtension) as e:
        LOGGER.info("Can not get subjectAlternativeNames from certificate [%s].", e)
        return None

    try:
        return [to_san_entry(general_name) for general_name in extension.value]
    except ValueError as e:
        LOGGER.info("Can not get subjectAlternativeNames from certificate [%s].", e)
        return None
