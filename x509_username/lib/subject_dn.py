"""Subject DN attribute extraction."""

import re
from collections.abc import Mapping

from cryptography import x509

from .constants import DN_ATTRIBUTE_OIDS
from .logging_config import LOGGER
from .models import FieldSelector, SubjectDnAttribute, WholeSubjectDn

_DESCRIPTOR = re.compile(r"[A-Za-z][A-Za-z0-9-]*")

# Attribute types with no registered name are parsed under this example arc,
# one arc per character of the lowercased name.
_UNREGISTERED_ARC = "2.999"


def _unregistered_oid(name: str) -> x509.ObjectIdentifier:
    arcs = ".".join(str(ord(char)) for char in name.lower())
    return x509.ObjectIdentifier(f"{_UNREGISTERED_ARC}.{arcs}")


def attribute_oid(name: str) -> x509.ObjectIdentifier | None:
    """Map an attribute type name or dotted OID to its object identifier.

    Names are matched without regard to case. A descriptor with no
    registered OID still maps to a stable identifier, so any type a DN
    carries can be selected by name.

    Returns:
        Object identifier, or None when name is not a valid attribute type
    """
    oid = DN_ATTRIBUTE_OIDS.get(name.lower())
    if oid is not None:
        return oid
    if _DESCRIPTOR.fullmatch(name):
        return _unregistered_oid(name)
    try:
        return x509.ObjectIdentifier(name)
    except ValueError:
        return None


class _AttributeNames(dict[str, x509.ObjectIdentifier]):
    """Attribute type lookup that ignores case and accepts any descriptor."""

    def get(self, key, default=None):  # type: ignore[override]
        return attribute_oid(key) or default


_PARSER_NAMES: Mapping[str, x509.ObjectIdentifier] = _AttributeNames(DN_ATTRIBUTE_OIDS)


def parse_subject_dn(dn: str) -> x509.Name:
    """Parse an RFC 2253 / RFC 4514 DN string.

    Raises:
        ValueError: If the string is not a valid distinguished name
    """
    return x509.Name.from_rfc4514_string(dn, _PARSER_NAMES)


class SubjectDnExtractor:
    """Pull the whole Subject DN, or one of its attributes, out of a DN string."""

    def extract(self, dn: str | None, selector: FieldSelector) -> str | None:
        """Return the selected value, or None when absent.

        Attributes are scanned in RDN sequence order (as encoded in the
        certificate) and the first string value of a matching type wins.
        A malformed DN counts as no match.
        """
        if dn is None:
            return None
        if isinstance(selector, WholeSubjectDn):
            return dn
        if not isinstance(selector, SubjectDnAttribute):
            return None

        oid = attribute_oid(selector.name)
        if oid is None:
            LOGGER.debug("Attribute type %r is not a valid DN attribute type", selector.name)
            return None

        try:
            name = parse_subject_dn(dn)
        except ValueError as e:
            LOGGER.info("subject [%s] is not a valid name: [%s]", dn, e)
            return None

        for attribute in name:
            if attribute.oid == oid and isinstance(attribute.value, str):
                LOGGER.debug("Found %s=%s in subject", selector.name, attribute.value)
                return attribute.value
        return None
