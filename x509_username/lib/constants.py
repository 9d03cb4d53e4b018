"""Subject Alternative Name categories, configuration aliases and DN attribute names.

Alias values are stored lower case; lookups lower-case the configuration token.
"""

from enum import IntEnum

from cryptography import x509
from cryptography.x509.oid import NameOID


class SanCategory(IntEnum):
    """GeneralName choice, numbered as in the certificate encoding (RFC 5280)."""

    OTHER_NAME = 0
    RFC822_NAME = 1
    DNS_NAME = 2
    X400_ADDRESS = 3
    DIRECTORY_NAME = 4
    EDI_PARTY_NAME = 5
    UNIFORM_RESOURCE_IDENTIFIER = 6
    IP_ADDRESS = 7
    REGISTERED_ID = 8

    @property
    def canonical_name(self) -> str:
        """Return the RFC 5280 name, e.g. ``rfc822Name``."""
        return _CANONICAL_NAMES[self]


_CANONICAL_NAMES: dict[SanCategory, str] = {
    SanCategory.OTHER_NAME: "otherName",
    SanCategory.RFC822_NAME: "rfc822Name",
    SanCategory.DNS_NAME: "dNSName",
    SanCategory.X400_ADDRESS: "x400Address",
    SanCategory.DIRECTORY_NAME: "directoryName",
    SanCategory.EDI_PARTY_NAME: "ediPartyName",
    SanCategory.UNIFORM_RESOURCE_IDENTIFIER: "uniformResourceIdentifier",
    SanCategory.IP_ADDRESS: "iPAddress",
    SanCategory.REGISTERED_ID: "registeredID",
}

# Legends shown by IE, Firefox and Chrome certificate viewers.
SAN_ALIASES: dict[SanCategory, frozenset[str]] = {
    SanCategory.OTHER_NAME: frozenset(
        {"other name", "principalname", "principal name", "microsoft principal name"}
    ),
    SanCategory.RFC822_NAME: frozenset(
        {
            "rfc822 name",
            "rfc822name",
            "emailaddress",
            "email address",
            "e-mail address",
            "e-mailaddress",
        }
    ),
    SanCategory.DNS_NAME: frozenset({"dns name", "dnsname"}),
    SanCategory.X400_ADDRESS: frozenset(),
    SanCategory.DIRECTORY_NAME: frozenset(
        {"directory address", "x500 name", "x500name", "x.500 name", "x.500name"}
    ),
    SanCategory.EDI_PARTY_NAME: frozenset(),
    SanCategory.UNIFORM_RESOURCE_IDENTIFIER: frozenset({"url", "uri"}),
    SanCategory.IP_ADDRESS: frozenset({"ip address", "ipaddress"}),
    SanCategory.REGISTERED_ID: frozenset(
        {"registered id", "registeredid", "registered oid", "registeredoid"}
    ),
}

# Only these categories arrive as DER bytes; the rest are text.
BINARY_SAN_CATEGORIES = frozenset(
    {SanCategory.OTHER_NAME, SanCategory.X400_ADDRESS, SanCategory.EDI_PARTY_NAME}
)

EMAIL_SUBJECT_ATTRIBUTE = "emailAddress"
EMAIL_ALIASES = frozenset({EMAIL_SUBJECT_ATTRIBUTE.lower(), "e"})

# PKCS #9 attributes, also found in device certificate subjects
UNSTRUCTURED_NAME_OID = x509.ObjectIdentifier("1.2.840.113549.1.9.2")
UNSTRUCTURED_ADDRESS_OID = x509.ObjectIdentifier("1.2.840.113549.1.9.8")

# Registered attribute type names in a Subject DN string, keyed lower case.
DN_ATTRIBUTE_OIDS: dict[str, x509.ObjectIdentifier] = {
    "cn": NameOID.COMMON_NAME,
    "c": NameOID.COUNTRY_NAME,
    "l": NameOID.LOCALITY_NAME,
    "st": NameOID.STATE_OR_PROVINCE_NAME,
    "s": NameOID.STATE_OR_PROVINCE_NAME,
    "street": NameOID.STREET_ADDRESS,
    "o": NameOID.ORGANIZATION_NAME,
    "ou": NameOID.ORGANIZATIONAL_UNIT_NAME,
    "dc": NameOID.DOMAIN_COMPONENT,
    "uid": NameOID.USER_ID,
    "emailaddress": NameOID.EMAIL_ADDRESS,
    "e": NameOID.EMAIL_ADDRESS,
    "serialnumber": NameOID.SERIAL_NUMBER,
    "sn": NameOID.SURNAME,
    "surname": NameOID.SURNAME,
    "givenname": NameOID.GIVEN_NAME,
    "gn": NameOID.GIVEN_NAME,
    "t": NameOID.TITLE,
    "title": NameOID.TITLE,
    "initials": NameOID.INITIALS,
    "generationqualifier": NameOID.GENERATION_QUALIFIER,
    "dnqualifier": NameOID.DN_QUALIFIER,
    "pseudonym": NameOID.PSEUDONYM,
    "postalcode": NameOID.POSTAL_CODE,
    "businesscategory": NameOID.BUSINESS_CATEGORY,
    "unstructuredname": UNSTRUCTURED_NAME_OID,
    "unstructuredaddress": UNSTRUCTURED_ADDRESS_OID,
    "organizationidentifier": NameOID.ORGANIZATION_IDENTIFIER,
}

# Names used when rendering a subject; must round-trip through DN_ATTRIBUTE_OIDS.
DN_ATTRIBUTE_NAMES: dict[x509.ObjectIdentifier, str] = {
    NameOID.EMAIL_ADDRESS: EMAIL_SUBJECT_ATTRIBUTE,
    NameOID.SERIAL_NUMBER: "serialNumber",
    NameOID.SURNAME: "SN",
    NameOID.GIVEN_NAME: "givenName",
    NameOID.TITLE: "title",
    NameOID.INITIALS: "initials",
    NameOID.GENERATION_QUALIFIER: "generationQualifier",
    NameOID.DN_QUALIFIER: "dnQualifier",
    NameOID.PSEUDONYM: "pseudonym",
    NameOID.POSTAL_CODE: "postalCode",
    NameOID.BUSINESS_CATEGORY: "businessCategory",
    UNSTRUCTURED_NAME_OID: "unstructuredName",
    UNSTRUCTURED_ADDRESS_OID: "unstructuredAddress",
    NameOID.ORGANIZATION_IDENTIFIER: "organizationIdentifier",
}

MICROSOFT_UPN_OID = x509.ObjectIdentifier("1.3.6.1.4.1.311.20.2.3")
