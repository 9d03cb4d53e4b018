"""DER helpers for the otherName GeneralName and the raw SAN extension.

otherName is encoded as::

    AnotherName ::= SEQUENCE {
        type-id    OBJECT IDENTIFIER,
        value      [0] EXPLICIT ANY DEFINED BY type-id }

Decoding is kept here so the ASN.1 library stays behind this module.
"""

import ipaddress

from pyasn1.codec.der import decoder, encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import char, tag, univ
from pyasn1_modules import rfc5280

from .constants import SanCategory

# Identifier octet of a context-specific, constructed [0] tag
_EXPLICIT_TAG_0 = 0xA0

_VALUE_SPEC = univ.Any().subtype(
    explicitTag=tag.Tag(tag.tagClassContext, tag.tagFormatSimple, 0)
)

_GENERAL_NAME_CATEGORIES: dict[str, SanCategory] = {
    "otherName": SanCategory.OTHER_NAME,
    "rfc822Name": SanCategory.RFC822_NAME,
    "dNSName": SanCategory.DNS_NAME,
    "x400Address": SanCategory.X400_ADDRESS,
    "directoryName": SanCategory.DIRECTORY_NAME,
    "ediPartyName": SanCategory.EDI_PARTY_NAME,
    "uniformResourceIdentifier": SanCategory.UNIFORM_RESOURCE_IDENTIFIER,
    "iPAddress": SanCategory.IP_ADDRESS,
    "registeredID": SanCategory.REGISTERED_ID,
}

# A directoryName as a list of RDNs, each a list of (dotted type, text value)
RdnSequence = list[list[tuple[str, str]]]
GeneralNameValue = str | bytes | RdnSequence


class DerDecodeError(ValueError):
    """DER payload does not have the expected structure."""


def unwrap_other_name(data: bytes) -> tuple[str, bytes]:
    """Split an otherName SEQUENCE into its type-id and tagged content.

    The SEQUENCE is read element by element so an untagged value in
    second position is rejected rather than taken as the payload.

    Args:
        data: DER encoded AnotherName

    Returns:
        Tuple of (dotted type-id, DER of the value inside the [0] tag)

    Raises:
        DerDecodeError: If data is not a SEQUENCE of an OID and a [0] tagged value
    """
    try:
        elements, _ = decoder.decode(data, asn1Spec=univ.SequenceOf(componentType=univ.Any()))
        if len(elements) < 2:
            raise DerDecodeError(f"otherName has {len(elements)} element(s), expected 2")

        type_id, _ = decoder.decode(elements[0].asOctets(), asn1Spec=univ.ObjectIdentifier())
        tagged = elements[1].asOctets()
        if tagged[0] != _EXPLICIT_TAG_0:
            raise DerDecodeError(f"otherName value has tag 0x{tagged[0]:02x}, expected [0]")

        value, _ = decoder.decode(tagged, asn1Spec=_VALUE_SPEC)
    except PyAsn1Error as e:
        raise DerDecodeError(f"not an otherName sequence: {e}") from e
    return str(type_id), value.asOctets()


def decode_utf8_string(data: bytes) -> str:
    """Decode a DER UTF8String.

    Raises:
        DerDecodeError: If data is not a UTF8String
    """
    try:
        value, _ = decoder.decode(data, asn1Spec=char.UTF8String())
        return str(value)
    except (PyAsn1Error, UnicodeDecodeError) as e:
        raise DerDecodeError(f"not a UTF8String: {e}") from e


def encode_other_name(type_id: str, value: bytes) -> bytes:
    """Encode an otherName SEQUENCE from its type-id and DER value.

    ``cryptography`` exposes only the content of the [0] tag, this restores
    the full GeneralName payload.
    """
    other_name = rfc5280.AnotherName()
    other_name["type-id"] = univ.ObjectIdentifier(type_id)
    other_name["value"] = value
    return encoder.encode(other_name)


def _attribute_text(value: univ.Any) -> str:
    decoded, _ = decoder.decode(value.asOctets())
    return str(decoded)


def _general_name_value(
    general_name: rfc5280.GeneralName,
) -> tuple[SanCategory, GeneralNameValue]:
    kind = general_name.getName()
    component = general_name.getComponent()
    category = _GENERAL_NAME_CATEGORIES[kind]

    if category is SanCategory.OTHER_NAME:
        return category, encode_other_name(
            str(component["type-id"]), component["value"].asOctets()
        )
    if category in (SanCategory.X400_ADDRESS, SanCategory.EDI_PARTY_NAME):
        return category, encoder.encode(component)
    if category is SanCategory.DIRECTORY_NAME:
        rdns = [
            [(str(atv["type"]), _attribute_text(atv["value"])) for atv in rdn]
            for rdn in component[0]
        ]
        return category, rdns
    if category is SanCategory.IP_ADDRESS:
        return category, str(ipaddress.ip_address(component.asOctets()))
    return category, str(component)


def decode_subject_alt_name(
    tbs_certificate: bytes,
) -> list[tuple[SanCategory, GeneralNameValue]] | None:
    """Read every SAN entry straight from a DER TBSCertificate.

    Covers the x400Address and ediPartyName entries that ``cryptography``
    refuses to parse. Those come back as their DER encoding.

    Args:
        tbs_certificate: DER of the certificate's to-be-signed part

    Returns:
        (category, value) pairs in certificate order, or None when the
        certificate has no subjectAltName extension

    Raises:
        DerDecodeError: If the certificate or the extension is malformed
    """
    try:
        tbs, _ = decoder.decode(tbs_certificate, asn1Spec=rfc5280.TBSCertificate())
        extensions = tbs["extensions"]
        if not extensions.isValue:
            return None

        for extension in extensions:
            if extension["extnID"] != rfc5280.id_ce_subjectAltName:
                continue
            general_names, _ = decoder.decode(
                extension["extnValue"].asOctets(), asn1Spec=rfc5280.SubjectAltName()
            )
            return [_general_name_value(general_name) for general_name in general_names]
    except (PyAsn1Error, ValueError) as e:
        raise DerDecodeError(f"can not decode subjectAltName: {e}") from e
    return None
