"""Shared test data and DER builders."""

from collections.abc import Callable

from cryptography import x509
from pyasn1.codec.der import encoder
from pyasn1.type import char

SUBJECT_DN = "CN=Bob,emailAddress=bob@example.com,OU=Eng,C=US"
UPN = "bobOtherAltName@example.com"

CertificateFactory = Callable[..., x509.Certificate]

# SEQUENCE { OID 1.2.3.4, [0] { UTF8String "alice" } }
ALICE_OTHER_NAME = bytes.fromhex("300e06032a0304a0070c05") + b"alice"
# SEQUENCE { OID 1.2.3.4 }
OTHER_NAME_WITHOUT_VALUE = bytes.fromhex("300506032a0304")
# SEQUENCE { OID 1.2.3.4, UTF8String "bob" } with no context tag
OTHER_NAME_UNTAGGED_VALUE = bytes.fromhex("300a06032a03040c03") + b"bob"


def utf8_der(text: str) -> bytes:
    """DER encode text as a UTF8String."""
    return encoder.encode(char.UTF8String(text))


def ia5_der(text: str) -> bytes:
    """DER encode text as an IA5String."""
    return encoder.encode(char.IA5String(text))


# SEQUENCE { OID 1.2.3.4, [1] { UTF8String "bob" } }
OTHER_NAME_WRONG_TAG = bytes.fromhex("300c06032a0304a1050c03") + b"bob"

# GeneralNames, in order:
#   [3] x400Address { builtInStandardAttributes {} }
#   [1] rfc822Name "bob@example.com"
#   [0] otherName { OID 1.2.3.4, [0] { UTF8String "alice" } }
#   [4] directoryName { CN=bob }
#   [7] iPAddress 192.168.7.1
SAN_WITH_X400_ADDRESS = (
    bytes.fromhex("303d")
    + bytes.fromhex("a3023000")
    + bytes.fromhex("810f")
    + b"bob@example.com"
    + bytes.fromhex("a00e06032a0304a0070c05")
    + b"alice"
    + bytes.fromhex("a410300e310c300a06035504030c03")
    + b"bob"
    + bytes.fromhex("8704c0a80701")
)
