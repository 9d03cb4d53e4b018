"""Decode a single Subject Alternative Name entry to text."""

from .constants import BINARY_SAN_CATEGORIES, SanCategory
from .der import DerDecodeError, decode_utf8_string, unwrap_other_name
from .logging_config import LOGGER
from .models import SanEntry


class SanEntryDecoder:
    """Turn a SAN entry into a user name candidate.

    Text categories are returned as-is. Of the DER categories only
    otherName is understood: its [0] tagged value must be a UTF8String
    (e.g. a Microsoft User Principal Name). Anything else yields None.
    """

    def decode(self, entry: SanEntry) -> str | None:
        """Return the entry as text, or None if it cannot be interpreted."""
        binary_category = entry.category in BINARY_SAN_CATEGORIES

        if isinstance(entry.value, str):
            if binary_category:
                LOGGER.info(
                    "Can not get UserName, text value for %s is not supported",
                    entry.category.canonical_name,
                )
                return None
            return entry.value

        if not isinstance(entry.value, bytes) or not binary_category:
            LOGGER.info(
                "Can not get UserName, the subjectAlternativeName not supported [%r].",
                entry.value,
            )
            return None

        if entry.category is not SanCategory.OTHER_NAME:
            LOGGER.debug("No text representation for %s", entry.category.canonical_name)
            return None

        return self.decode_other_name(entry.value)

    def decode_other_name(self, data: bytes) -> str | None:
        """Recover the UTF8String carried by a DER otherName."""
        try:
            type_id, value = unwrap_other_name(data)
            user_name = decode_utf8_string(value)
        except DerDecodeError as e:
            LOGGER.info("Can not get String From ASN.1 DER encoded otherName, [%s].", e)
            return None

        LOGGER.debug("Decoded otherName %s to [%s]", type_id, user_name)
        return user_name
