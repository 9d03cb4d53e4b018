"""Subject Alternative Name user name extraction with Subject DN fallback."""

from collections.abc import Callable, Iterable

from .logging_config import LOGGER
from .models import FieldSelector, SanCategorySelector, SanEntry
from .san_decoder import SanEntryDecoder


class SubjectAlternativeNameExtractor:
    """Pick the user name from the SAN entries of one configured category."""

    def __init__(self, decoder: SanEntryDecoder | None = None) -> None:
        self.decoder = decoder or SanEntryDecoder()

    def extract(
        self,
        entries: Iterable[SanEntry] | None,
        selector: FieldSelector,
        dn_fallback: Callable[[], str | None],
    ) -> str | None:
        """Return the first decodable entry of the selected category.

        Entries are visited in certificate order. An entry that fails to
        decode does not stop the scan, but the first one that decodes wins
        even if later entries of the same category exist. When nothing
        matches, the whole Subject DN from ``dn_fallback`` is returned.

        Args:
            entries: SAN entries, or None if the certificate has none
            selector: Resolved configuration
            dn_fallback: Supplies the whole Subject DN

        Returns:
            User name, or whatever dn_fallback returns
        """
        if not isinstance(selector, SanCategorySelector):
            LOGGER.debug("Can not get UserName, no SAN category configured (%r)", selector)
        elif entries is None:
            LOGGER.debug("Can not get UserName, certificate has no subjectAlternativeName")
        else:
            for entry in entries:
                if entry.category != selector.category:
                    continue
                user_name = self.decoder.decode(entry)
                if user_name is not None:
                    LOGGER.debug("Success to retrieve userName [%s].", user_name)
                    return user_name

        LOGGER.info(
            "Can not find userName as part of subjectAlternativeName [%r]. Return the whole subject.",
            selector,
        )
        return dn_fallback()
