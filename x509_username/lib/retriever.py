"""User name retrievers: the public entry point.

A retriever is configured with one token (see ``field_resolver``) and turns a
client certificate into a user name. The certificate's trust chain must
already have been validated; nothing here checks it.

Subject DN mode::

    SubjectDnRetriever("CN").get_user_name(cert)        # "Bob"
    SubjectDnRetriever("e").get_user_name(cert)         # emailAddress attribute
    SubjectDnRetriever().get_user_name(cert)            # "CN=Bob,OU=Eng,C=US"

Subject Alternative Name mode::

    SubjectAlternativeNameRetriever("Principal Name").get_user_name(cert)
    SubjectAlternativeNameRetriever("RFC822 Name").get_user_name(cert)

Both modes fall back to the whole Subject DN when the configured field is
missing, and return None only when there is no certificate.
"""

from typing import Protocol

from cryptography import x509

from .cert_utils import get_san_entries, get_subject_dn
from .config import RetrieveField, RetrieverConfig
from .field_resolver import resolve
from .logging_config import LOGGER
from .models import FieldSelector, ResolvedConfiguration, WholeSubjectDn
from .san_extractor import SubjectAlternativeNameExtractor
from .subject_dn import SubjectDnExtractor


class UserNameRetriever(Protocol):
    """Anything that can name the owner of a client certificate."""

    def get_user_name(self, cert: x509.Certificate | None) -> str | None: ...

    def configure(self, configuration: str | None) -> None: ...


class SubjectDnRetriever:
    """Take the user name from the Subject DN or one of its attributes."""

    mode = RetrieveField.SUBJECT_DN

    def __init__(
        self,
        configuration: str | None = None,
        dn_extractor: SubjectDnExtractor | None = None,
    ) -> None:
        self.dn_extractor = dn_extractor or SubjectDnExtractor()
        self.configure(configuration)

    @property
    def configuration(self) -> str | None:
        return self.settings.configuration

    @property
    def selector(self) -> FieldSelector:
        return self.settings.selector

    def configure(self, configuration: str | None) -> None:
        """Resolve and install a new configuration token.

        Token and selector are swapped in one assignment, so calls already
        running keep the pair they started with.
        """
        self.settings = ResolvedConfiguration(configuration, resolve(configuration, self.mode))

    def get_user_name(self, cert: x509.Certificate | None) -> str | None:
        """Return the configured attribute, or the whole Subject DN if absent."""
        settings = self.settings
        subject = get_subject_dn(cert)
        if subject is None:
            return None

        LOGGER.debug("Subject is [%s].", subject)
        user_name = self.dn_extractor.extract(subject, settings.selector)
        if user_name is None:
            LOGGER.info(
                "subject [%s] does not contain the required attribute [%s]. Return the whole subject.",
                subject,
                settings.configuration,
            )
            return subject
        return user_name


class SubjectAlternativeNameRetriever:
    """Take the user name from a Subject Alternative Name entry.

    Falls back to the whole Subject DN through the DN extractor, which is
    held rather than inherited.
    """

    mode = RetrieveField.SUBJECT_ALTERNATIVE_NAME

    def __init__(
        self,
        configuration: str | None = None,
        san_extractor: SubjectAlternativeNameExtractor | None = None,
        dn_extractor: SubjectDnExtractor | None = None,
    ) -> None:
        self.san_extractor = san_extractor or SubjectAlternativeNameExtractor()
        self.dn_extractor = dn_extractor or SubjectDnExtractor()
        self.configure(configuration)

    @property
    def configuration(self) -> str | None:
        return self.settings.configuration

    @property
    def selector(self) -> FieldSelector:
        return self.settings.selector

    def configure(self, configuration: str | None) -> None:
        """Resolve and install a new configuration token."""
        self.settings = ResolvedConfiguration(configuration, resolve(configuration, self.mode))

    def get_user_name(self, cert: x509.Certificate | None) -> str | None:
        """Return the first decodable SAN entry of the configured category."""
        if cert is None:
            LOGGER.debug("Can not get UserName, clientCert is None")
            return None

        selector = self.settings.selector
        return self.san_extractor.extract(
            get_san_entries(cert),
            selector,
            lambda: self.dn_extractor.extract(get_subject_dn(cert), WholeSubjectDn()),
        )


def create_retriever(config: RetrieverConfig) -> UserNameRetriever:
    """Build the retriever variant selected by configuration."""
    if config.retrieve_field is RetrieveField.SUBJECT_ALTERNATIVE_NAME:
        return SubjectAlternativeNameRetriever(config.configuration)
    return SubjectDnRetriever(config.configuration)
