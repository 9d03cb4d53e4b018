"""Retriever configuration dataclasses."""

import os
from dataclasses import dataclass
from enum import Enum

RETRIEVE_FIELD_ENV = "X509_USERNAME_RETRIEVE_FIELD"
CONFIGURATION_ENV = "X509_USERNAME_CONFIGURATION"


class RetrieveField(Enum):
    """Certificate location the user name is taken from."""

    SUBJECT_DN = "SubjectDN"
    SUBJECT_ALTERNATIVE_NAME = "SubjectAlternativeName"

    @classmethod
    def parse(cls, value: str) -> "RetrieveField":
        """Parse a retrieve field name case-insensitively.

        Raises:
            ValueError: If value names neither location
        """
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValueError(f"Unknown retrieve field '{value}'")


@dataclass
class RetrieverConfig:
    """User name retriever configuration.

    ``configuration`` is the free-form field token (e.g. ``"CN"``,
    ``"e"``, ``"Principal Name"``); ``None`` selects the whole Subject DN.
    """

    retrieve_field: RetrieveField = RetrieveField.SUBJECT_DN
    configuration: str | None = None

    @classmethod
    def from_env(cls) -> "RetrieverConfig":
        """Build configuration from environment variables.

        Raises:
            ValueError: If the retrieve field variable holds an unknown value
        """
        retrieve_field = RetrieveField.parse(
            os.environ.get(RETRIEVE_FIELD_ENV, RetrieveField.SUBJECT_DN.value)
        )
        configuration = os.environ.get(CONFIGURATION_ENV) or None
        return cls(retrieve_field=retrieve_field, configuration=configuration)
