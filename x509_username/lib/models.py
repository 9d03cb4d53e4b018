"""Value types for user name retrieval."""

from dataclasses import dataclass

from .constants import SanCategory


@dataclass(frozen=True)
class SanEntry:
    """One Subject Alternative Name entry, in certificate order.

    ``value`` is text for string-valued categories and DER bytes for
    otherName, x400Address and ediPartyName.
    """

    category: SanCategory
    value: str | bytes


@dataclass(frozen=True)
class WholeSubjectDn:
    """Use the entire Subject DN as the user name."""


@dataclass(frozen=True)
class SubjectDnAttribute:
    """Use the first Subject DN attribute of this type (e.g. ``CN``)."""

    name: str


@dataclass(frozen=True)
class SanCategorySelector:
    """Use the first decodable SAN entry of this category."""

    category: SanCategory


@dataclass(frozen=True)
class Unresolved:
    """Configuration token that matched no alias and no category code."""

    token: str


FieldSelector = WholeSubjectDn | SubjectDnAttribute | SanCategorySelector | Unresolved


@dataclass(frozen=True)
class ResolvedConfiguration:
    """A configuration token paired with the selector it resolved to.

    Retrievers replace this as a whole, so readers never see a token next
    to a selector resolved from a different one.
    """

    configuration: str | None
    selector: FieldSelector
