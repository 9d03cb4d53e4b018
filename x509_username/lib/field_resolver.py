"""Translate a configuration token into a field selector."""

from .config import RetrieveField
from .constants import EMAIL_ALIASES, EMAIL_SUBJECT_ATTRIBUTE, SAN_ALIASES, SanCategory
from .logging_config import LOGGER
from .models import (
    FieldSelector,
    SanCategorySelector,
    SubjectDnAttribute,
    Unresolved,
    WholeSubjectDn,
)


def resolve_san_category(token: str) -> SanCategory | None:
    """Match a token against SAN canonical names, aliases and numeric codes."""
    lowered = token.lower()
    for category, aliases in SAN_ALIASES.items():
        if lowered == category.canonical_name.lower() or lowered in aliases:
            return category

    try:
        return SanCategory(int(token))
    except ValueError:
        return None


def resolve(token: str | None, mode: RetrieveField) -> FieldSelector:
    """Resolve a configuration token for the given retrieval mode.

    Never raises. In DN mode any token is accepted as an attribute type,
    since DN attribute types are an open set. In SAN mode a token that is
    neither an alias nor a category code in [0, 8] resolves to Unresolved.

    Args:
        token: Configuration value, or None for the whole Subject DN
        mode: Which certificate location the retriever reads

    Returns:
        Immutable field selector
    """
    selector: FieldSelector
    if not token:
        selector = WholeSubjectDn()
    elif mode is RetrieveField.SUBJECT_DN:
        if token.lower() in EMAIL_ALIASES:
            selector = SubjectDnAttribute(EMAIL_SUBJECT_ATTRIBUTE)
        else:
            selector = SubjectDnAttribute(token)
    else:
        category = resolve_san_category(token)
        selector = Unresolved(token) if category is None else SanCategorySelector(category)

    LOGGER.debug("Resolved configuration %r in %s mode to %r", token, mode.value, selector)
    return selector
