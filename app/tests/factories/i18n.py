"""Test data factories for i18n system testing."""

from typing import Optional

from infrastructure.i18n import Locale, TranslationCatalog, TranslationKey


def make_translation_key(
    namespace: str = "speechBubbles", message_key: str = "memberGroupSavedHeader"
) -> TranslationKey:
    return TranslationKey(namespace=namespace, message_key=message_key)


def make_translation_catalog(
    locale: Locale = Locale.EN_US,
    messages: Optional[dict] = None,
) -> TranslationCatalog:
    """Create a TranslationCatalog with a small default message set."""
    if messages is None:
        messages = {
            "speechBubbles": {
                "memberGroupSavedHeader": "Member group saved",
            },
            "memberGroups": {
                "notFound": "Member group {{id}} was not found",
            },
        }
    return TranslationCatalog(locale=locale, messages=messages)
