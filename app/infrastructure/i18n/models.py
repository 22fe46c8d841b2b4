"""Translation models for the i18n system."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional


class Locale(str, Enum):
    """Supported locale identifiers (IETF BCP 47 tags)."""

    EN_US = "en-US"
    FR_FR = "fr-FR"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @classmethod
    def parse_many(cls, values: Iterable[str]) -> List["Locale"]:
        """Parse locale strings, skipping any that are not supported."""
        locales = []
        for value in values:
            try:
                locales.append(cls.from_string(value))
            except ValueError:
                continue
        return locales

    @property
    def language(self) -> str:
        """Language part of the locale (``en`` for ``en-US``)."""
        return self.value.split("-")[0]


@dataclass(frozen=True)
class TranslationKey:
    """Key addressing a message inside a catalog.

    Keys have two parts, e.g. ``speechBubbles.memberGroupSavedHeader``.
    Frozen so keys can be used in dicts and sets.
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create a TranslationKey from ``namespace.key``.

        Raises:
            ValueError: If key_string has no namespace separator.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass
class TranslationCatalog:
    """All messages loaded for one locale, grouped by namespace.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Nested dict ``{namespace: {key: message}}``.
    """

    locale: Locale
    messages: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def get_message(self, key: TranslationKey) -> Optional[str]:
        return self.messages.get(key.namespace, {}).get(key.message_key)
