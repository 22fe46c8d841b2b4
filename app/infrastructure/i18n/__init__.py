"""i18n system: YAML catalogs, locale resolution and message interpolation.

Main components:
- models: Locale, TranslationKey, TranslationCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator service with message interpolation
- resolvers: LocaleResolver for Accept-Language negotiation
- factory: create_translator for the default locales directory
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog, TranslationKey
from infrastructure.i18n.resolvers import LocaleResolver, parse_accept_language
from infrastructure.i18n.translator import Translator

__all__ = [
    "Locale",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LocaleResolver",
    "parse_accept_language",
    "create_translator",
]
