"""Translation service for retrieving and interpolating translated messages."""

import re
from typing import Any, Dict, List, Optional

from core.logging import get_module_logger
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog, TranslationKey

logger = get_module_logger()

_DOUBLE_BRACE = re.compile(r"\{\{(\w+)\}\}")
_SINGLE_BRACE = re.compile(r"\{(\w+)\}")


class Translator:
    """Translate messages for a locale with variable interpolation.

    Attributes:
        loader: TranslationLoader used to fill the catalogs.
        catalogs: Loaded catalogs keyed by locale.
        fallback_locale: Locale consulted when a key is missing.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_locale: Locale = Locale.EN_US,
    ):
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.catalogs: Dict[Locale, TranslationCatalog] = {}

    def load_all(self) -> None:
        """Load all available locales from loader."""
        self.catalogs = self.loader.load_all()
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def translate_message(
        self,
        key: TranslationKey,
        locale: Locale,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Falls back to ``fallback_locale`` when the key is missing in the
        requested locale. Placeholders use ``{{name}}`` or ``{name}``.

        Raises:
            KeyError: If key is missing in both locales.
            ValueError: If a placeholder has no matching variable.
        """
        catalog = self.catalogs.get(locale)
        message = catalog.get_message(key) if catalog else None

        if message is None and locale != self.fallback_locale:
            fallback_catalog = self.catalogs.get(self.fallback_locale)
            message = fallback_catalog.get_message(key) if fallback_catalog else None
            if message is not None:
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_locale=locale.value,
                    fallback_locale=self.fallback_locale.value,
                )

        if message is None:
            logger.error(
                "translation_not_found",
                key=str(key),
                locale=locale.value,
                fallback_locale=self.fallback_locale.value,
            )
            raise KeyError(
                f"Translation not found for key {key} in {locale.value} or fallback {self.fallback_locale.value}"
            )

        return self._interpolate(message, variables or {})

    def localize(self, key: str, locale: Locale, **variables: Any) -> str:
        """Translate a dotted key string, e.g. ``speechBubbles.memberGroupSavedHeader``."""
        return self.translate_message(TranslationKey.from_string(key), locale, variables)

    def get_available_locales(self) -> List[Locale]:
        return list(self.catalogs.keys())

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        double_matches = _DOUBLE_BRACE.findall(message)
        single_matches = _SINGLE_BRACE.findall(message)

        for var_name in dict.fromkeys(double_matches + single_matches):
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        # Double braces first so "{{x}}" is not left as "{value}"
        for var_name in double_matches:
            message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))
        for var_name in single_matches:
            message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

        return message
