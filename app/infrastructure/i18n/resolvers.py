"""Locale resolution from HTTP request context."""

from typing import List, Optional, Sequence, Tuple

import structlog
from infrastructure.i18n.models import Locale

logger = structlog.get_logger().bind(component="i18n.resolver")


def parse_accept_language(header: str) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into (language range, quality) pairs.

    ``"fr-FR,fr;q=0.9,en;q=0.8"`` -> ``[("fr-FR", 1.0), ("fr", 0.9), ("en", 0.8)]``
    sorted by quality, highest first. Malformed quality values count as 1.0.
    """
    preferences = []
    for part in header.split(","):
        lang_range, _, params = part.partition(";")
        lang_range = lang_range.strip()
        if not lang_range:
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 1.0
        preferences.append((lang_range, quality))
    return sorted(preferences, key=lambda pref: pref[1], reverse=True)


class LocaleResolver:
    """Resolve the locale for a request, falling back to a default."""

    def __init__(
        self,
        default_locale: Locale = Locale.EN_US,
        supported_locales: Optional[Sequence[Locale]] = None,
    ):
        self.default_locale = default_locale
        self.supported_locales = list(supported_locales or [Locale.EN_US, Locale.FR_FR])

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Return the first supported locale in the header's preference order.

        Exact tags win over language-only matches (``fr`` matches ``fr-FR``).
        ``*`` and unknown languages fall through to the default.
        """
        if not accept_language:
            return self.default_locale

        for lang_range, _ in parse_accept_language(accept_language):
            for locale in self.supported_locales:
                if locale.value.lower() == lang_range.lower():
                    return locale

            lang_code = lang_range.split("-")[0].lower()
            for locale in self.supported_locales:
                if locale.language.lower() == lang_code:
                    return locale

        logger.debug(
            "no_matching_locale_in_header",
            accept_language=accept_language,
            default=self.default_locale.value,
        )
        return self.default_locale
