"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from infrastructure.i18n import YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Directory with member_groups and errors catalogs in two locales."""
    files = {
        "member_groups.en-US.yml": {
            "speechBubbles": {"memberGroupSavedHeader": "Member group saved"},
            "memberGroups": {"notFound": "Member group {{id}} was not found"},
        },
        "member_groups.fr-FR.yml": {
            "speechBubbles": {"memberGroupSavedHeader": "Groupe de membres enregistré"},
        },
        "errors.en-US.yml": {
            "errors": {"generic": "Something went wrong: {reason}"},
        },
    }
    for name, data in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_fr": "fr-FR",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "french_first": "fr-CA,fr;q=0.9,en-US;q=0.8",
        "wildcard_only": "*",
        "unsupported": "de-DE,es;q=0.5",
        "invalid_quality": "de;q=invalid,fr;q=0.4",
    }
