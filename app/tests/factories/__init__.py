"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import make_translation_catalog, make_translation_key
from tests.factories.member_groups import (
    group_key,
    make_member_group,
    make_role,
    make_stores,
)

__all__ = [
    "group_key",
    "make_member_group",
    "make_role",
    "make_stores",
    "make_translation_catalog",
    "make_translation_key",
]
