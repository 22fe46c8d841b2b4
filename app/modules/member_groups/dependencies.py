"""FastAPI dependency helpers for the member groups router.

Collaborators are built once at startup (see ``build_context``) and stored on
``app.state``; request handlers receive them through ``Depends``.
"""

from typing import Optional

from fastapi import Request

from core.config import settings
from core.logging import get_module_logger
from infrastructure.i18n import Locale, LocaleResolver, Translator, create_translator
from modules.member_groups.repository import MemberGroupRepository
from modules.member_groups.service import MemberGroupContext
from modules.member_groups.stores import (
    InMemoryMemberGroupService,
    InMemoryRoleStore,
    MemberGroupService,
    RoleStore,
    load_seed,
)

logger = get_module_logger()


def build_locale_resolver() -> LocaleResolver:
    supported = Locale.parse_many(settings.member_groups.SUPPORTED_LOCALES)
    try:
        default = Locale.from_string(settings.member_groups.DEFAULT_LOCALE)
    except ValueError:
        logger.warning(
            "unsupported_default_locale",
            locale=settings.member_groups.DEFAULT_LOCALE,
            fallback=Locale.EN_US.value,
        )
        default = Locale.EN_US
    return LocaleResolver(default_locale=default, supported_locales=supported or None)


def build_context(
    role_store: Optional[RoleStore] = None,
    group_service: Optional[MemberGroupService] = None,
    translator: Optional[Translator] = None,
) -> MemberGroupContext:
    """Assemble the collaborators, defaulting to in-memory stores.

    When no stores are given and ``MEMBER_GROUPS_SEED_FILE`` is set, the new
    in-memory stores are filled from that file.
    """
    if role_store is None and group_service is None:
        role_store = InMemoryRoleStore()
        group_service = InMemoryMemberGroupService()
        if settings.member_groups.SEED_FILE:
            load_seed(settings.member_groups.SEED_FILE, role_store, group_service)
    elif role_store is None or group_service is None:
        raise ValueError("role_store and group_service must be provided together")

    return MemberGroupContext(
        repository=MemberGroupRepository(role_store, group_service),
        translator=translator or create_translator(),
    )


def get_member_group_context(request: Request) -> MemberGroupContext:
    return request.app.state.member_groups


def get_request_locale(request: Request) -> Locale:
    """Locale for user-facing messages, negotiated from Accept-Language."""
    resolver = getattr(request.app.state, "locale_resolver", None)
    if resolver is None:
        resolver = build_locale_resolver()
        request.app.state.locale_resolver = resolver
    return resolver.resolve_from_header(request.headers.get("accept-language"))
