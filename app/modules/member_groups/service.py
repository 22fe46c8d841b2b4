"""Service boundary for member group operations.

Each operation takes a MemberGroupContext and returns an OperationResult so
the controllers only translate outcomes into HTTP responses. Store failures
keep their structured identity errors all the way to the caller.
"""

from dataclasses import dataclass
from typing import Iterable, List, Union

from core.logging import get_module_logger
from infrastructure.i18n import Locale, Translator
from infrastructure.operations import OperationError, OperationResult
from modules.member_groups import mappings
from modules.member_groups.domain.errors import InvalidIdentifierError
from modules.member_groups.domain.identifiers import parse_group_id
from modules.member_groups.domain.models import MemberGroup, ResolvedGroup
from modules.member_groups.repository import MemberGroupRepository
from modules.member_groups.schemas import (
    MemberGroupDisplay,
    MemberGroupLookupResult,
    MemberGroupSave,
)
from modules.member_groups.stores import IdentityResult

logger = get_module_logger()

SAVED_HEADER_KEY = "speechBubbles.memberGroupSavedHeader"
NOT_FOUND_KEY = "memberGroups.notFound"
DELETE_FAILED_KEY = "memberGroups.deleteFailed"
SAVE_FAILED_KEY = "memberGroups.saveFailed"


@dataclass
class MemberGroupContext:
    """Collaborators needed by the member group operations."""

    repository: MemberGroupRepository
    translator: Translator


def _errors_from(result: IdentityResult) -> List[OperationError]:
    return [OperationError(code=e.code, description=e.description) for e in result.errors]


def _not_found(context: MemberGroupContext, group_id, locale: Locale) -> OperationResult:
    return OperationResult.not_found(
        context.translator.localize(NOT_FOUND_KEY, locale, id=group_id)
    )


async def get_by_id(
    context: MemberGroupContext,
    raw_id: Union[int, str],
    locale: Locale = Locale.EN_US,
) -> OperationResult:
    """Look up a member group by integer id, GUID or UDI.

    Integer ids need a role AND a legacy group; the display then merges both.
    GUID and UDI ids are resolved from the role store alone, so legacy-only
    fields stay empty.
    """
    try:
        group_id = parse_group_id(raw_id)
    except InvalidIdentifierError as e:
        logger.info("member_group_id_invalid", raw_id=str(raw_id), reason=e.reason)
        return _not_found(context, raw_id, locale)

    resolved = await context.repository.get(group_id)
    if resolved is None:
        return _not_found(context, group_id, locale)

    return OperationResult.success(data=mappings.to_display(resolved))


async def get_by_ids(
    context: MemberGroupContext, ids: Iterable[int]
) -> List[MemberGroupLookupResult]:
    """Bulk lookup through the role store only.

    Returns one entry per requested id, in request order. Misses are reported
    as ``found=False`` entries instead of being dropped.
    """
    results = await context.repository.get_many(ids)
    missing = [r.id for r in results if not r.found]
    if missing:
        logger.info("member_groups_bulk_lookup_misses", missing_ids=missing)
    return [
        MemberGroupLookupResult(
            id=r.id,
            found=r.found,
            group=mappings.to_display(r.resolved) if r.resolved is not None else None,
        )
        for r in results
    ]


async def get_all(context: MemberGroupContext) -> List[MemberGroupDisplay]:
    return [mappings.to_display(resolved) for resolved in await context.repository.list_all()]


def get_empty() -> MemberGroupDisplay:
    """Blank display model for the create form; nothing is persisted."""
    return mappings.display_from_group(MemberGroup())


async def delete_by_id(
    context: MemberGroupContext, group_id: int, locale: Locale = Locale.EN_US
) -> OperationResult:
    """Delete the role for ``group_id``.

    The legacy group record is left untouched.
    """
    role = await context.repository.find_role(group_id)
    if role is None:
        return _not_found(context, group_id, locale)

    result = await context.repository.delete_role(role)
    if not result.succeeded:
        errors = _errors_from(result)
        logger.error(
            "role_delete_failed",
            group_id=group_id,
            errors=[f"{e.code}: {e.description}" for e in errors],
        )
        return OperationResult.permanent_error(
            context.translator.localize(DELETE_FAILED_KEY, locale),
            error_code="ROLE_DELETE_FAILED",
            errors=errors,
        )

    logger.info("member_group_deleted", group_id=group_id, role_name=role.name)
    return OperationResult.success(message="deleted")


async def post_save(
    context: MemberGroupContext,
    payload: MemberGroupSave,
    locale: Locale = Locale.EN_US,
) -> OperationResult:
    """Rename an existing member group.

    Only existing roles can be saved: an id <= 0 is not found without
    consulting any store. Only the name changes, and only in the role store.
    """
    if payload.id <= 0:
        return _not_found(context, payload.id, locale)

    role = await context.repository.find_role(payload.id)
    if role is None:
        return _not_found(context, payload.id, locale)

    previous_name = role.name
    role.name = payload.name
    result = await context.repository.update_role(role)
    if not result.succeeded:
        errors = _errors_from(result)
        logger.error(
            "role_update_failed",
            group_id=payload.id,
            errors=[f"{e.code}: {e.description}" for e in errors],
        )
        return OperationResult.permanent_error(
            context.translator.localize(SAVE_FAILED_KEY, locale),
            error_code="ROLE_UPDATE_FAILED",
            errors=errors,
        )

    logger.info(
        "member_group_saved",
        group_id=payload.id,
        previous_name=previous_name,
        name=role.name,
    )
    display = mappings.to_display(ResolvedGroup(role=role))
    mappings.add_success_notification(
        display, context.translator.localize(SAVED_HEADER_KEY, locale), ""
    )
    return OperationResult.success(data=display)
