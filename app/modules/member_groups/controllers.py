from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from core.logging import get_module_logger
from infrastructure.i18n import Locale
from infrastructure.operations import OperationResult, OperationStatus, http_status_for
from modules.member_groups import service
from modules.member_groups.dependencies import (
    get_member_group_context,
    get_request_locale,
)
from modules.member_groups.schemas import (
    MemberGroupDisplay,
    MemberGroupLookupResult,
    MemberGroupSave,
    ProblemDetails,
    ProblemError,
)
from modules.member_groups.service import MemberGroupContext

logger = get_module_logger()

# Controllers are thin adapters: they call the service boundary and turn
# OperationResults into responses. Problem bodies keep the store's errors.
router = APIRouter(prefix="/member-groups", tags=["member-groups"])

PROBLEM_RESPONSES = {
    404: {"model": ProblemDetails, "description": "Member group not found"},
    500: {"model": ProblemDetails, "description": "Identity store rejected the change"},
}

_TITLES = {
    OperationStatus.NOT_FOUND: "Not Found",
    OperationStatus.VALIDATION_ERROR: "Bad Request",
    OperationStatus.TRANSIENT_ERROR: "Service Unavailable",
}


def problem_response(result: OperationResult) -> JSONResponse:
    status_code = http_status_for(result)
    logger.info(
        "member_group_request_failed",
        status=result.status.value,
        http_status=status_code,
        error_code=result.error_code,
    )
    problem = ProblemDetails(
        title=_TITLES.get(result.status, result.message),
        status=status_code,
        detail=result.message if result.status in _TITLES else result.error_code,
        errors=[
            ProblemError(code=e.code, description=e.description) for e in result.errors
        ],
    )
    return JSONResponse(status_code=status_code, content=problem.model_dump())


@router.get("", response_model=List[MemberGroupDisplay], include_in_schema=False)
@router.get("/", response_model=List[MemberGroupDisplay])
async def get_all_groups(
    context: MemberGroupContext = Depends(get_member_group_context),
):
    """List every member group known to the identity store."""
    return await service.get_all(context)


@router.get("/empty", response_model=MemberGroupDisplay)
def get_empty():
    """Blank member group for the create form."""
    return service.get_empty()


@router.get("/by-ids", response_model=List[MemberGroupLookupResult])
async def get_by_ids(
    ids: List[int] = Query(default=[]),
    context: MemberGroupContext = Depends(get_member_group_context),
):
    """Look up several groups by integer id.

    One entry per requested id, in request order; misses have ``found=false``.
    """
    return await service.get_by_ids(context, ids)


@router.get(
    "/{group_id:path}", response_model=MemberGroupDisplay, responses=PROBLEM_RESPONSES
)
async def get_by_id(
    group_id: str,
    context: MemberGroupContext = Depends(get_member_group_context),
    locale: Locale = Depends(get_request_locale),
):
    """Get a member group by integer id, GUID or UDI.

    The id form is detected from the value: ``1051``,
    ``5c2b1e0e-7f0c-4f55-a9a8-5e1f1c0b7a21`` or
    ``umb://member-group/5c2b1e0e7f0c4f55a9a85e1f1c0b7a21``.
    """
    result = await service.get_by_id(context, group_id, locale)
    if not result.is_success:
        return problem_response(result)
    return result.data


async def _delete(group_id: int, context: MemberGroupContext, locale: Locale):
    result = await service.delete_by_id(context, group_id, locale)
    if not result.is_success:
        return problem_response(result)
    return Response(status_code=200)


@router.delete("/{group_id}", responses=PROBLEM_RESPONSES)
async def delete_by_id(
    group_id: int,
    context: MemberGroupContext = Depends(get_member_group_context),
    locale: Locale = Depends(get_request_locale),
):
    """Delete the identity role for a member group."""
    return await _delete(group_id, context, locale)


@router.post("/{group_id}/delete", responses=PROBLEM_RESPONSES)
async def post_delete_by_id(
    group_id: int,
    context: MemberGroupContext = Depends(get_member_group_context),
    locale: Locale = Depends(get_request_locale),
):
    """POST alias of DELETE for clients that cannot send DELETE."""
    return await _delete(group_id, context, locale)


@router.post("/save", response_model=MemberGroupDisplay, responses=PROBLEM_RESPONSES)
async def post_save(
    payload: MemberGroupSave,
    context: MemberGroupContext = Depends(get_member_group_context),
    locale: Locale = Depends(get_request_locale),
):
    """Rename an existing member group.

    New groups cannot be created here: ids <= 0 always return 404.
    """
    result = await service.post_save(context, payload, locale)
    if not result.is_success:
        return problem_response(result)
    return result.data
