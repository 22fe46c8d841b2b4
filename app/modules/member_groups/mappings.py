"""Mapping from member group records to the display model."""

from typing import Optional

from core.config import settings
from modules.member_groups.domain.identifiers import member_group_udi
from modules.member_groups.domain.models import MemberGroup, ResolvedGroup
from modules.member_groups.schemas import (
    MemberGroupDisplay,
    Notification,
    NotificationType,
)


def _path(group_id: Optional[int]) -> str:
    root = settings.member_groups.ROOT_PARENT_ID
    return f"{root},{group_id if group_id is not None else 0}"


def to_display(resolved: ResolvedGroup) -> MemberGroupDisplay:
    """Map a resolved role/group pair to the display model."""
    key = resolved.key
    return MemberGroupDisplay(
        id=resolved.id,
        key=key,
        udi=str(member_group_udi(key)) if key is not None else None,
        name=resolved.name,
        icon=settings.member_groups.DEFAULT_ICON,
        parent_id=settings.member_groups.ROOT_PARENT_ID,
        path=_path(resolved.id),
        creator_id=resolved.creator_id,
        create_date=resolved.create_date,
        update_date=resolved.update_date,
    )


def display_from_group(group: MemberGroup) -> MemberGroupDisplay:
    """Map a legacy group on its own, e.g. an unsaved template."""
    return to_display(ResolvedGroup(group=group))


def add_success_notification(
    display: MemberGroupDisplay, header: str, message: str = ""
) -> MemberGroupDisplay:
    display.notifications.append(
        Notification(header=header, message=message, type=NotificationType.SUCCESS)
    )
    return display
