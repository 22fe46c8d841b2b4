from typing import Annotated, List, Optional
from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class NotificationType(str, Enum):
    """Schema for notification types shown to the editor."""

    SAVE = "save"
    INFO = "info"
    ERROR = "error"
    SUCCESS = "success"
    WARNING = "warning"


class Notification(BaseModel):
    """User-facing notification attached to a display model."""

    header: str
    message: str = ""
    type: NotificationType = NotificationType.SUCCESS


class MemberGroupDisplay(BaseModel):
    """Read model returned for a member group.

    Fields come from whichever backing records were available. Legacy-only
    fields (creator and timestamps) are None when only a role was found.
    """

    id: Optional[int] = Field(default=None, json_schema_extra={"example": 1051})
    key: Optional[UUID] = None
    udi: Optional[str] = Field(
        default=None,
        json_schema_extra={"example": "umb://member-group/5c2b1e0e7f0c4f55a9a85e1f1c0b7a21"},
    )
    name: Optional[str] = None
    icon: str = "icon-users"
    parent_id: int = -1
    path: str = ""
    trashed: bool = False
    creator_id: Optional[int] = None
    create_date: Optional[datetime] = None
    update_date: Optional[datetime] = None
    notifications: List[Notification] = Field(default_factory=list)


class MemberGroupSave(BaseModel):
    """Schema for saving (renaming) an existing member group."""

    id: Annotated[
        int,
        Field(
            ...,
            description="Id of the member group to update. Values <= 0 are never created.",
            json_schema_extra={"example": 1051},
        ),
    ]
    name: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            max_length=255,
            description="New member group name",
            json_schema_extra={"example": "Subscribers"},
        ),
    ]

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class MemberGroupLookupResult(BaseModel):
    """One entry of a bulk lookup; ``group`` is None when ``found`` is False."""

    id: int
    found: bool
    group: Optional[MemberGroupDisplay] = None


class ProblemError(BaseModel):
    code: str
    description: str = ""


class ProblemDetails(BaseModel):
    """Problem response body for failed requests."""

    title: str
    status: int
    detail: Optional[str] = None
    errors: List[ProblemError] = Field(default_factory=list)
