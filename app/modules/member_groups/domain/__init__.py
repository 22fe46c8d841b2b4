"""Domain types for member groups: identifiers, records and errors."""

from modules.member_groups.domain.errors import (
    InvalidIdentifierError,
    MemberGroupError,
    SeedFileError,
)
from modules.member_groups.domain.identifiers import (
    GroupId,
    GuidId,
    IntId,
    Udi,
    UdiId,
    member_group_udi,
    parse_group_id,
)
from modules.member_groups.domain.models import MemberGroup, ResolvedGroup, RoleRecord

__all__ = [
    "GroupId",
    "GuidId",
    "IntId",
    "InvalidIdentifierError",
    "MemberGroup",
    "MemberGroupError",
    "ResolvedGroup",
    "RoleRecord",
    "SeedFileError",
    "Udi",
    "UdiId",
    "member_group_udi",
    "parse_group_id",
]
