"""Member group records owned by the two backing stores.

These are plain dataclasses, not Pydantic models:

  - RoleRecord: the identity store's record for a group. Authoritative for the
    name; addressed by a string id and optionally a GUID key.
  - MemberGroup: the legacy group service's entity. Carries extra metadata
    (creator, timestamps) that roles do not have.
  - ResolvedGroup: the pair found by a lookup, with the merge policy that
    decides which store each displayed field comes from.

Roles and groups are correlated by id or key equality only. Nothing keeps
them in sync: a group may exist without a role and the other way round.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RoleRecord:
    """Identity store record for a member group.

    Attributes:
        id: The role id; numeric for roles backed by a legacy group.
        name: The display name.
        key: The GUID key shared with the legacy group, when known.
    """

    id: str
    name: Optional[str]
    key: Optional[UUID] = None

    @property
    def int_id(self) -> Optional[int]:
        """The role id as an int, or None when it is not numeric."""
        try:
            return int(self.id)
        except (TypeError, ValueError):
            return None


@dataclass
class MemberGroup:
    """Legacy member group entity.

    A freshly constructed instance is unpersisted: ``id`` is 0 and ``key`` is
    a new random GUID.
    """

    id: int = 0
    key: UUID = field(default_factory=uuid4)
    name: Optional[str] = None
    creator_id: Optional[int] = None
    create_date: datetime = field(default_factory=_utcnow)
    update_date: datetime = field(default_factory=_utcnow)

    @property
    def has_identity(self) -> bool:
        return self.id > 0


@dataclass
class ResolvedGroup:
    """A role and, when available, its legacy group.

    Merge policy for displayed fields:
      - name: role when present (the identity store is authoritative), else group
      - id, key: group when present, else the role's own values
      - creator_id, create_date, update_date: group only
    """

    role: Optional[RoleRecord] = None
    group: Optional[MemberGroup] = None

    @property
    def id(self) -> Optional[int]:
        if self.group is not None:
            return self.group.id
        return self.role.int_id if self.role is not None else None

    @property
    def key(self) -> Optional[UUID]:
        if self.group is not None:
            return self.group.key
        return self.role.key if self.role is not None else None

    @property
    def name(self) -> Optional[str]:
        if self.role is not None:
            return self.role.name
        return self.group.name if self.group is not None else None

    @property
    def creator_id(self) -> Optional[int]:
        return self.group.creator_id if self.group is not None else None

    @property
    def create_date(self) -> Optional[datetime]:
        return self.group.create_date if self.group is not None else None

    @property
    def update_date(self) -> Optional[datetime]:
        return self.group.update_date if self.group is not None else None
