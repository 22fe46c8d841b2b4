"""Backing store contracts for member groups.

Two stores hold overlapping data:

  - RoleStore: the identity store. Async, authoritative for role names,
    reports write outcomes as IdentityResult rather than raising.
  - MemberGroupService: the legacy group service. Synchronous, holds the
    richer MemberGroup entity.

The in-memory implementations back local runs and tests. They hand out
copies so a caller can only change stored state through ``update``/``save``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional
from uuid import UUID

import yaml

from core.logging import get_module_logger
from modules.member_groups.domain.errors import SeedFileError
from modules.member_groups.domain.models import MemberGroup, RoleRecord

logger = get_module_logger()


@dataclass(frozen=True)
class IdentityError:
    code: str
    description: str = ""


@dataclass
class IdentityResult:
    """Outcome of an identity store write."""

    succeeded: bool
    errors: List[IdentityError] = field(default_factory=list)

    @classmethod
    def success(cls) -> "IdentityResult":
        return cls(succeeded=True)

    @classmethod
    def failed(cls, *errors: IdentityError) -> "IdentityResult":
        return cls(succeeded=False, errors=list(errors))


class RoleStore(ABC):
    """Abstract identity store for member group roles.

    Implementations MUST NOT raise for rejected writes; they return a failed
    IdentityResult describing why.
    """

    @abstractmethod
    async def find_by_id(self, role_id: str) -> Optional[RoleRecord]:
        """Find a role by its id, or by its GUID key when ``role_id`` is a GUID."""
        raise NotImplementedError()

    @abstractmethod
    async def update(self, role: RoleRecord) -> IdentityResult:
        raise NotImplementedError()

    @abstractmethod
    async def delete(self, role: RoleRecord) -> IdentityResult:
        raise NotImplementedError()

    @abstractmethod
    async def list_roles(self) -> List[RoleRecord]:
        """Return every role in the store."""
        raise NotImplementedError()


class MemberGroupService(ABC):
    """Abstract legacy member group service."""

    @abstractmethod
    def get_by_id(self, group_id: int) -> Optional[MemberGroup]:
        raise NotImplementedError()

    @abstractmethod
    def save(self, group: MemberGroup) -> MemberGroup:
        """Persist ``group``, assigning an id when it has none. Returns the stored copy."""
        raise NotImplementedError()


class InMemoryRoleStore(RoleStore):
    """Role store kept in a dict keyed by role id."""

    def __init__(self, roles: Optional[List[RoleRecord]] = None):
        self._roles: Dict[str, RoleRecord] = {}
        for role in roles or []:
            self.add(role)

    def add(self, role: RoleRecord) -> None:
        self._roles[role.id] = replace(role)

    async def find_by_id(self, role_id: str) -> Optional[RoleRecord]:
        role = self._roles.get(role_id)
        if role is None:
            key = _parse_uuid(role_id)
            if key is not None:
                role = next((r for r in self._roles.values() if r.key == key), None)
        return replace(role) if role is not None else None

    async def update(self, role: RoleRecord) -> IdentityResult:
        if role.id not in self._roles:
            return IdentityResult.failed(
                IdentityError("RoleNotFound", f"Role {role.id} does not exist.")
            )
        if not role.name or not role.name.strip():
            return IdentityResult.failed(
                IdentityError("InvalidRoleName", "Role name cannot be empty.")
            )
        folded = role.name.casefold()
        for other in self._roles.values():
            if other.id != role.id and (other.name or "").casefold() == folded:
                return IdentityResult.failed(
                    IdentityError(
                        "DuplicateRoleName", f"Role name '{role.name}' is already taken."
                    )
                )
        self._roles[role.id] = replace(role)
        return IdentityResult.success()

    async def delete(self, role: RoleRecord) -> IdentityResult:
        if self._roles.pop(role.id, None) is None:
            return IdentityResult.failed(
                IdentityError("RoleNotFound", f"Role {role.id} does not exist.")
            )
        return IdentityResult.success()

    async def list_roles(self) -> List[RoleRecord]:
        return [replace(role) for role in self._roles.values()]


class InMemoryMemberGroupService(MemberGroupService):
    """Legacy group service kept in a dict keyed by integer id."""

    def __init__(self, groups: Optional[List[MemberGroup]] = None):
        self._groups: Dict[int, MemberGroup] = {}
        for group in groups or []:
            self.save(group)

    def get_by_id(self, group_id: int) -> Optional[MemberGroup]:
        group = self._groups.get(group_id)
        return replace(group) if group is not None else None

    def save(self, group: MemberGroup) -> MemberGroup:
        stored = replace(group)
        if not stored.has_identity:
            stored.id = max(self._groups, default=0) + 1
        stored.update_date = datetime.now(timezone.utc)
        self._groups[stored.id] = stored
        return replace(stored)


def _parse_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None


def load_seed(
    path: str | Path,
    role_store: InMemoryRoleStore,
    group_service: InMemoryMemberGroupService,
) -> int:
    """Fill both in-memory stores from a YAML seed file.

    Expected format::

        groups:
          - id: 1
            key: 5c2b1e0e-7f0c-4f55-a9a8-5e1f1c0b7a21
            name: Subscribers
            creator_id: -1
          - id: 2
            name: Legacy only
            role: false   # legacy record without an identity role

    Returns:
        Number of groups loaded.

    Raises:
        SeedFileError: If the file is missing or malformed.
    """
    seed_path = Path(path)
    try:
        with open(seed_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SeedFileError(f"Failed to read seed file {seed_path}: {e}") from e

    entries = data.get("groups") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise SeedFileError(f"Seed file {seed_path} must contain a 'groups' list")

    for entry in entries:
        try:
            group = MemberGroup(
                id=int(entry["id"]),
                name=entry.get("name"),
                creator_id=entry.get("creator_id"),
            )
            if entry.get("key"):
                group.key = UUID(str(entry["key"]))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise SeedFileError(f"Invalid seed entry {entry!r}: {e}") from e

        stored = group_service.save(group)
        if entry.get("role", True):
            role_store.add(
                RoleRecord(id=str(stored.id), name=stored.name, key=stored.key)
            )

    logger.info("member_groups_seeded", path=str(seed_path), count=len(entries))
    return len(entries)
