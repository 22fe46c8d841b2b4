"""Single read path over the identity store and the legacy group service.

Callers ask for a group by any id form and get a ResolvedGroup back; which
store is consulted for each form lives here and nowhere else:

  - integer ids need BOTH a role and a legacy group, otherwise None
  - GUID and UDI ids consult the role store only; UDIs of other entity
    types never match
  - bulk lookups consult the role store only and report misses explicitly

Field-level merging is done by ResolvedGroup (see domain.models).
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional
from uuid import UUID

from core.logging import get_module_logger
from modules.member_groups.domain.identifiers import (
    MEMBER_GROUP_ENTITY_TYPE,
    GroupId,
    GuidId,
    IntId,
    Udi,
    UdiId,
)
from modules.member_groups.domain.models import ResolvedGroup, RoleRecord
from modules.member_groups.stores import IdentityResult, MemberGroupService, RoleStore

logger = get_module_logger()


@dataclass
class LookupResult:
    """Tagged result of a single bulk lookup entry."""

    id: int
    resolved: Optional[ResolvedGroup] = None

    @property
    def found(self) -> bool:
        return self.resolved is not None


class MemberGroupRepository:
    """Reconciles the role store and the legacy group service."""

    def __init__(self, role_store: RoleStore, group_service: MemberGroupService):
        self.role_store = role_store
        self.group_service = group_service

    async def get(self, group_id: GroupId) -> Optional[ResolvedGroup]:
        """Dispatch on the id form."""
        if isinstance(group_id, IntId):
            return await self.get_by_int(group_id.value)
        if isinstance(group_id, GuidId):
            return await self.get_by_guid(group_id.value)
        if isinstance(group_id, UdiId):
            return await self.get_by_udi(group_id.value)
        raise TypeError(f"Unsupported group id type: {type(group_id).__name__}")

    async def get_by_int(self, group_id: int) -> Optional[ResolvedGroup]:
        role = await self.role_store.find_by_id(str(group_id))
        if role is None:
            logger.debug("role_not_found", group_id=group_id)
            return None

        group = self.group_service.get_by_id(group_id)
        if group is None:
            # Role without a legacy group still counts as not found
            logger.info("legacy_group_missing_for_role", group_id=group_id)
            return None

        return ResolvedGroup(role=role, group=group)

    async def get_by_guid(self, key: UUID) -> Optional[ResolvedGroup]:
        role = await self.role_store.find_by_id(str(key))
        if role is None:
            return None
        return ResolvedGroup(role=role)

    async def get_by_udi(self, udi: Udi) -> Optional[ResolvedGroup]:
        if udi.entity_type != MEMBER_GROUP_ENTITY_TYPE:
            logger.info("foreign_entity_udi_rejected", udi=str(udi))
            return None
        if not udi.is_guid_udi:
            logger.info("non_guid_udi_rejected", udi=str(udi))
            return None
        return await self.get_by_guid(udi.guid)

    async def find_role(self, group_id: int) -> Optional[RoleRecord]:
        """Role store lookup by integer id, without legacy enrichment."""
        return await self.role_store.find_by_id(str(group_id))

    async def update_role(self, role: RoleRecord) -> IdentityResult:
        return await self.role_store.update(role)

    async def delete_role(self, role: RoleRecord) -> IdentityResult:
        """Delete the role only; the legacy group record is left in place."""
        return await self.role_store.delete(role)

    async def get_many(self, ids: Iterable[int]) -> List[LookupResult]:
        """Look up each id in the role store, in input order, one entry per id."""
        results = []
        for group_id in ids:
            role = await self.find_role(group_id)
            results.append(
                LookupResult(
                    id=group_id,
                    resolved=ResolvedGroup(role=role) if role is not None else None,
                )
            )
        return results

    async def list_all(self) -> List[ResolvedGroup]:
        return [ResolvedGroup(role=role) for role in await self.role_store.list_roles()]
