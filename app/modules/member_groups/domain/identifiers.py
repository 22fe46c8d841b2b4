"""Member group identifiers.

A member group can be addressed three ways: by integer id, by GUID key or by
a UDI (``umb://member-group/<guid>``). ``parse_group_id`` turns the raw path
value into one of the typed variants below.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union
from uuid import UUID

from modules.member_groups.domain.errors import InvalidIdentifierError

UDI_SCHEME = "umb://"
MEMBER_GROUP_ENTITY_TYPE = "member-group"
_INT_PATTERN = re.compile(r"^-?[0-9]+$")


@dataclass(frozen=True)
class IntId:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class GuidId:
    value: UUID

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Udi:
    """Typed universal identifier: an entity type plus a GUID or string value.

    Only GUID UDIs can address a member group; string UDIs exist so callers
    can still parse and reject them.
    """

    entity_type: str
    guid: Optional[UUID] = None
    value: Optional[str] = None

    @property
    def is_guid_udi(self) -> bool:
        return self.guid is not None

    def __str__(self) -> str:
        if self.guid is not None:
            return f"{UDI_SCHEME}{self.entity_type}/{self.guid.hex}"
        return f"{UDI_SCHEME}{self.entity_type}/{self.value or ''}"

    @classmethod
    def create(cls, entity_type: str, guid: UUID) -> "Udi":
        return cls(entity_type=entity_type, guid=guid)

    @classmethod
    def parse(cls, raw: str) -> "Udi":
        """Parse ``umb://<entity-type>/<value>``.

        Raises:
            InvalidIdentifierError: If ``raw`` is not a UDI.
        """
        if not raw.startswith(UDI_SCHEME):
            raise InvalidIdentifierError(raw, "missing umb:// scheme")
        entity_type, _, value = raw[len(UDI_SCHEME) :].partition("/")
        if not entity_type:
            raise InvalidIdentifierError(raw, "missing entity type")
        guid = _try_uuid(value)
        if guid is not None:
            return cls(entity_type=entity_type, guid=guid)
        return cls(entity_type=entity_type, value=value)


@dataclass(frozen=True)
class UdiId:
    value: Udi

    def __str__(self) -> str:
        return str(self.value)


GroupId = Union[IntId, GuidId, UdiId]


def _try_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None


def member_group_udi(key: UUID) -> Udi:
    return Udi.create(MEMBER_GROUP_ENTITY_TYPE, key)


def parse_group_id(raw: Union[int, str, UUID, Udi]) -> GroupId:
    """Detect which of the three id forms ``raw`` is.

    Integers (or all-digit strings, optionally signed) become ``IntId``,
    GUID strings become ``GuidId`` and ``umb://`` values become ``UdiId``.

    Raises:
        InvalidIdentifierError: If ``raw`` matches none of the forms.
    """
    if isinstance(raw, bool):
        raise InvalidIdentifierError(str(raw), "booleans are not identifiers")
    if isinstance(raw, int):
        return IntId(raw)
    if isinstance(raw, UUID):
        return GuidId(raw)
    if isinstance(raw, Udi):
        return UdiId(raw)

    text = str(raw).strip()
    if _INT_PATTERN.match(text):
        return IntId(int(text))
    if text.startswith(UDI_SCHEME):
        return UdiId(Udi.parse(text))
    guid = _try_uuid(text)
    if guid is not None:
        return GuidId(guid)
    raise InvalidIdentifierError(text, "expected an integer, GUID or UDI")
