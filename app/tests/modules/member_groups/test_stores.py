import asyncio

import pytest

from modules.member_groups.domain import MemberGroup, RoleRecord, SeedFileError
from modules.member_groups.stores import (
    IdentityResult,
    InMemoryMemberGroupService,
    InMemoryRoleStore,
    load_seed,
)
from tests.factories.member_groups import group_key, make_member_group, make_role


class TestInMemoryRoleStore:
    @pytest.fixture
    def store(self):
        return InMemoryRoleStore([make_role(1, "Subscribers"), make_role(2, "Editors")])

    def test_find_by_int_id(self, store):
        role = asyncio.run(store.find_by_id("1"))
        assert role.name == "Subscribers"

    def test_find_by_guid_key(self, store):
        role = asyncio.run(store.find_by_id(str(group_key(2))))
        assert role.id == "2"

    def test_find_missing(self, store):
        assert asyncio.run(store.find_by_id("99")) is None
        assert asyncio.run(store.find_by_id("not-a-key")) is None

    def test_returned_roles_are_copies(self, store):
        role = asyncio.run(store.find_by_id("1"))
        role.name = "Changed without update"
        assert asyncio.run(store.find_by_id("1")).name == "Subscribers"

    def test_update(self, store):
        role = asyncio.run(store.find_by_id("1"))
        role.name = "Members"
        assert asyncio.run(store.update(role)) == IdentityResult.success()
        assert asyncio.run(store.find_by_id("1")).name == "Members"

    def test_update_duplicate_name(self, store):
        role = asyncio.run(store.find_by_id("1"))
        role.name = "editors"
        result = asyncio.run(store.update(role))
        assert not result.succeeded
        assert [e.code for e in result.errors] == ["DuplicateRoleName"]

    def test_update_blank_name(self, store):
        result = asyncio.run(store.update(RoleRecord(id="1", name="  ")))
        assert [e.code for e in result.errors] == ["InvalidRoleName"]

    def test_update_unknown_role(self, store):
        result = asyncio.run(store.update(RoleRecord(id="42", name="Ghost")))
        assert [e.code for e in result.errors] == ["RoleNotFound"]

    def test_delete(self, store):
        role = asyncio.run(store.find_by_id("2"))
        assert asyncio.run(store.delete(role)).succeeded
        assert asyncio.run(store.find_by_id("2")) is None
        assert not asyncio.run(store.delete(role)).succeeded

    def test_list_roles(self, store):
        assert [r.id for r in asyncio.run(store.list_roles())] == ["1", "2"]


class TestInMemoryMemberGroupService:
    def test_get_by_id(self):
        service = InMemoryMemberGroupService([make_member_group(3, "Legacy")])
        assert service.get_by_id(3).name == "Legacy"
        assert service.get_by_id(4) is None

    def test_save_assigns_id_to_new_group(self):
        service = InMemoryMemberGroupService([make_member_group(5)])
        stored = service.save(MemberGroup(name="New"))
        assert stored.id == 6
        assert service.get_by_id(6).name == "New"


class TestLoadSeed:
    def test_load_seed(self, tmp_path):
        seed = tmp_path / "seed.yml"
        seed.write_text(
            "groups:\n"
            "  - id: 1\n"
            "    key: 00000000-0000-0000-0000-000000000001\n"
            "    name: Subscribers\n"
            "    creator_id: -1\n"
            "  - id: 2\n"
            "    name: Legacy only\n"
            "    role: false\n"
        )
        roles, groups = InMemoryRoleStore(), InMemoryMemberGroupService()

        assert load_seed(seed, roles, groups) == 2

        assert groups.get_by_id(1).creator_id == -1
        assert groups.get_by_id(1).key == group_key(1)
        assert asyncio.run(roles.find_by_id("1")).key == group_key(1)
        assert groups.get_by_id(2) is not None
        assert asyncio.run(roles.find_by_id("2")) is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedFileError):
            load_seed(tmp_path / "missing.yml", InMemoryRoleStore(), InMemoryMemberGroupService())

    @pytest.mark.parametrize(
        "content",
        ["groups: nope\n", "- 1\n", "groups:\n  - name: no id\n", "groups:\n  - id: 1\n    key: xyz\n"],
    )
    def test_malformed(self, tmp_path, content):
        seed = tmp_path / "seed.yml"
        seed.write_text(content)
        with pytest.raises(SeedFileError):
            load_seed(seed, InMemoryRoleStore(), InMemoryMemberGroupService())
