import asyncio
from unittest.mock import AsyncMock

import pytest

from infrastructure.i18n import Locale
from infrastructure.operations import OperationError, OperationStatus
from modules.member_groups import service
from modules.member_groups.schemas import MemberGroupSave
from modules.member_groups.stores import IdentityError, IdentityResult
from tests.factories.member_groups import group_key


def run(coro):
    return asyncio.run(coro)


class TestGetById:
    def test_int_id_merges_legacy_fields(self, context):
        result = run(service.get_by_id(context, "2"))
        assert result.is_success
        assert result.data.name == "Editors"
        assert result.data.creator_id == 7

    def test_int_id_without_role_is_not_found(self, context):
        result = run(service.get_by_id(context, 3))
        assert result.status == OperationStatus.NOT_FOUND
        assert result.message == "Member group 3 was not found"

    def test_int_id_without_legacy_group_is_not_found(self, context):
        assert run(service.get_by_id(context, 4)).status == OperationStatus.NOT_FOUND

    def test_guid_id_maps_role_only(self, context):
        result = run(service.get_by_id(context, str(group_key(4))))
        assert result.is_success
        assert result.data.name == "Role only"
        assert result.data.creator_id is None

    def test_udi_id(self, context):
        result = run(service.get_by_id(context, f"umb://member-group/{group_key(1).hex}"))
        assert result.is_success
        assert result.data.id == 1
        assert result.data.creator_id is None

    def test_non_guid_udi_is_not_found(self, context):
        result = run(service.get_by_id(context, "umb://member-group/some-path"))
        assert result.status == OperationStatus.NOT_FOUND

    def test_invalid_id_is_not_found(self, context):
        result = run(service.get_by_id(context, "not-an-id", Locale.FR_FR))
        assert result.status == OperationStatus.NOT_FOUND
        assert result.message == "Le groupe de membres not-an-id est introuvable"


def test_get_by_ids_tags_misses(context):
    results = run(service.get_by_ids(context, [2, 3, 4]))
    assert [(r.id, r.found) for r in results] == [(2, True), (3, False), (4, True)]
    assert results[1].group is None
    assert results[0].group.name == "Editors"
    assert results[0].group.creator_id is None


def test_get_by_ids_empty(context):
    assert run(service.get_by_ids(context, [])) == []


def test_get_all(context):
    assert [g.name for g in run(service.get_all(context))] == [
        "Subscribers",
        "Editors",
        "Role only",
    ]


def test_get_empty_does_not_touch_stores(context, role_store, group_service):
    before_roles = len(run(role_store.list_roles()))

    display = service.get_empty()

    assert display.id == 0
    assert display.name is None
    assert len(run(role_store.list_roles())) == before_roles
    # Saving would have assigned the next legacy id
    assert group_service.get_by_id(4) is None


class TestDeleteById:
    def test_delete_existing(self, context):
        assert run(service.delete_by_id(context, 1)).is_success
        assert run(service.get_by_id(context, 1)).status == OperationStatus.NOT_FOUND

    def test_delete_keeps_legacy_group(self, context, group_service):
        run(service.delete_by_id(context, 2))
        assert group_service.get_by_id(2) is not None

    def test_delete_missing(self, context):
        assert run(service.delete_by_id(context, 3)).status == OperationStatus.NOT_FOUND

    def test_delete_rejected_by_store(self, context, role_store, monkeypatch):
        monkeypatch.setattr(
            role_store,
            "delete",
            AsyncMock(
                return_value=IdentityResult.failed(IdentityError("ConcurrencyFailure", "stale"))
            ),
        )

        result = run(service.delete_by_id(context, 1))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.message == "Issue during deletion - please see logs"
        assert result.error_code == "ROLE_DELETE_FAILED"
        assert result.errors == [OperationError("ConcurrencyFailure", "stale")]


class TestPostSave:
    @pytest.mark.parametrize("group_id", [0, -1, -1051])
    def test_non_positive_id_is_not_found(self, context, role_store, group_id):
        role_store.find_by_id = AsyncMock()
        result = run(service.post_save(context, MemberGroupSave(id=group_id, name="X")))
        assert result.status == OperationStatus.NOT_FOUND
        role_store.find_by_id.assert_not_awaited()

    def test_unknown_id_is_not_found(self, context):
        result = run(service.post_save(context, MemberGroupSave(id=3, name="X")))
        assert result.status == OperationStatus.NOT_FOUND

    def test_updates_name_only(self, context, role_store, group_service):
        result = run(service.post_save(context, MemberGroupSave(id=2, name="Reviewers")))

        assert result.is_success
        assert result.data.name == "Reviewers"
        assert result.data.id == 2
        assert result.data.key == group_key(2)
        role = run(role_store.find_by_id("2"))
        assert role.name == "Reviewers"
        assert role.key == group_key(2)
        # The legacy record is not synchronised
        assert group_service.get_by_id(2).name == "Editors"
        assert group_service.get_by_id(2).creator_id == 7

    def test_success_notification_is_localized(self, context):
        result = run(
            service.post_save(context, MemberGroupSave(id=1, name="Members"), Locale.FR_FR)
        )
        [notification] = result.data.notifications
        assert notification.header == "Groupe de membres enregistré"
        assert notification.message == ""
        assert notification.type == "success"

    def test_store_rejection_surfaces_errors(self, context):
        result = run(service.post_save(context, MemberGroupSave(id=1, name="editors")))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "ROLE_UPDATE_FAILED"
        assert [e.code for e in result.errors] == ["DuplicateRoleName"]

    def test_failed_save_leaves_role_unchanged(self, context, role_store):
        run(service.post_save(context, MemberGroupSave(id=1, name="Editors")))
        assert run(role_store.find_by_id("1")).name == "Subscribers"
