import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `core.config`) works during pytest collection regardless of
# where pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from infrastructure.i18n import create_translator  # noqa: E402
from modules.member_groups.dependencies import build_context  # noqa: E402
from tests.factories.member_groups import (  # noqa: E402
    make_member_group,
    make_role,
    make_stores,
)


@pytest.fixture(scope="session")
def translator():
    """Translator loaded from the application's real locale files."""
    return create_translator()


@pytest.fixture
def stores():
    """In-memory stores with a known mix of synced and unsynced groups.

    - 1 "Subscribers": role and legacy group
    - 2 "Editors": role and legacy group
    - 3 "Legacy only": legacy group without a role
    - 4 "Role only": role without a legacy group
    """
    return make_stores(
        groups=[
            make_member_group(1, "Subscribers", creator_id=-1),
            make_member_group(2, "Editors", creator_id=7),
            make_member_group(3, "Legacy only"),
        ],
        roles=[
            make_role(1, "Subscribers"),
            make_role(2, "Editors"),
            make_role(4, "Role only"),
        ],
    )


@pytest.fixture
def role_store(stores):
    return stores[0]


@pytest.fixture
def group_service(stores):
    return stores[1]


@pytest.fixture
def context(role_store, group_service, translator):
    return build_context(
        role_store=role_store, group_service=group_service, translator=translator
    )


@pytest.fixture
def app(context):
    from server.server import create_app

    return create_app(context=context)


@pytest.fixture
def client(app):
    return TestClient(app)
