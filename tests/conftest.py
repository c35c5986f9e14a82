import pytest
from fastapi.testclient import TestClient

from auction_server.core.config import Settings
from auction_server.main import create_app

ADMIN_USER = "experimenter"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'participants.db'}",
        admin_user=ADMIN_USER,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unreachable_store_client(tmp_path):
    # SQLite cannot create a database file inside a directory that is missing.
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'participants.db'}",
        admin_user=ADMIN_USER,
        admin_password=ADMIN_PASSWORD,
    )
    app = create_app(settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_auth():
    return (ADMIN_USER, ADMIN_PASSWORD)
