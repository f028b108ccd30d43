import sqlite3

import pytest
from fastapi.testclient import TestClient

from app.core.repositories import ContactRepository
from app.core.services import ContactService
from app.infrastructure.config.config import DB_CONFIG
from app.infrastructure.database.adapters.sqlite_connection import DatabaseConnection


@pytest.fixture
def db_path(tmp_path):
    """Path of a throwaway SQLite file for each test."""
    return tmp_path / "test.sqlite"


@pytest.fixture
async def db_connection(db_path):
    connection = DatabaseConnection(url=f"sqlite+aiosqlite:///{db_path}")
    await connection.init_db()
    yield connection
    await connection.close()


@pytest.fixture
async def session(db_connection):
    session = await db_connection.get_session()
    yield session
    await session.close()


@pytest.fixture
def contact_service(session):
    return ContactService(repository=ContactRepository(session=session))


@pytest.fixture
def client(db_path, monkeypatch):
    monkeypatch.setattr(DB_CONFIG, "DB_PATH", str(db_path))

    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def drop_contacts_table(db_path):
    """Break the store underneath the app so every query fails."""
    def _drop():
        conn = sqlite3.connect(db_path)
        conn.execute("DROP TABLE contacts")
        conn.commit()
        conn.close()

    return _drop
