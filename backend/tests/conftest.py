import os
import tempfile

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("STORAGE_BACKEND", "file")
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="marketplace-test-"))
os.environ.setdefault("SEED_DEFAULT_TRAINERS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.api import deps
from app.db.base import Base
from app.main import create_app
from app.storage import Store, build_database_store, build_file_store

PASSWORD = "Supersecure1"


@pytest.fixture()
def store(tmp_path) -> Store:
    return build_file_store(tmp_path)


@pytest.fixture()
def sql_store():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    try:
        yield build_database_store(factory)
    finally:
        engine.dispose()


@pytest.fixture()
def client(store):
    app = create_app()
    app.dependency_overrides[deps.get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client


def register(client: TestClient, name: str, email: str, role: str = "client") -> tuple[dict, dict]:
    """Register a user and return its public record and auth headers."""
    response = client.post(
        "/auth/register",
        json={"name": name, "email": email, "password": PASSWORD, "role": role},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    return body["user"], {"Authorization": f"Bearer {body['accessToken']}"}
