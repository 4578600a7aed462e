import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture()
def db_session():
    engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def client(db_session):
    def override_get_db():
        db = db_session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the lifespan would create tables on the configured DATABASE_URL
    yield TestClient(app)
    app.dependency_overrides.clear()


def signup(client, username="alice", password="wonderland1", email=None):
    payload = {"username": username, "email": email or f"{username}@example.com", "password": password}
    return client.post("/auth/signup", json=payload)


def login(client, username="alice", password="wonderland1"):
    return client.post("/auth/token", data={"username": username, "password": password})


@pytest.fixture()
def user(client):
    r = signup(client)
    assert r.status_code == 201
    return r.json()


@pytest.fixture()
def auth_headers(client, user):
    token = login(client).json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
