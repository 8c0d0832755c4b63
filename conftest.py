import os

# Settings are read at import time; point them at throwaway values first
os.environ["ENVIRONMENT"] = "development"
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEFAULT_TIMEZONE"] = "UTC"

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vitalcheck.db.base import Base
from vitalcheck.db.session import build_engine, get_db
from vitalcheck.main import app
from vitalcheck import models  # noqa: F401


@pytest.fixture()
def session_factory():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def admin_credentials() -> Dict[str, str]:
    return {"name": "Ada Admin", "email": "ada@example.com", "password": "correct-horse"}


@pytest.fixture()
def registered_admin(client, admin_credentials) -> Dict[str, Any]:
    response = client.post("/api/admin/register", json=admin_credentials)
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def auth_headers(registered_admin) -> Dict[str, str]:
    return {"Authorization": f"Bearer {registered_admin['token']}"}


def make_assessment(patient_name: str = "Jane Doe", overall_risk: str = "Low Risk", **overrides) -> Dict[str, Any]:
    payload = {
        "patientName": patient_name,
        "age": 42,
        "systolic": 118,
        "diastolic": 76,
        "bloodSugar": 92.5,
        "temperature": 36.8,
        "isFasting": True,
        "bpRisk": {"risk": "Low Risk", "score": 1},
        "sugarRisk": {"risk": "Low Risk", "score": 1},
        "tempRisk": {"risk": "Low Risk", "score": 1},
        "totalScore": 3,
        "overallRisk": overall_risk,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def assessment_payload():
    return make_assessment
