import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Config de test AVANT d'importer app (le secret est obligatoire)
os.environ.setdefault("JWT_SECRET", "test-secret-for-pytest")
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient

from app.core.database import Base, SessionLocal, engine, get_db
from app.main import app


def override_get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Override la dépendance
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Client de test FastAPI"""
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture
def login_as():
    """Inscrit + connecte un utilisateur, renvoie un client avec le cookie de session"""
    def _login(email="alice@example.com", password="pw123", name="Alice"):
        user_client = TestClient(app)
        user_client.post("/auth/register", json={"email": email, "password": password, "name": name})
        response = user_client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return user_client
    return _login


@pytest.fixture
def alice(login_as):
    return login_as("alice@example.com", "pw123", "Alice")


@pytest.fixture
def bob(login_as):
    return login_as("bob@example.com", "secret456", "Bob")
