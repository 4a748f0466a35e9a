"""Shared fixtures: a fresh seeded in-memory database per test."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from tareas.database import get_session, seed_categorias
from tareas.main import app


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create a fresh in-memory database with the default categories."""
    with Session(engine) as session:
        seed_categorias(session)
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client with overridden database session."""
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="crear_tarea")
def crear_tarea_fixture(client: TestClient):
    """Return a helper that creates a task through the API and returns its JSON."""
    def crear(titulo="Comprar pan", descripcion="Integral", categoria_id=1):
        response = client.post(
            "/tareas",
            json={"titulo": titulo, "descripcion": descripcion, "categoria_id": categoria_id},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return crear
