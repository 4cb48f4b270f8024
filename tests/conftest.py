"""
Fixtures compartidos: BD SQLite en memoria + cliente HTTP con cookies de sesión.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import models  # noqa: F401  (registra las tablas)
from db import get_session
from main import create_app
from models import Product, User
from security import hash_password


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db(engine):
    with Session(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def product(db):
    p = Product(name="Test Device", price=100, stock=3)
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


@pytest.fixture
def user(db):
    u = User(username="testuser", password_hash=hash_password("password"))
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def app(engine):
    app = create_app()

    def _get_session():
        with Session(engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    return app


@pytest.fixture
def test_client(app):
    # Sin "with": no corre el lifespan (las tablas ya existen en el engine de prueba)
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def logged_client(test_client, user):
    response = test_client.post("/login", data={"username": "testuser", "password": "password"})
    assert response.status_code == 302
    return test_client
