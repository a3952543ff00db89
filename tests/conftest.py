"""
Shared fixtures: an in-memory SQLite database per test, a session on it,
and a TestClient whose get_db dependency is bound to that database.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, create_tables, get_db
from app.main import app


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(eng, "connect")
    def _enable_foreign_keys(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    create_tables(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ── Payload builders ─────────────────────────────────────────────────────────

def rol_payload(**overrides):
    data = {"nombre_rol": "vendedor", "descripcion": "Atiende clientes"}
    data.update(overrides)
    return data


def usuario_payload(rol_id, **overrides):
    data = {
        "nombre": "Ana",
        "apellido": "Pérez",
        "email": "ana@example.com",
        "contraseña": "secreto123",
        "telefono": "555-0101",
        "rol_id": rol_id,
    }
    data.update(overrides)
    return data


def vehiculo_payload(usuario_id, **overrides):
    data = {
        "marca": "Toyota",
        "modelo": "Corolla",
        "precio": 18500,
        "año": "2021",
        "kilometraje": "32000",
        "color": "gris",
        "tipo_combustible": "gasolina",
        "descripcion": "Único dueño",
        "estado": "disponible",
        "usuario_id": usuario_id,
    }
    data.update(overrides)
    return data


def venta_payload(usuario_id, vehiculo_id, **overrides):
    data = {
        "fecha": "2026-03-15T12:00:00",
        "precio_final": 18000,
        "usuario_id": usuario_id,
        "vehiculo_id": vehiculo_id,
        "estado_venta": "completada",
    }
    data.update(overrides)
    return data


def cita_payload(usuario_id, vehiculo_id, **overrides):
    data = {
        "fecha_cita": "2026-05-01T00:00:00",
        "hora_cita": "10:30",
        "estado": "pendiente",
        "notas": "Prueba en ciudad",
        "usuario_id": usuario_id,
        "vehiculo_id": vehiculo_id,
    }
    data.update(overrides)
    return data


# ── Records created through the API ──────────────────────────────────────────

@pytest.fixture
def rol(client):
    resp = client.post("/api/roles", json=rol_payload())
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def usuario(client, rol):
    resp = client.post("/api/usuarios", json=usuario_payload(rol["rol_id"]))
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def vehiculo(client, usuario):
    resp = client.post("/api/vehiculos", json=vehiculo_payload(usuario["usuario_id"]))
    assert resp.status_code == 201
    return resp.json()
