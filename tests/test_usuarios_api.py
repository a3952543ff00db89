"""API tests for /api/usuarios."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.models.usuario import Usuario
from app.models.vehiculo import Vehiculo
from conftest import usuario_payload, vehiculo_payload, cita_payload, venta_payload


class TestUsuarioApi:
    def test_create_and_round_trip(self, client, rol):
        payload = usuario_payload(rol["rol_id"])
        resp = client.post("/api/usuarios", json=payload)

        assert resp.status_code == 201
        created = resp.json()
        fetched = client.get(f"/api/usuarios/{created['usuario_id']}").json()
        for field in ("nombre", "apellido", "email", "telefono", "rol_id"):
            assert fetched[field] == payload[field]

    def test_password_is_stored_but_never_returned(self, client, db_session, rol):
        created = client.post("/api/usuarios", json=usuario_payload(rol["rol_id"])).json()

        assert "contraseña" not in created
        assert "contrasena" not in created
        assert db_session.get(Usuario, created["usuario_id"]).contrasena == "secreto123"

    def test_missing_field_returns_400(self, client, db_session, rol):
        payload = usuario_payload(rol["rol_id"])
        del payload["contraseña"]

        resp = client.post("/api/usuarios", json=payload)

        assert resp.status_code == 400
        assert resp.json()["campos"] == ["contraseña"]
        assert db_session.query(Usuario).count() == 0

    def test_unknown_role_returns_404(self, client, db_session):
        resp = client.post("/api/usuarios", json=usuario_payload(77))

        assert resp.status_code == 404
        assert resp.json() == {"error": "Rol no encontrado"}
        assert db_session.query(Usuario).count() == 0

    def test_update_to_unknown_role_returns_404(self, client, usuario):
        payload = usuario_payload(999)
        resp = client.put(f"/api/usuarios/{usuario['usuario_id']}", json=payload)
        assert resp.status_code == 404
        assert client.get(f"/api/usuarios/{usuario['usuario_id']}").json()["rol_id"] == usuario["rol_id"]

    def test_patch_password(self, client, db_session, usuario):
        resp = client.patch(f"/api/usuarios/{usuario['usuario_id']}", json={"contraseña": "nueva"})

        assert resp.status_code == 200
        assert db_session.get(Usuario, usuario["usuario_id"]).contrasena == "nueva"

    def test_get_update_delete_unknown(self, client, rol):
        assert client.get("/api/usuarios/5").status_code == 404
        assert client.put("/api/usuarios/5", json=usuario_payload(rol["rol_id"])).status_code == 404
        assert client.delete("/api/usuarios/5").status_code == 404

    def test_delete_cascades_to_owned_records(self, client, db_session, usuario):
        vehiculo = client.post("/api/vehiculos", json=vehiculo_payload(usuario["usuario_id"])).json()
        client.post("/api/citas", json=cita_payload(usuario["usuario_id"], vehiculo["vehiculo_id"]))
        client.post("/api/ventas", json=venta_payload(usuario["usuario_id"], vehiculo["vehiculo_id"]))

        resp = client.delete(f"/api/usuarios/{usuario['usuario_id']}")

        assert resp.status_code == 200
        assert resp.json() == {"message": "Usuario eliminado exitosamente"}
        assert client.get(f"/api/vehiculos/{vehiculo['vehiculo_id']}").status_code == 404
        assert client.get("/api/vehiculos").json() == []
        assert client.get("/api/citas").json() == []
        assert client.get("/api/ventas").json() == []
        # soft delete: rows are kept
        assert db_session.get(Vehiculo, vehiculo["vehiculo_id"]).deleted_at is not None

    def test_role_id_beyond_integer_range_returns_400(self, client, db_session, rol):
        resp = client.post("/api/usuarios", json=usuario_payload(99999999999999999999))

        assert resp.status_code == 400
        assert resp.json()["campos"] == ["rol_id"]
        assert db_session.query(Usuario).count() == 0

    def test_patch_role_id_beyond_integer_range_returns_400(self, client, usuario):
        resp = client.patch(f"/api/usuarios/{usuario['usuario_id']}", json={"rol_id": 2147483648})
        assert resp.status_code == 400
