"""API tests for /api/ventas."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.models.venta import Venta
from conftest import venta_payload


class TestVentaApi:
    def test_create_and_round_trip(self, client, usuario, vehiculo):
        payload = venta_payload(usuario["usuario_id"], vehiculo["vehiculo_id"])
        resp = client.post("/api/ventas", json=payload)

        assert resp.status_code == 201
        fetched = client.get(f"/api/ventas/{resp.json()['venta_id']}").json()
        for field, value in payload.items():
            assert fetched[field] == value

    def test_missing_field_returns_400(self, client, db_session, usuario, vehiculo):
        payload = venta_payload(usuario["usuario_id"], vehiculo["vehiculo_id"])
        del payload["estado_venta"]

        resp = client.post("/api/ventas", json=payload)

        assert resp.status_code == 400
        assert db_session.query(Venta).count() == 0

    def test_unknown_vehicle_returns_404(self, client, usuario):
        resp = client.post("/api/ventas", json=venta_payload(usuario["usuario_id"], 404))
        assert resp.status_code == 404
        assert resp.json() == {"error": "Vehículo no encontrado"}

    def test_update_unknown_returns_404(self, client, usuario, vehiculo):
        resp = client.put("/api/ventas/3", json=venta_payload(usuario["usuario_id"], vehiculo["vehiculo_id"]))
        assert resp.status_code == 404
        assert resp.json() == {"error": "Venta no encontrada"}

    def test_patch_status(self, client, usuario, vehiculo):
        venta = client.post("/api/ventas", json=venta_payload(usuario["usuario_id"], vehiculo["vehiculo_id"])).json()

        resp = client.patch(f"/api/ventas/{venta['venta_id']}", json={"estado_venta": "anulada"})

        assert resp.status_code == 200
        assert resp.json()["estado_venta"] == "anulada"

    def test_delete_then_get_returns_404(self, client, usuario, vehiculo):
        venta = client.post("/api/ventas", json=venta_payload(usuario["usuario_id"], vehiculo["vehiculo_id"])).json()

        resp = client.delete(f"/api/ventas/{venta['venta_id']}")

        assert resp.status_code == 200
        assert resp.json() == {"message": "Venta eliminada exitosamente"}
        assert client.get(f"/api/ventas/{venta['venta_id']}").status_code == 404
        assert client.delete(f"/api/ventas/{venta['venta_id']}").status_code == 404

    def test_ids_beyond_integer_range_return_400(self, client, db_session, usuario):
        resp = client.post("/api/ventas", json=venta_payload(usuario["usuario_id"], 99999999999999999999))

        assert resp.status_code == 400
        assert resp.json()["campos"] == ["vehiculo_id"]
        assert db_session.query(Venta).count() == 0
