"""
Tests de la convención CRUD de los routers de recursos y del mapeo de errores
del almacén de procedimientos.
"""
from uuid import UUID

import pytest

from app.core.errors import StoreError

ID = "123e4567-e89b-12d3-a456-426614174000"
ID_CENTRO = "9b1deb4d-3b7d-4bad-9bdd-2b0d7b3dcb6d"
PAIS = {"nombre_pais": "República Dominicana", "codigo_iso": "DOM", "estado": "Activo"}


class TestPaises:
    def test_list(self, client, store, auth_headers):
        store.respuestas["sp_ListarPaises"] = [{"id_pais": ID, "nombre_pais": "Perú"}]

        response = client.get("/api/paises", headers=auth_headers("user"))

        assert response.status_code == 200
        assert response.json() == [{"id_pais": ID, "nombre_pais": "Perú"}]

    def test_get_found(self, client, store, auth_headers):
        store.respuestas["sp_ObtenerPaisPorId"] = [{"id_pais": ID, "nombre_pais": "Perú"}]

        response = client.get(f"/api/paises/{ID}", headers=auth_headers())

        assert response.status_code == 200
        assert store.calls == [("sp_ObtenerPaisPorId", {"id_pais": UUID(ID)})]

    def test_get_missing(self, client, auth_headers):
        response = client.get(f"/api/paises/{ID}", headers=auth_headers())

        assert response.status_code == 404
        assert response.json() == {"error": "País no encontrado"}

    def test_get_with_malformed_id(self, client, store, auth_headers):
        response = client.get("/api/paises/no-es-uuid", headers=auth_headers())

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["data"][0]["field"] == "id_pais"
        assert store.calls == []

    def test_create(self, client, store, auth_headers):
        store.respuestas["sp_CrearPais"] = [{"id_pais": ID}]

        response = client.post("/api/paises", json=PAIS, headers=auth_headers())

        assert response.status_code == 201
        assert response.json() == {"id_pais": ID}
        assert store.calls == [("sp_CrearPais", PAIS)]

    def test_create_trims_text(self, client, store, auth_headers):
        store.respuestas["sp_CrearPais"] = [{"id_pais": ID}]

        client.post("/api/paises", json={**PAIS, "nombre_pais": "  Chile  "}, headers=auth_headers())

        assert store.calls[0][1]["nombre_pais"] == "Chile"

    @pytest.mark.parametrize(
        "cambios,campo",
        [
            ({"nombre_pais": "  "}, "nombre_pais"),
            ({"codigo_iso": "DOMX"}, "codigo_iso"),
            ({"estado": "Suspendido"}, "estado"),
        ],
    )
    def test_create_validation(self, client, store, auth_headers, cambios, campo):
        response = client.post("/api/paises", json={**PAIS, **cambios}, headers=auth_headers())

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["data"]] == [campo]
        assert store.calls == []

    def test_update(self, client, store, auth_headers):
        store.respuestas["sp_ObtenerPaisPorId"] = [{"id_pais": ID}]

        response = client.put(f"/api/paises/{ID}", json=PAIS, headers=auth_headers())

        assert response.status_code == 204
        assert response.content == b""
        assert store.nombres() == ["sp_ObtenerPaisPorId", "sp_ActualizarPais"]

    def test_update_missing(self, client, store, auth_headers):
        response = client.put(f"/api/paises/{ID}", json=PAIS, headers=auth_headers())

        assert response.status_code == 404
        assert store.nombres() == ["sp_ObtenerPaisPorId"]

    def test_delete(self, client, store, auth_headers):
        store.respuestas["sp_ObtenerPaisPorId"] = [{"id_pais": ID}]

        response = client.delete(f"/api/paises/{ID}", headers=auth_headers())

        assert response.status_code == 204
        assert store.calls[-1] == ("sp_EliminarPais", {"id_pais": UUID(ID)})


class TestStoreErrors:
    def test_domain_error_is_400_with_store_message(self, client, store, auth_headers):
        store.respuestas["sp_CrearPais"] = StoreError(50001, "Ya existe un país con ese código ISO")

        response = client.post("/api/paises", json=PAIS, headers=auth_headers())

        assert response.status_code == 400
        assert response.json() == {"error": "Ya existe un país con ese código ISO"}

    @pytest.mark.parametrize("numero", [None, 2627, 547, 51000])
    def test_other_errors_are_generic_500(self, client, store, auth_headers, numero):
        store.respuestas["sp_ListarPaises"] = StoreError(numero, "relation \"Pais\" does not exist")

        response = client.get("/api/paises", headers=auth_headers())

        assert response.status_code == 500
        assert response.json() == {"error": "Error del servidor"}
        assert "Pais" not in response.text

    def test_create_without_returned_id_is_500(self, client, store, auth_headers):
        response = client.post("/api/paises", json=PAIS, headers=auth_headers())

        assert response.status_code == 500
        assert response.json() == {"error": "Error del servidor"}


class TestLotes:
    LOTE = {
        "id_vacuna": ID,
        "numero_lote": "L-2024-001",
        "cantidad_total": 100,
        "cantidad_disponible": 80,
        "fecha_fabricacion": "2024-01-10",
        "fecha_vencimiento": "2025-01-10",
        "id_centro": ID_CENTRO,
    }

    def test_create(self, client, store, auth_headers):
        store.respuestas["sp_CrearLoteVacuna"] = [{"id_lote": ID}]

        response = client.post("/api/lotes-vacunas", json=self.LOTE, headers=auth_headers("director"))

        assert response.status_code == 201
        assert response.json() == {"id_lote": ID}

    @pytest.mark.parametrize(
        "cambios",
        [
            {"cantidad_disponible": 101},
            {"fecha_vencimiento": "2024-01-10"},
        ],
    )
    def test_incoherent_lot_rejected(self, client, store, auth_headers, cambios):
        response = client.post("/api/lotes-vacunas", json={**self.LOTE, **cambios}, headers=auth_headers("director"))

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"
        assert store.calls == []


class TestCitasPorCentro:
    def test_range(self, client, store, auth_headers):
        store.respuestas["sp_ObtenerCitasPorCentro"] = [{"id_cita": ID}]

        response = client.get(
            f"/api/citas/centro/{ID_CENTRO}",
            params={"fecha_inicio": "2024-03-01", "fecha_fin": "2024-03-31"},
            headers=auth_headers("responsable"),
        )

        assert response.status_code == 200
        assert store.nombres() == ["sp_ObtenerCitasPorCentro"]

    def test_inverted_range(self, client, store, auth_headers):
        response = client.get(
            f"/api/citas/centro/{ID_CENTRO}",
            params={"fecha_inicio": "2024-03-31", "fecha_fin": "2024-03-01"},
            headers=auth_headers("responsable"),
        )

        assert response.status_code == 400
        assert response.json()["data"][0]["field"] == "fecha_fin"
        assert store.calls == []

    def test_missing_dates(self, client, auth_headers):
        response = client.get(f"/api/citas/centro/{ID_CENTRO}", headers=auth_headers("responsable"))

        assert response.status_code == 400
        assert {e["field"] for e in response.json()["data"]} == {"fecha_inicio", "fecha_fin"}


class TestCentros:
    def test_children_of_center(self, client, store, auth_headers):
        store.respuestas["sp_ObtenerNinosPorCentro"] = [{"id_nino": ID}]

        response = client.get(f"/api/centros/{ID_CENTRO}/ninos", headers=auth_headers("director"))

        assert response.status_code == 200
        assert response.json() == [{"id_nino": ID}]

    def test_children_of_center_empty_is_404(self, client, auth_headers):
        response = client.get(f"/api/centros/{ID_CENTRO}/ninos", headers=auth_headers("director"))

        assert response.status_code == 404
