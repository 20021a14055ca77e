"""
Tests del endpoint de login y del acceso con el token emitido.
"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.errors import ConfigurationError
from app.core.security import _hash_senuelo
from app.main import create_app
from tests.conftest import fila_usuario


class TestLogin:
    def test_valid_credentials(self, client, store, tokens, hash_password123):
        store.respuestas["sp_LoginUsuario"] = [fila_usuario(hash_password123, rol="doctor")]

        response = client.post("/login", json={"username": "juanperez", "password": "password123"})

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"] == {
            "user_id": "3031019A-8658-4567-B284-D610A8AC7766",
            "username": "juanperez",
            "role": "doctor",
        }
        assert "password_hash" not in response.text
        claims = tokens.verify(body["token"])
        assert claims.role == "doctor"
        assert claims.user_id == body["user"]["user_id"]

    def test_token_from_login_opens_permitted_route(self, client, store, hash_password123):
        store.respuestas["sp_LoginUsuario"] = [fila_usuario(hash_password123, rol="doctor")]
        store.respuestas["sp_ObtenerTodasCitas"] = [{"id_cita": "c-1"}]
        token = client.post("/login", json={"username": "juanperez", "password": "password123"}).json()["token"]

        response = client.get("/api/citas", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == [{"id_cita": "c-1"}]

    def test_wrong_password(self, client, store, hash_password123):
        store.respuestas["sp_LoginUsuario"] = [fila_usuario(hash_password123)]

        response = client.post("/login", json={"username": "juanperez", "password": "otra"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_unknown_user_matches_wrong_password(self, client, store):
        response = client.post("/login", json={"username": "nadie", "password": "password123"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_inactive_account(self, client, store, hash_password123):
        store.respuestas["sp_LoginUsuario"] = [fila_usuario(hash_password123, estado="Inactivo")]

        response = client.post("/login", json={"username": "juanperez", "password": "password123"})

        assert response.status_code == 403
        assert response.json() == {"error": "User account is inactive"}
        assert "token" not in response.json()

    @pytest.mark.parametrize(
        "payload,campo",
        [
            ({"password": "password123"}, "username"),
            ({"username": "juanperez"}, "password"),
            ({"username": "   ", "password": "password123"}, "username"),
            ({"username": "juanperez", "password": ""}, "password"),
        ],
    )
    def test_validation(self, client, store, payload, campo):
        response = client.post("/login", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert campo in {e["field"] for e in body["data"]}
        assert store.calls == []

    def test_store_failure_is_generic_500(self, client, store):
        from app.core.errors import StoreError

        store.respuestas["sp_LoginUsuario"] = StoreError(None, "timeout contacting db-primary")

        response = client.post("/login", json={"username": "juanperez", "password": "password123"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error del servidor"}


def test_startup_fails_without_signing_secret():
    app = create_app(Settings(jwt_secret_key=None, log_json=False, _env_file=None))

    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass


def test_health_is_public(client):
    assert client.get("/health").json()["status"] == "ok"


def test_startup_precomputes_decoy_hash(config):
    _hash_senuelo.cache_clear()

    with TestClient(create_app(config)):
        assert _hash_senuelo.cache_info().currsize == 1
