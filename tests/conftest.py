"""Fixtures compartidas: almacén falso, configuración y cliente HTTP."""
from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.procedures import get_store
from app.core.security import Principal, TokenService, hash_password
from app.main import create_app

SECRETO = "test-secret"


class FakeStore:
    """Almacén en memoria: respuestas por procedimiento y registro de llamadas."""

    def __init__(self):
        self.respuestas: dict[str, Any] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def nombres(self) -> list[str]:
        return [nombre for nombre, _ in self.calls]

    async def execute(self, nombre: str, /, **params: Any) -> list[dict[str, Any]]:
        self.calls.append((nombre, params))
        respuesta = self.respuestas.get(nombre, [])
        if isinstance(respuesta, Exception):
            raise respuesta
        return [dict(fila) for fila in respuesta]

    async def first(self, nombre: str, /, **params: Any) -> dict[str, Any] | None:
        filas = await self.execute(nombre, **params)
        return filas[0] if filas else None

    async def exists(self, nombre: str, /, **params: Any) -> bool:
        return await self.first(nombre, **params) is not None


@pytest.fixture
def config() -> Settings:
    return Settings(jwt_secret_key=SECRETO, log_json=False, _env_file=None)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(SECRETO, expire_minutes=60)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client(config, store):
    app = create_app(config)
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(tokens):
    """Fábrica de headers Authorization para un rol dado."""

    def _headers(role: str = "administrador", username: str = "admin") -> dict[str, str]:
        principal = Principal(user_id=f"id-{username}", username=username, role=role)
        return {"Authorization": f"Bearer {tokens.issue(principal).token}"}

    return _headers


@pytest.fixture(scope="session")
def hash_password123() -> str:
    return hash_password("password123")


def fila_usuario(password_hash: str, rol: str = "doctor", estado: str = "Activo", username: str = "juanperez") -> dict:
    return {
        "id_usuario": "3031019A-8658-4567-B284-D610A8AC7766",
        "username": username,
        "password_hash": password_hash,
        "rol": rol,
        "estado": estado,
    }
