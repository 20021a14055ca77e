"""Operaciones de credenciales: login y cambio de contraseña."""
import logging
from dataclasses import dataclass
from typing import Any

from app.core.errors import account_inactive, invalid_credentials
from app.core.procedures import ProcedureStore
from app.core.roles import EstadoUsuario
from app.core.security import (
    Principal,
    TokenEmitido,
    TokenService,
    consumir_verificacion,
    hash_password,
    verify_password,
)

SP_LOGIN = "sp_LoginUsuario"
SP_ACTUALIZAR_CONTRASENA = "sp_ActualizarContrasenaUsuario"


@dataclass(frozen=True)
class Credencial:
    """Fila devuelta por el procedimiento de login."""

    user_id: str
    username: str
    password_hash: str
    role: str
    status: str

    @classmethod
    def desde_fila(cls, fila: dict[str, Any]) -> "Credencial":
        return cls(
            user_id=str(fila["id_usuario"]),
            username=fila["username"],
            password_hash=fila.get("password_hash") or "",
            role=fila["rol"],
            status=fila.get("estado") or EstadoUsuario.ACTIVO.value,
        )

    @property
    def activa(self) -> bool:
        return self.status != EstadoUsuario.INACTIVO.value

    def principal(self) -> Principal:
        return Principal(user_id=self.user_id, username=self.username, role=self.role)


@dataclass(frozen=True)
class ResultadoLogin:
    principal: Principal
    token: TokenEmitido


async def buscar_credencial(store: ProcedureStore, username: str) -> Credencial | None:
    fila = await store.first(SP_LOGIN, username=username)
    return Credencial.desde_fila(fila) if fila else None


class LoginService:
    """Verifica credenciales contra el almacén y emite el token."""

    def __init__(self, store: ProcedureStore, tokens: TokenService, logger: logging.Logger | None = None):
        self._store = store
        self._tokens = tokens
        self._logger = logger or logging.getLogger("app.auditoria")

    async def login(self, username: str, password: str, ip: str | None = None) -> ResultadoLogin:
        self._logger.info("Intento de login", extra={"username": username, "ip": ip})
        credencial = await buscar_credencial(self._store, username)
        if credencial is None:
            consumir_verificacion()
            self._logger.warning("Usuario no encontrado", extra={"username": username, "ip": ip})
            raise invalid_credentials()
        if not credencial.activa:
            self._logger.warning("Cuenta inactiva", extra={"username": username, "ip": ip})
            raise account_inactive()
        if not verify_password(password, credencial.password_hash):
            self._logger.warning("Contraseña inválida", extra={"username": username, "ip": ip})
            raise invalid_credentials()

        principal = credencial.principal()
        token = self._tokens.issue(principal)
        self._logger.info("Login correcto", extra={"username": username, "role": principal.role, "ip": ip})
        return ResultadoLogin(principal=principal, token=token)

    async def cambiar_contrasena(self, principal: Principal, actual: str, nueva: str) -> None:
        """Sustituye el hash completo tras verificar la contraseña actual.

        Los tokens ya emitidos siguen siendo válidos hasta su expiración.
        """
        credencial = await buscar_credencial(self._store, principal.username)
        if credencial is None or not verify_password(actual, credencial.password_hash):
            self._logger.warning("Cambio de contraseña rechazado", extra={"username": principal.username})
            raise invalid_credentials()
        if not credencial.activa:
            self._logger.warning("Cambio de contraseña en cuenta inactiva", extra={"username": principal.username})
            raise account_inactive()
        await self._store.execute(
            SP_ACTUALIZAR_CONTRASENA,
            id_usuario=credencial.user_id,
            password_hash=hash_password(nueva),
        )
        self._logger.info("Contraseña actualizada", extra={"username": principal.username})
