"""Autenticación por bearer token y control de acceso por rol."""
import logging
from collections.abc import Collection

from app.core.errors import AppError, insufficient_permissions, internal_error, token_invalid, token_missing
from app.core.security import Principal, TokenService

PREFIJO_BEARER = "Bearer "


def extraer_bearer(authorization: str | None) -> str:
    """Devuelve el token de un header ``Authorization: Bearer <token>``.

    El prefijo distingue mayúsculas. Sin header (o sin token) → TokenMissing;
    cualquier otro esquema → TokenInvalid.
    """
    if authorization is None or not authorization.strip():
        raise token_missing()
    if not authorization.startswith(PREFIJO_BEARER):
        raise token_invalid()
    token = authorization[len(PREFIJO_BEARER):].strip()
    if not token:
        raise token_missing()
    return token


class Autenticador:
    """Verifica el bearer token de cada request y deja registro de auditoría."""

    def __init__(self, tokens: TokenService, logger: logging.Logger | None = None):
        self._tokens = tokens
        self._logger = logger or logging.getLogger("app.auditoria")

    def autenticar(self, authorization: str | None, ip: str | None = None) -> Principal:
        try:
            principal = self._tokens.verify(extraer_bearer(authorization))
        except AppError as exc:
            self._logger.warning(
                "Autenticación rechazada",
                extra={"motivo": exc.kind.value, "ip": ip},
            )
            raise
        self._logger.info(
            "Usuario autenticado",
            extra={"username": principal.username, "role": principal.role, "ip": ip},
        )
        return principal


def autorizar(principal: Principal | None, permitidos: Collection[str] | None) -> Principal:
    """Permite el paso si el rol del principal está en la lista permitida.

    ``permitidos=None`` significa que basta con estar autenticado. Llegar aquí
    sin principal es un error de configuración de la ruta (500), nunca un permiso.
    """
    if principal is None:
        raise internal_error("Control de acceso ejecutado sin identidad autenticada")
    if permitidos is None:
        return principal
    if principal.role not in {str(getattr(r, "value", r)) for r in permitidos}:
        raise insufficient_permissions()
    return principal
