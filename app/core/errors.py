"""
Taxonomía de errores de la API y su traducción a respuestas HTTP.

Todas las respuestas 4xx tienen la forma ``{"error": str, "data": any?}``.
Las 500 devuelven solo un mensaje genérico; el detalle queda en el log.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MENSAJE_ERROR_INTERNO = "Error del servidor"


class ErrorKind(str, Enum):
    """Tipos de error que la API puede devolver."""

    VALIDATION_FAILED = "ValidationFailed"
    INVALID_CREDENTIALS = "InvalidCredentials"
    TOKEN_MISSING = "TokenMissing"
    TOKEN_INVALID = "TokenInvalid"
    TOKEN_EXPIRED = "TokenExpired"
    ACCOUNT_INACTIVE = "AccountInactive"
    INSUFFICIENT_PERMISSIONS = "InsufficientPermissions"
    NOT_FOUND = "NotFound"
    DOMAIN_CONSTRAINT_VIOLATION = "DomainConstraintViolation"
    INTERNAL_ERROR = "InternalError"


STATUS_POR_TIPO: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.TOKEN_MISSING: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.ACCOUNT_INACTIVE: status.HTTP_403_FORBIDDEN,
    ErrorKind.INSUFFICIENT_PERMISSIONS: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DOMAIN_CONSTRAINT_VIOLATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TIPOS_TOKEN = {ErrorKind.TOKEN_MISSING, ErrorKind.TOKEN_INVALID, ErrorKind.TOKEN_EXPIRED}


class ConfigurationError(RuntimeError):
    """Configuración obligatoria ausente; se lanza al arrancar, nunca por request."""


class AppError(Exception):
    """Error de la aplicación con su tipo y datos estructurados."""

    def __init__(self, kind: ErrorKind, message: str, data: Any = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.data = data

    @property
    def status_code(self) -> int:
        return STATUS_POR_TIPO[self.kind]

    def __repr__(self) -> str:
        return f"AppError({self.kind.value}, {self.message!r})"


class StoreError(Exception):
    """Fallo devuelto por la capa de persistencia, opcionalmente numerado."""

    def __init__(self, number: int | None, message: str):
        super().__init__(message)
        self.number = number
        self.message = message


# Fábricas
def validation_failed(data: list[dict[str, str]]) -> AppError:
    return AppError(ErrorKind.VALIDATION_FAILED, "Validation failed", data)


def invalid_credentials() -> AppError:
    return AppError(ErrorKind.INVALID_CREDENTIALS, "Invalid credentials")


def token_missing() -> AppError:
    return AppError(ErrorKind.TOKEN_MISSING, "Access token is missing")


def token_invalid() -> AppError:
    return AppError(ErrorKind.TOKEN_INVALID, "Invalid token")


def token_expired() -> AppError:
    return AppError(ErrorKind.TOKEN_EXPIRED, "Token has expired")


def account_inactive() -> AppError:
    return AppError(ErrorKind.ACCOUNT_INACTIVE, "User account is inactive")


def insufficient_permissions() -> AppError:
    return AppError(ErrorKind.INSUFFICIENT_PERMISSIONS, "Insufficient permissions")


def not_found(mensaje: str) -> AppError:
    return AppError(ErrorKind.NOT_FOUND, mensaje)


def domain_violation(mensaje: str) -> AppError:
    return AppError(ErrorKind.DOMAIN_CONSTRAINT_VIOLATION, mensaje)


def internal_error(detalle: str) -> AppError:
    return AppError(ErrorKind.INTERNAL_ERROR, detalle)


def _cuerpo(error: str, data: Any = None) -> dict[str, Any]:
    cuerpo: dict[str, Any] = {"error": error}
    if data is not None:
        cuerpo["data"] = data
    return cuerpo


def _campo(loc: tuple[Any, ...]) -> str:
    partes = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(partes) or "body"


def errores_de_validacion(exc: RequestValidationError) -> list[dict[str, str]]:
    """Convierte los errores de pydantic en una lista de ``{field, message}``."""
    return [{"field": _campo(tuple(e.get("loc", ()))), "message": e.get("msg", "")} for e in exc.errors()]


def respuesta_error(request: Request, exc: AppError) -> JSONResponse:
    """Construye la respuesta HTTP de un AppError."""
    ip = request.client.host if request.client else None
    if exc.kind is ErrorKind.INTERNAL_ERROR:
        logger.error(
            "Error interno",
            extra={"detalle": exc.message, "method": request.method, "url": str(request.url), "ip": ip},
        )
        return JSONResponse(status_code=exc.status_code, content=_cuerpo(MENSAJE_ERROR_INTERNO))
    headers = {"WWW-Authenticate": "Bearer"} if exc.kind in _TIPOS_TOKEN else None
    return JSONResponse(
        status_code=exc.status_code,
        content=_cuerpo(exc.message, exc.data),
        headers=headers,
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return respuesta_error(request, exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errores = errores_de_validacion(exc)
    logger.warning(
        "Validación fallida",
        extra={"url": str(request.url), "errores": errores, "ip": request.client.host if request.client else None},
    )
    return respuesta_error(request, validation_failed(errores))


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Errores numerados de dominio → 400 con su mensaje; el resto → 500 genérico."""
    config = request.app.state.settings
    if config.es_error_de_dominio(exc.number):
        logger.warning("Violación de regla de dominio", extra={"numero": exc.number, "mensaje": exc.message})
        return respuesta_error(request, domain_violation(exc.message))
    return respuesta_error(request, internal_error(f"[{exc.number}] {exc.message}"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_cuerpo(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Error no controlado",
        extra={"method": request.method, "url": str(request.url)},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_cuerpo(MENSAJE_ERROR_INTERNO),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los manejadores de error en la aplicación."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
