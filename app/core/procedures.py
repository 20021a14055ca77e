"""
Ejecución de procedimientos almacenados.

Los procedimientos son funciones PL/pgSQL invocadas como
``SELECT * FROM nombre(param => :param, ...)``. Las reglas de negocio se
señalan con ``RAISE EXCEPTION '50001: mensaje'``; el número queda en
``StoreError.number`` y el texto tras los dos puntos en ``StoreError.message``.
"""
import logging
import re
from typing import Any

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.errors import StoreError

logger = logging.getLogger(__name__)

_IDENTIFICADOR = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_PREFIJO_NUMERO = re.compile(r"^\s*(?:ERROR:\s*)?(\d{3,6})\s*:\s*(.*)$", re.DOTALL)

# Mismos números que SQL Server para duplicados y claves foráneas
ERROR_DUPLICADO = 2627
ERROR_CLAVE_FORANEA = 547
_SQLSTATE_A_NUMERO = {"23505": ERROR_DUPLICADO, "23503": ERROR_CLAVE_FORANEA}


def _primera_linea(valor: Any) -> str:
    if isinstance(valor, bytes):
        valor = valor.decode("utf-8", errors="replace")
    lineas = str(valor).strip().splitlines()
    return lineas[0].strip() if lineas else ""


def traducir_error(exc: DBAPIError) -> StoreError:
    """Extrae número y mensaje de un error del driver."""
    orig = exc.orig if exc.orig is not None else exc
    # asyncpg llega envuelto por el adaptador de SQLAlchemy
    causa = getattr(orig, "__cause__", None) or orig
    args = getattr(causa, "args", ())

    numero = getattr(causa, "number", None)
    if numero is None and len(args) >= 2 and isinstance(args[0], int):
        # Drivers de SQL Server: (número, mensaje)
        numero, mensaje = args[0], _primera_linea(args[1])
    else:
        mensaje = _primera_linea(getattr(causa, "message", None) or causa)

    coincidencia = _PREFIJO_NUMERO.match(mensaje)
    if coincidencia:
        if numero is None:
            numero = int(coincidencia.group(1))
        mensaje = coincidencia.group(2).strip()

    if numero is None:
        sqlstate = getattr(causa, "sqlstate", None) or getattr(orig, "sqlstate", None)
        numero = _SQLSTATE_A_NUMERO.get(sqlstate)
    if numero is None and isinstance(exc, IntegrityError):
        numero = ERROR_DUPLICADO
    return StoreError(numero, mensaje)


class ProcedureStore:
    """Ejecuta procedimientos con parámetros tipados y devuelve filas como dict."""

    def __init__(self, session: AsyncSession, logger: logging.Logger | None = None):
        self._session = session
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _sentencia(nombre: str, params: dict[str, Any]):
        if not _IDENTIFICADOR.match(nombre):
            raise ValueError(f"Nombre de procedimiento inválido: {nombre!r}")
        for clave in params:
            if not _IDENTIFICADOR.match(clave):
                raise ValueError(f"Nombre de parámetro inválido: {clave!r}")
        argumentos = ", ".join(f"{clave} => :{clave}" for clave in params)
        return text(f'SELECT * FROM "{nombre}"({argumentos})')

    async def execute(self, nombre: str, /, **params: Any) -> list[dict[str, Any]]:
        """Ejecuta el procedimiento; lanza StoreError si la base de datos falla."""
        sentencia = self._sentencia(nombre, params)
        try:
            result = await self._session.execute(sentencia, params)
        except DBAPIError as exc:
            error = traducir_error(exc)
            self._logger.warning(
                "Error en procedimiento almacenado",
                extra={"procedimiento": nombre, "numero": error.number, "detalle": error.message},
            )
            raise error from exc
        if not result.returns_rows:
            return []
        return [dict(fila) for fila in result.mappings().all()]

    async def first(self, nombre: str, /, **params: Any) -> dict[str, Any] | None:
        filas = await self.execute(nombre, **params)
        return filas[0] if filas else None

    async def exists(self, nombre: str, /, **params: Any) -> bool:
        return await self.first(nombre, **params) is not None


async def get_store(db: AsyncSession = Depends(get_db)) -> ProcedureStore:
    """Dependencia: almacén de procedimientos sobre la sesión del request."""
    return ProcedureStore(db)
