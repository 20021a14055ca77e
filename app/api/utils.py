"""Convenciones compartidas por los routers de recursos."""
import logging
from typing import Any

from app.core.errors import internal_error, not_found
from app.core.procedures import ProcedureStore

logger = logging.getLogger(__name__)


async def obtener_o_404(
    store: ProcedureStore, procedimiento: str, mensaje: str, /, **params: Any
) -> dict[str, Any]:
    """Devuelve la primera fila del procedimiento o lanza NotFound."""
    fila = await store.first(procedimiento, **params)
    if fila is None:
        logger.info(mensaje, extra={"procedimiento": procedimiento, "params": {k: str(v) for k, v in params.items()}})
        raise not_found(mensaje)
    return fila


async def crear(store: ProcedureStore, procedimiento: str, clave_id: str, /, **params: Any) -> dict[str, Any]:
    """Ejecuta el alta y devuelve ``{clave_id: <nuevo id>}``."""
    fila = await store.first(procedimiento, **params)
    if fila is None or fila.get(clave_id) is None:
        raise internal_error(f"{procedimiento} no devolvió {clave_id}")
    return {clave_id: fila[clave_id]}


async def asegurar_existe(store: ProcedureStore, procedimiento: str, mensaje: str, /, **params: Any) -> None:
    """Comprobación previa a actualizar o eliminar: NotFound si no hay fila."""
    if not await store.exists(procedimiento, **params):
        raise not_found(mensaje)
