"""Endpoints de centros de vacunación."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.errors import not_found
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.centro import CentroIn

NO_ENCONTRADO = "Centro no encontrado"

router = APIRouter(prefix="/centros", tags=["centros"], **protegido(POLITICA_ACCESO["centros"]))


@router.get("", summary="Listar centros de vacunación")
async def listar_centros(store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ListarCentrosVacunacion")


@router.get("/{id_centro}", summary="Obtener centro por ID")
async def obtener_centro(id_centro: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(store, "sp_ObtenerCentroVacunacion", NO_ENCONTRADO, id_centro=id_centro)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear centro de vacunación")
async def crear_centro(body: CentroIn, store: ProcedureStore = Depends(get_store)):
    return await crear(store, "sp_CrearCentroVacunacion", "id_centro", **body.model_dump())


@router.put("/{id_centro}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar centro")
async def actualizar_centro(id_centro: UUID, body: CentroIn, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerCentroVacunacion", NO_ENCONTRADO, id_centro=id_centro)
    await store.execute("sp_ActualizarCentroVacunacion", id_centro=id_centro, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_centro}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar centro")
async def eliminar_centro(id_centro: UUID, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerCentroVacunacion", NO_ENCONTRADO, id_centro=id_centro)
    await store.execute("sp_EliminarCentroVacunacion", id_centro=id_centro)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{id_centro}/ninos",
    summary="Niños asignados a un centro",
    responses={404: {"description": "El centro no tiene niños asignados"}},
)
async def listar_ninos_del_centro(id_centro: UUID, store: ProcedureStore = Depends(get_store)):
    """Devuelve los niños cuyo centro de salud es el indicado."""
    filas = await store.execute("sp_ObtenerNinosPorCentro", id_centro=id_centro)
    if not filas:
        raise not_found("No se encontraron niños para este centro")
    return filas
