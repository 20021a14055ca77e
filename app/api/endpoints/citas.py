"""Endpoints de citas de vacunación."""
from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.errors import validation_failed
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.cita import CitaIn

NO_ENCONTRADA = "Cita no encontrada"

router = APIRouter(prefix="/citas", tags=["citas"], **protegido(POLITICA_ACCESO["citas"]))


@router.get("", summary="Listar citas")
async def listar_citas(store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ObtenerTodasCitas")


@router.get(
    "/centro/{id_centro}",
    summary="Citas de un centro en un rango de fechas",
)
async def listar_citas_por_centro(
    id_centro: UUID,
    fecha_inicio: Annotated[date, Query(description="Fecha inicial (inclusive)")],
    fecha_fin: Annotated[date, Query(description="Fecha final (inclusive)")],
    store: ProcedureStore = Depends(get_store),
):
    """Devuelve las citas del centro entre `fecha_inicio` y `fecha_fin`."""
    if fecha_inicio > fecha_fin:
        raise validation_failed([{"field": "fecha_fin", "message": "fecha_fin debe ser igual o posterior a fecha_inicio"}])
    return await store.execute(
        "sp_ObtenerCitasPorCentro",
        id_centro=id_centro,
        fecha_inicio=fecha_inicio,
        fecha_fin=fecha_fin,
    )


@router.get("/{id_cita}", summary="Obtener cita por ID")
async def obtener_cita(id_cita: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(store, "sp_ObtenerCita", NO_ENCONTRADA, id_cita=id_cita)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Agendar cita")
async def crear_cita(body: CitaIn, store: ProcedureStore = Depends(get_store)):
    return await crear(store, "sp_CrearCita", "id_cita", **body.model_dump())


@router.put("/{id_cita}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar cita")
async def actualizar_cita(id_cita: UUID, body: CitaIn, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerCita", NO_ENCONTRADA, id_cita=id_cita)
    await store.execute("sp_ActualizarCita", id_cita=id_cita, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_cita}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar cita")
async def eliminar_cita(id_cita: UUID, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerCita", NO_ENCONTRADA, id_cita=id_cita)
    await store.execute("sp_EliminarCita", id_cita=id_cita)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
