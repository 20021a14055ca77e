"""Endpoints de calendarios nacionales de vacunación."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.calendario import CalendarioIn

NO_ENCONTRADO = "Calendario nacional no encontrado"

router = APIRouter(
    prefix="/calendarios-nacionales",
    tags=["calendarios-nacionales"],
    **protegido(POLITICA_ACCESO["calendarios-nacionales"]),
)


@router.get("", summary="Listar calendarios nacionales")
async def listar_calendarios(store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ListarCalendariosNacionales")


@router.get("/{id_calendario}", summary="Obtener calendario nacional por ID")
async def obtener_calendario(id_calendario: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(
        store, "sp_ObtenerCalendarioNacionalPorId", NO_ENCONTRADO, id_calendario=id_calendario
    )


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear calendario nacional")
async def crear_calendario(body: CalendarioIn, store: ProcedureStore = Depends(get_store)):
    return await crear(store, "sp_CrearCalendarioNacional", "id_calendario", **body.model_dump())


@router.put("/{id_calendario}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar calendario nacional")
async def actualizar_calendario(
    id_calendario: UUID,
    body: CalendarioIn,
    store: ProcedureStore = Depends(get_store),
):
    await asegurar_existe(
        store, "sp_ObtenerCalendarioNacionalPorId", NO_ENCONTRADO, id_calendario=id_calendario
    )
    await store.execute("sp_ActualizarCalendarioNacional", id_calendario=id_calendario, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_calendario}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar calendario nacional")
async def eliminar_calendario(id_calendario: UUID, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(
        store, "sp_ObtenerCalendarioNacionalPorId", NO_ENCONTRADO, id_calendario=id_calendario
    )
    await store.execute("sp_EliminarCalendarioNacional", id_calendario=id_calendario)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
