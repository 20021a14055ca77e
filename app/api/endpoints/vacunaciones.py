"""Endpoints del historial de vacunación (dosis aplicadas)."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.vacunacion import VacunacionIn

NO_ENCONTRADA = "Vacunación no encontrada"

router = APIRouter(
    prefix="/vacunaciones",
    tags=["vacunaciones"],
    **protegido(POLITICA_ACCESO["vacunaciones"]),
)


@router.get("", summary="Listar vacunaciones")
async def listar_vacunaciones(store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ObtenerTodasVacunaciones")


@router.get("/{id_historial}", summary="Obtener vacunación por ID")
async def obtener_vacunacion(id_historial: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(store, "sp_ObtenerVacunacion", NO_ENCONTRADA, id_historial=id_historial)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Registrar vacunación",
    responses={400: {"description": "Lote vencido, sin existencias o dosis fuera de esquema"}},
)
async def registrar_vacunacion(body: VacunacionIn, store: ProcedureStore = Depends(get_store)):
    """
    Registra una dosis aplicada. El procedimiento descuenta la existencia del lote
    y rechaza lotes vencidos o agotados con un error numerado (400).
    """
    return await crear(store, "sp_RegistrarVacunacion", "id_historial", **body.model_dump())


@router.put("/{id_historial}", status_code=status.HTTP_204_NO_CONTENT, summary="Corregir vacunación")
async def actualizar_vacunacion(id_historial: UUID, body: VacunacionIn, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerVacunacion", NO_ENCONTRADA, id_historial=id_historial)
    await store.execute("sp_ActualizarVacunacion", id_historial=id_historial, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_historial}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar vacunación")
async def eliminar_vacunacion(id_historial: UUID, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerVacunacion", NO_ENCONTRADA, id_historial=id_historial)
    await store.execute("sp_EliminarVacunacion", id_historial=id_historial)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
