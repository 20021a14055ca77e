"""Endpoints de lotes de vacunas (inventario por centro)."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.lote import LoteIn

NO_ENCONTRADO = "Lote no encontrado"

router = APIRouter(
    prefix="/lotes-vacunas",
    tags=["lotes-vacunas"],
    **protegido(POLITICA_ACCESO["lotes-vacunas"]),
)


@router.get("", summary="Listar lotes de vacunas")
async def listar_lotes(store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ListarLotesVacunas")


@router.get("/{id_lote}", summary="Obtener lote por ID")
async def obtener_lote(id_lote: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(store, "sp_ObtenerLoteVacuna", NO_ENCONTRADO, id_lote=id_lote)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear lote de vacunas")
async def crear_lote(body: LoteIn, store: ProcedureStore = Depends(get_store)):
    return await crear(store, "sp_CrearLoteVacuna", "id_lote", **body.model_dump())


@router.put("/{id_lote}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar lote")
async def actualizar_lote(id_lote: UUID, body: LoteIn, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerLoteVacuna", NO_ENCONTRADO, id_lote=id_lote)
    await store.execute("sp_ActualizarLoteVacuna", id_lote=id_lote, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_lote}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar lote")
async def eliminar_lote(id_lote: UUID, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerLoteVacuna", NO_ENCONTRADO, id_lote=id_lote)
    await store.execute("sp_EliminarLoteVacuna", id_lote=id_lote)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
