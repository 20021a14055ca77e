"""Endpoints del catálogo de vacunas."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.vacuna import VacunaIn

NO_ENCONTRADA = "Vacuna no encontrada"

router = APIRouter(prefix="/vacunas", tags=["vacunas"], **protegido(POLITICA_ACCESO["vacunas"]))


@router.get("", summary="Listar vacunas")
async def listar_vacunas(store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ListarVacunas")


@router.get("/{id_vacuna}", summary="Obtener vacuna por ID")
async def obtener_vacuna(id_vacuna: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(store, "sp_ObtenerVacuna", NO_ENCONTRADA, id_vacuna=id_vacuna)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Crear vacuna",
    responses={400: {"description": "Datos inválidos o vacuna duplicada"}},
)
async def crear_vacuna(body: VacunaIn, store: ProcedureStore = Depends(get_store)):
    return await crear(store, "sp_CrearVacuna", "id_vacuna", **body.model_dump())


@router.put("/{id_vacuna}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar vacuna")
async def actualizar_vacuna(id_vacuna: UUID, body: VacunaIn, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerVacuna", NO_ENCONTRADA, id_vacuna=id_vacuna)
    await store.execute("sp_ActualizarVacuna", id_vacuna=id_vacuna, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_vacuna}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar vacuna")
async def eliminar_vacuna(id_vacuna: UUID, store: ProcedureStore = Depends(get_store)):
    """Elimina la vacuna. Si tiene lotes asociados el procedimiento lo rechaza (400)."""
    await asegurar_existe(store, "sp_ObtenerVacuna", NO_ENCONTRADA, id_vacuna=id_vacuna)
    await store.execute("sp_EliminarVacuna", id_vacuna=id_vacuna)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
