"""Endpoints de reportes de cobertura por centro."""
from uuid import UUID

from fastapi import APIRouter, Depends

from app.api.endpoints.auth import protegido
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO

router = APIRouter(prefix="/reportes", tags=["reportes"], **protegido(POLITICA_ACCESO["reportes"]))


@router.get(
    "/cobertura/{id_centro}",
    summary="Cobertura de vacunación de un centro",
    description="Porcentaje de niños del centro con esquema completo por vacuna.",
)
async def cobertura_vacunacion(id_centro: UUID, store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ObtenerCoberturaVacunacion", id_centro=id_centro)


@router.get(
    "/esquemas-incompletos/{id_centro}",
    summary="Niños con esquema incompleto",
)
async def esquemas_incompletos(id_centro: UUID, store: ProcedureStore = Depends(get_store)):
    """Niños del centro a los que les faltan dosis según el calendario vigente."""
    return await store.execute("sp_ObtenerEsquemasIncompletos", id_centro=id_centro)
