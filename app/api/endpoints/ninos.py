"""Endpoints de niños registrados en el programa de vacunación."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.nino import NinoIn

NO_ENCONTRADO = "Niño no encontrado"

router = APIRouter(prefix="/ninos", tags=["ninos"], **protegido(POLITICA_ACCESO["ninos"]))


@router.get("", summary="Listar niños")
async def listar_ninos(store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ObtenerTodosNinos")


@router.get("/{id_nino}", summary="Obtener niño por ID")
async def obtener_nino(id_nino: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(store, "sp_ObtenerNino", NO_ENCONTRADO, id_nino=id_nino)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Registrar niño",
    description="Registra un niño. La edad máxima y la unicidad de la identificación las valida el procedimiento.",
)
async def crear_nino(body: NinoIn, store: ProcedureStore = Depends(get_store)):
    return await crear(store, "sp_CrearNino", "id_nino", **body.model_dump())


@router.put("/{id_nino}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar niño")
async def actualizar_nino(id_nino: UUID, body: NinoIn, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerNino", NO_ENCONTRADO, id_nino=id_nino)
    await store.execute("sp_ActualizarNino", id_nino=id_nino, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_nino}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar niño")
async def eliminar_nino(id_nino: UUID, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerNino", NO_ENCONTRADO, id_nino=id_nino)
    await store.execute("sp_EliminarNino", id_nino=id_nino)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
