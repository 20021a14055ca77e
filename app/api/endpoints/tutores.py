"""Endpoints de tutores (madre, padre o tutor legal de un niño)."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.tutor import TutorIn

NO_ENCONTRADO = "Tutor no encontrado"

router = APIRouter(prefix="/tutores", tags=["tutores"], **protegido(POLITICA_ACCESO["tutores"]))


@router.get("", summary="Listar tutores")
async def listar_tutores(store: ProcedureStore = Depends(get_store)):
    return await store.execute("sp_ListarTutores")


@router.get("/{id_tutor}", summary="Obtener tutor por ID")
async def obtener_tutor(id_tutor: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(store, "sp_ObtenerTutor", NO_ENCONTRADO, id_tutor=id_tutor)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear tutor")
async def crear_tutor(body: TutorIn, store: ProcedureStore = Depends(get_store)):
    return await crear(store, "sp_CrearTutor", "id_tutor", **body.model_dump())


@router.put("/{id_tutor}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar tutor")
async def actualizar_tutor(id_tutor: UUID, body: TutorIn, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerTutor", NO_ENCONTRADO, id_tutor=id_tutor)
    await store.execute("sp_ActualizarTutor", id_tutor=id_tutor, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_tutor}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar tutor")
async def eliminar_tutor(id_tutor: UUID, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerTutor", NO_ENCONTRADO, id_tutor=id_tutor)
    await store.execute("sp_EliminarTutor", id_tutor=id_tutor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
