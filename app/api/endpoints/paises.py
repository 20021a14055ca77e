"""Endpoints de países."""
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.schemas.pais import PaisIn

NO_ENCONTRADO = "País no encontrado"

router = APIRouter(prefix="/paises", tags=["paises"], **protegido(POLITICA_ACCESO["paises"]))


@router.get("", summary="Listar países")
async def listar_paises(store: ProcedureStore = Depends(get_store)):
    """Devuelve todos los países registrados."""
    return await store.execute("sp_ListarPaises")


@router.get(
    "/{id_pais}",
    summary="Obtener país por ID",
    responses={404: {"description": NO_ENCONTRADO}},
)
async def obtener_pais(id_pais: UUID, store: ProcedureStore = Depends(get_store)):
    return await obtener_o_404(store, "sp_ObtenerPaisPorId", NO_ENCONTRADO, id_pais=id_pais)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear país")
async def crear_pais(body: PaisIn, store: ProcedureStore = Depends(get_store)):
    """Crea un país y devuelve su `id_pais`."""
    return await crear(store, "sp_CrearPais", "id_pais", **body.model_dump())


@router.put("/{id_pais}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar país")
async def actualizar_pais(id_pais: UUID, body: PaisIn, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerPaisPorId", NO_ENCONTRADO, id_pais=id_pais)
    await store.execute("sp_ActualizarPais", id_pais=id_pais, **body.model_dump())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_pais}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar país")
async def eliminar_pais(id_pais: UUID, store: ProcedureStore = Depends(get_store)):
    await asegurar_existe(store, "sp_ObtenerPaisPorId", NO_ENCONTRADO, id_pais=id_pais)
    await store.execute("sp_EliminarPais", id_pais=id_pais)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
