"""Endpoints para la gestión de usuarios del sistema."""
import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from app.api.endpoints.auth import protegido
from app.api.utils import asegurar_existe, crear, obtener_o_404
from app.core.procedures import ProcedureStore, get_store
from app.core.roles import POLITICA_ACCESO
from app.core.security import hash_password
from app.schemas.usuario import UsuarioCreate, UsuarioUpdate

logger = logging.getLogger(__name__)

NO_ENCONTRADO = "Usuario no encontrado"
_CAMPOS_OCULTOS = {"password_hash"}

router = APIRouter(prefix="/usuarios", tags=["usuarios"], **protegido(POLITICA_ACCESO["usuarios"]))


def _publico(fila: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fila.items() if k not in _CAMPOS_OCULTOS}


@router.get("", summary="Listar usuarios activos")
async def listar_usuarios(store: ProcedureStore = Depends(get_store)):
    """Devuelve los usuarios con estado Activo, sin el hash de contraseña."""
    return [_publico(f) for f in await store.execute("sp_ListarUsuariosActivos")]


@router.get("/{id_usuario}", summary="Obtener usuario por ID")
async def obtener_usuario(id_usuario: UUID, store: ProcedureStore = Depends(get_store)):
    return _publico(await obtener_o_404(store, "sp_ObtenerUsuario", NO_ENCONTRADO, id_usuario=id_usuario))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Crear usuario",
    responses={400: {"description": "Datos inválidos o username duplicado"}},
)
async def crear_usuario(body: UsuarioCreate, store: ProcedureStore = Depends(get_store)):
    """Crea un usuario activo. La contraseña se almacena como hash bcrypt."""
    datos = body.model_dump(exclude={"password"})
    datos["rol"] = body.rol.value
    resultado = await crear(
        store, "sp_CrearUsuario", "id_usuario", password_hash=hash_password(body.password), **datos
    )
    logger.info("Usuario creado", extra={"username": body.username, "rol": body.rol.value})
    return resultado


@router.put("/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT, summary="Actualizar usuario")
async def actualizar_usuario(id_usuario: UUID, body: UsuarioUpdate, store: ProcedureStore = Depends(get_store)):
    """
    Actualiza los datos del usuario. Si se envía `password` se reemplaza el hash;
    si no, se conserva el actual. Los tokens ya emitidos no se invalidan.
    """
    await asegurar_existe(store, "sp_ObtenerUsuario", NO_ENCONTRADO, id_usuario=id_usuario)
    datos = body.model_dump(exclude={"password"})
    datos["rol"] = body.rol.value
    password_hash = hash_password(body.password) if body.password else None
    await store.execute("sp_ActualizarUsuario", id_usuario=id_usuario, password_hash=password_hash, **datos)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id_usuario}", status_code=status.HTTP_204_NO_CONTENT, summary="Desactivar usuario")
async def desactivar_usuario(id_usuario: UUID, store: ProcedureStore = Depends(get_store)):
    """Marca el usuario como Inactivo; no podrá volver a iniciar sesión."""
    await asegurar_existe(store, "sp_ObtenerUsuario", NO_ENCONTRADO, id_usuario=id_usuario)
    await store.execute("sp_DesactivarUsuario", id_usuario=id_usuario)
    logger.info("Usuario desactivado", extra={"id_usuario": str(id_usuario)})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
