"""Routers de la API."""
from fastapi import APIRouter, Depends

from app.api.endpoints import (
    calendarios,
    centros,
    citas,
    lotes,
    ninos,
    paises,
    reportes,
    tutores,
    usuarios,
    vacunaciones,
    vacunas,
)
from app.api.endpoints.auth import get_current_user, get_login_service, protegido
from app.core.security import Principal
from app.schemas.auth import CambiarContrasenaRequest, UsuarioToken
from app.services.auth_service import LoginService

router = APIRouter()
# Login está en endpoints/auth.py y se monta en la raíz (/login)
router.include_router(paises.router)
router.include_router(vacunas.router)
router.include_router(ninos.router)
router.include_router(tutores.router)
router.include_router(centros.router)
router.include_router(lotes.router)
router.include_router(citas.router)
router.include_router(vacunaciones.router)
router.include_router(calendarios.router)
router.include_router(reportes.router)
router.include_router(usuarios.router)

# Cuenta propia: basta con estar autenticado
cuenta = APIRouter(tags=["api"], **protegido(None))


@cuenta.get(
    "/me",
    response_model=UsuarioToken,
    summary="Usuario actual (protegido)",
    responses={
        200: {"description": "Identidad contenida en el token"},
        401: {"description": "Token no enviado, inválido o expirado"},
    },
)
async def get_me(current_user: Principal = Depends(get_current_user)):
    """
    Devuelve la identidad del token (user_id, username, role).
    **Requiere:** header `Authorization: Bearer <token>`.
    """
    return UsuarioToken(**current_user.claims())


@cuenta.post(
    "/me/cambiar-contrasena",
    summary="Cambiar contraseña propia",
    responses={
        200: {"description": "Contraseña actualizada correctamente"},
        401: {"description": "Token inválido o contraseña actual incorrecta"},
    },
)
async def cambiar_contrasena(
    body: CambiarContrasenaRequest,
    current_user: Principal = Depends(get_current_user),
    service: LoginService = Depends(get_login_service),
):
    """
    Cambia la contraseña del usuario autenticado; requiere la contraseña actual.
    Los tokens emitidos antes del cambio siguen siendo válidos hasta expirar.
    """
    await service.cambiar_contrasena(current_user, body.contrasena_actual, body.contrasena_nueva)
    return {"message": "Contraseña actualizada correctamente"}


router.include_router(cuenta)


@router.get(
    "/",
    tags=["api"],
    summary="Raíz de la API",
    response_description="Mensaje de bienvenida y enlace a la documentación",
)
async def api_root():
    """Información básica de la API y enlace a la documentación Swagger."""
    return {"message": "Sistema de Vacunación API", "docs": "/docs", "redoc": "/redoc"}
