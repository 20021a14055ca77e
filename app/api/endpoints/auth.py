"""Endpoint de login y dependencias para proteger rutas."""
from collections.abc import Collection
from typing import Any, Callable, Coroutine

from fastapi import APIRouter, Depends, Request, Response
from fastapi.routing import APIRoute
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.auth import Autenticador, autorizar
from app.core.procedures import ProcedureStore, get_store
from app.core.security import Principal, TokenService
from app.schemas.auth import LoginRequest, LoginResponse, UsuarioToken
from app.services.auth_service import LoginService

router = APIRouter(tags=["auth"])
# Solo documenta el esquema en OpenAPI; el header se valida en Autenticador
security = HTTPBearer(auto_error=False)


def _ip(request: Request) -> str | None:
    return request.client.host if request.client else None


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_autenticador(request: Request) -> Autenticador:
    return request.app.state.autenticador


def get_login_service(
    store: ProcedureStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
) -> LoginService:
    return LoginService(store, tokens)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Iniciar sesión",
    response_description="Token JWT y datos básicos del usuario",
    responses={
        200: {"description": "Login correcto"},
        400: {"description": "Datos de entrada inválidos"},
        401: {"description": "Invalid credentials"},
        403: {"description": "User account is inactive"},
    },
)
async def login(
    data: LoginRequest,
    request: Request,
    service: LoginService = Depends(get_login_service),
):
    """
    Autenticación con **username** y **password**.
    Usa el token devuelto en el header `Authorization: Bearer <token>`.
    """
    resultado = await service.login(data.username, data.password, ip=_ip(request))
    return LoginResponse(
        token=resultado.token.token,
        expires_at=resultado.token.expires_at,
        user=UsuarioToken(**resultado.principal.claims()),
    )


async def get_current_user(
    request: Request,
    _: HTTPAuthorizationCredentials | None = Depends(security),
    autenticador: Autenticador = Depends(get_autenticador),
) -> Principal:
    """Dependencia: identidad del JWT del request (``request.state.principal``).

    En routers protegidos la identidad ya la dejó ``RutaProtegida``; en otro caso
    se autentica aquí.
    """
    principal = getattr(request.state, "principal", None)
    if principal is None:
        principal = autenticador.autenticar(request.headers.get("Authorization"), ip=_ip(request))
        request.state.principal = principal
    return principal


def ruta_protegida(permitidos: Collection[str] | None) -> type[APIRoute]:
    """Clase de ruta que autentica y aplica el control de rol antes de leer el body.

    Así un request sin token (o con rol no permitido) recibe 401/403 aunque su
    body sea inválido.
    """

    class RutaProtegida(APIRoute):
        roles_permitidos = permitidos

        def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
            manejador = super().get_route_handler()

            async def _controlar_acceso(request: Request) -> Response:
                principal = get_autenticador(request).autenticar(
                    request.headers.get("Authorization"), ip=_ip(request)
                )
                request.state.principal = autorizar(principal, permitidos)
                return await manejador(request)

            return _controlar_acceso

    return RutaProtegida


def protegido(permitidos: Collection[str] | None) -> dict[str, Any]:
    """Argumentos de ``APIRouter`` para un grupo de rutas protegido.

    ``route_class`` hace el control de acceso; la dependencia documenta el
    esquema Bearer en OpenAPI.
    """
    return {"route_class": ruta_protegida(permitidos), "dependencies": [Depends(get_current_user)]}
