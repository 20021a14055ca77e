"""Punto de entrada de la aplicación FastAPI."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import router as api_router
from app.api.endpoints import auth
from app.core.auth import Autenticador
from app.core.config import Settings, settings
from app.core.database import dispose_db
from app.core.errors import register_exception_handlers
from app.core.logs import setup_logging
from app.core.security import TokenService, preparar_senuelo

logger = logging.getLogger(__name__)

# Documentación Swagger: disponible en /docs (OpenAPI 3.0)
OPENAPI_TAGS = [
    {"name": "auth", "description": "Login con username y contraseña. Devuelve un JWT para las rutas protegidas."},
    {"name": "api", "description": "Datos de la cuenta autenticada."},
    {"name": "paises", "description": "Catálogo de países."},
    {"name": "vacunas", "description": "Catálogo de vacunas."},
    {"name": "ninos", "description": "Niños registrados en el programa."},
    {"name": "tutores", "description": "Madres, padres y tutores legales."},
    {"name": "centros", "description": "Centros de vacunación. Solo director y administrador."},
    {"name": "lotes-vacunas", "description": "Lotes de vacunas por centro. Solo director y administrador."},
    {"name": "citas", "description": "Citas de vacunación."},
    {"name": "vacunaciones", "description": "Dosis aplicadas (historial de vacunación)."},
    {"name": "calendarios-nacionales", "description": "Calendarios nacionales de vacunación."},
    {"name": "reportes", "description": "Cobertura y esquemas incompletos por centro."},
    {"name": "usuarios", "description": "Gestión de usuarios. Solo administrador."},
    {"name": "salud", "description": "Comprobación del estado del servicio."},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestiona el ciclo de vida: inicio y cierre de la aplicación."""
    config: Settings = app.state.settings
    # Sin secreto de firma la aplicación no arranca (ConfigurationError)
    tokens = TokenService(
        config.jwt_secret_key,
        algorithm=config.jwt_algorithm,
        expire_minutes=config.jwt_expire_minutes,
        logger=logging.getLogger("app.tokens"),
    )
    app.state.token_service = tokens
    app.state.autenticador = Autenticador(tokens, logger=logging.getLogger("app.auditoria"))
    # El primer login con usuario inexistente no debe pagar el hash señuelo
    preparar_senuelo()
    logger.info("Aplicación iniciada", extra={"expiracion_token_min": config.jwt_expire_minutes})
    yield
    await dispose_db()


def create_app(config: Settings | None = None) -> FastAPI:
    """Construye la aplicación con la configuración indicada (o la global)."""
    config = config or settings
    setup_logging(config.log_level, config.log_json)

    app = FastAPI(
        title=config.app_name,
        description="""
API REST del **programa de vacunación infantil**: niños, tutores, centros, vacunas,
lotes, citas, vacunaciones, calendarios nacionales y países.

## Autenticación

1. Obtén un token con **POST /login** (username y password).
2. En Swagger UI, clic en **Authorize** y pega solo el token.
3. Las rutas bajo `/api` exigen `Authorization: Bearer <token>`; algunas además exigen rol.
""",
        version="1.0.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        swagger_ui_parameters={"persistAuthorization": True},
    )
    app.state.settings = config

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(api_router, prefix="/api")

    @app.get(
        "/health",
        tags=["salud"],
        summary="Estado del servicio",
        response_description="Indica que la API está en ejecución",
    )
    async def health_check():
        """Comprueba que el servicio está activo. No requiere autenticación."""
        return {"status": "ok", "message": "Servicio en ejecución"}

    return app


app = create_app()
