"""Configuración de la aplicación mediante variables de entorno."""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración cargada desde .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Sistema de Vacunación API"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # JWT (sin valor por defecto: la app no arranca sin secreto)
    jwt_secret_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("jwt_secret_key", "jwt_secret"),
    )
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Errores numerados lanzados por los procedimientos almacenados
    domain_error_min: int = 50000
    domain_error_max: int = 50999

    # PostgreSQL
    postgres_host: str = "127.0.0.1"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = ""
    postgres_db: str = "sistema_vacunacion"
    db_pool_size: int = 5
    db_max_overflow: int = 10

    @property
    def database_url_async(self) -> str:
        """URL para SQLAlchemy con driver asyncpg (uso en la app)."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    def es_error_de_dominio(self, numero: int | None) -> bool:
        """Indica si un número de error del almacén es una regla de negocio."""
        return numero is not None and self.domain_error_min <= numero <= self.domain_error_max


settings = Settings()
