"""Pool de conexiones a PostgreSQL (SQLAlchemy 2.0 asíncrono).

El engine se construye al primer uso a partir de ``Settings``; así la
aplicación (y los tests con almacén falso) arrancan sin tocar la base.
"""
import logging
from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import Settings, settings

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_sesiones: async_sessionmaker[AsyncSession] | None = None


def configurar_db(config: Settings = settings) -> async_sessionmaker[AsyncSession]:
    """Crea el engine y la fábrica de sesiones si aún no existen."""
    global _engine, _sesiones
    if _sesiones is None:
        _engine = create_async_engine(
            config.database_url_async,
            echo=config.debug,
            pool_pre_ping=True,
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
        )
        _sesiones = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
        logger.info(
            "Pool de base de datos configurado",
            extra={
                "host": config.postgres_host,
                "database": config.postgres_db,
                "pool_size": config.db_pool_size,
            },
        )
    return _sesiones


async def get_db() -> AsyncIterator[AsyncSession]:
    """Sesión por request: commit al terminar, rollback si algo falla."""
    async with configurar_db()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def dispose_db() -> None:
    """Cierra el pool (si llegó a abrirse) al apagar la aplicación."""
    global _engine, _sesiones
    if _engine is not None:
        await _engine.dispose()
        logger.info("Pool de base de datos cerrado")
    _engine = None
    _sesiones = None
