from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    async_sessionmaker,
)
from sqlalchemy.engine import make_url
from sqlalchemy.pool import AsyncAdaptedQueuePool

from brokerage.core.config import settings

# Blocking driver for Alembic; psycopg2-binary is a declared dependency
SYNC_DRIVER = "postgresql+psycopg2"

# Async engine with connection pooling (QueuePool for production)
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    future=True,
    poolclass=AsyncAdaptedQueuePool,
    pool_size=10,
    max_overflow=20,
    pool_pre_ping=True,
)

# Async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    future=True,
)


async def get_db():
    """Dependency for FastAPI routes to get async session."""
    async with AsyncSessionLocal() as session:
        yield session


def sync_database_url(url: str) -> str:
    """Rewrite an async PostgreSQL URL to use the blocking psycopg2 driver.

    Credentials, host, port, database and query options are kept.
    """
    return make_url(url).set(drivername=SYNC_DRIVER).render_as_string(
        hide_password=False
    )
