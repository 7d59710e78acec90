"""
Engine and session factory for the parking store.

SQLite (aiosqlite) in development and tests; any async SQLAlchemy URL otherwise.
"""
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from parking.db.models import Base
from parking.config import settings
import logging

logger = logging.getLogger(__name__)

engine = None
async_session_maker = None


def create_engine_for_url(database_url: str):
    """Create an async engine with settings appropriate for the database type."""
    if database_url.startswith("sqlite"):
        # One shared connection - required for :memory: databases
        return create_async_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,   # Recycle connections after 1 hour
    )


async def init_db(database_url: str = None):
    """Open the engine for database_url (or settings) and create missing tables."""
    global engine, async_session_maker

    database_url = database_url or settings.database_url
    logger.info(f"Opening parking store: {database_url.split('://')[0]}")

    engine = create_engine_for_url(database_url)
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("✅ Parking store ready")


async def get_db_session() -> AsyncSession:
    """Request-scoped session: commits when the route returns, rolls back if it raises."""
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    async with async_session_maker() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        else:
            await session.commit()
        finally:
            await session.close()


async def close_db():
    """Dispose of the engine; init_db must run again before the next session."""
    global engine, async_session_maker
    if engine:
        await engine.dispose()
        engine = None
        async_session_maker = None
        logger.info("Database connection closed")
