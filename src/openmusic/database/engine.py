import logging
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession, create_async_engine, AsyncEngine

from .models import Base

logger = logging.getLogger(__name__)

def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Creates the async engine (and its connection pool) that every repository shares

    Args:
        database_url (str): An async SQLAlchemy url, e.g. `sqlite+aiosqlite:///openmusic.db`
        echo (bool): Whether or not sqlalchemy should echo every statement

    Returns:
        AsyncEngine: The new engine
    """
    engine = create_async_engine(database_url, echo=echo)

    # sqlite only honours ON DELETE CASCADE when foreign keys are switched on for each connection
    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    logger.debug(f"Created database engine for dialect: {engine.dialect.name}")
    return engine

def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """returns the session factory that is handed to every repository, each call checks a connection out of the pool"""
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)

async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(lambda sync_conn: Base.metadata.create_all(sync_conn))

async def drop_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(lambda sync_conn: Base.metadata.drop_all(sync_conn))
