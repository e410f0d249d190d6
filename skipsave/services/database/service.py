from contextlib import asynccontextmanager
from typing import AsyncGenerator

from loguru import logger
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from skipsave.services.base import Service
from skipsave.services.settings.service import SettingsService


class DatabaseService(Service):
    name = "database_service"

    def __init__(self, settings_service: SettingsService):
        self.settings_service = settings_service
        self.database_url = settings_service.settings.database_url
        self.engine = self._create_engine()

    def _create_engine(self) -> AsyncEngine:
        settings = self.settings_service.settings
        if settings.is_sqlite:
            engine = create_async_engine(self.database_url, echo=settings.db_connection_settings.get("echo", False))
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
            return engine
        return create_async_engine(self.database_url, **settings.db_connection_settings)

    @asynccontextmanager
    async def with_session(self) -> AsyncGenerator[AsyncSession, None]:
        async with AsyncSession(self.engine, expire_on_commit=False) as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def create_db_and_tables(self) -> None:
        # registers every table on SQLModel.metadata
        import skipsave.services.database.models  # noqa: F401

        logger.debug("Creating database tables")
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def teardown(self) -> None:
        logger.debug("Disposing database engine")
        await self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
