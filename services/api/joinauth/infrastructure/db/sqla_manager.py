import joinauth.infrastructure.exceptions as exc
import joinauth.infrastructure.interfaces as iabc

import typing as t
import sqlmodel as sqlm

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

import asyncio
import contextlib
import logging

logger = logging.getLogger('joinauth.storage')


class SQLAlchemySessionManager(iabc.StorageManagerInterface[AsyncSession]):
    """Process-wide async engine plus a session factory.

    Any SQLAlchemy async URL works: sqlite+aiosqlite for local runs and tests,
    mysql+aiomysql in deployments. Once closed, the manager can not be reused.
    """

    def __init__(self, host: str, engine_kwargs: dict[str, t.Any] | None = None):
        self._engine: AsyncEngine | None = create_async_engine(host, **(engine_kwargs or {}))
        self._sessionmaker = async_sessionmaker(bind=self._engine, expire_on_commit=False)

    def _require_engine(self) -> AsyncEngine:
        if self._engine is None:
            raise exc.StorageNotInitialzied("[DB Manager] Engine is disposed, the manager is closed")
        return self._engine

    @property
    def engine(self) -> AsyncEngine:
        return self._require_engine()

    async def close(self) -> None:
        engine = self._require_engine()
        self._engine, self._sessionmaker = None, None
        await engine.dispose()

    @contextlib.asynccontextmanager
    async def connect(self) -> t.AsyncIterator[AsyncConnection]:
        '''Raw connection in a transaction, committed on exit and rolled back on error'''
        async with self._require_engine().begin() as connection:
            yield connection

    @contextlib.asynccontextmanager
    async def session(self, **kwargs) -> t.AsyncIterator[AsyncSession]:
        '''kwargs build a one-off session (e.g. bound elsewhere) instead of using the factory'''
        self._require_engine()
        session = AsyncSession(expire_on_commit=False, **kwargs) if kwargs else self._sessionmaker()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def ping(self) -> None:
        async with self.session() as session:
            await session.execute(sqlm.text("SELECT 1"))

    async def wait_for_startup(self, attempts: int = 5, interval_sec: int = 5) -> None:
        for attempt in range(1, attempts + 1):
            try:
                await self.ping()
            except exc.StorageNotInitialzied:
                raise
            except Exception as e:
                logger.info(f"[WAIT FOR DB] Database is not ready yet ({attempt}/{attempts}): {e}")
                if attempt < attempts:
                    await asyncio.sleep(interval_sec)
            else:
                logger.info("[WAIT FOR DB] SELECT 1 answered, database is up")
                return
        logger.error(f"[WAIT FOR DB] Database is not available after {attempts} attempts")
        raise exc.StorageBootError(f"Database did not answer within {attempts} attempts")

    async def _run_on_metadata(self, operation: t.Callable[..., t.Any]) -> None:
        async with self.connect() as connection:
            await connection.run_sync(operation)

    async def initialize_data_structures(self) -> None:
        logger.info('[INIT DB] Creating missing tables...')
        await self._run_on_metadata(sqlm.SQLModel.metadata.create_all)

    async def flush_data(self) -> None:
        logger.info('[DB] Dropping all tables')
        await self._run_on_metadata(sqlm.SQLModel.metadata.drop_all)
