import logging
from sqlalchemy.ext.asyncio import AsyncSession
import joinauth.infrastructure.interfaces as iabc

logger = logging.getLogger('joinauth.storage')


class SQLAlchemyUnitOfWork(iabc.IUnitOfWork[AsyncSession]):
    """Wraps a request session. Usable as `async with`, leaving the block with an error rolls back."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            logger.debug(f"[UoW] Rolling back after {exc_type.__name__}")
            await self.rollback()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
