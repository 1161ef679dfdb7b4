import pytest, typing as t
import pytest_asyncio as pytestaio
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import AsyncSession
import joinauth.infrastructure.dependencies as ideps
from joinauth.common.config import AppConfig

import logging
logger = logging.getLogger('joinauth')

ADMIN_ID = 'admin-identity-key'
ADMIN_PASSWORD = 'admin-password'
JWT_SECRET = 'test-jwt-secret-which-is-long-enough-for-hs256'
TEST_DB_URL = 'sqlite+aiosqlite://'
#One in-memory database shared by every session of a test
TEST_DB_KWARGS = {'poolclass': StaticPool, 'connect_args': {'check_same_thread': False}}


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        JWT_SECRET=JWT_SECRET,
        ADMIN_ID=ADMIN_ID,
        DEFAULT_ADMIN_PASSWORD=ADMIN_PASSWORD,
        DEFAULT_ADMIN_EMAIL='admin@example.com',
        DB_URL=TEST_DB_URL,
        DB_WAIT_MAX_RETRIES=1,
        DB_WAIT_INTERVAL_SECONDS=0,
        BCRYPT_ROUNDS=4,
    )


@pytestaio.fixture
async def database_manager() -> t.AsyncGenerator[ideps.DatabaseManagerType, None]:
    mgr = ideps.DatabaseManagerType(TEST_DB_URL, TEST_DB_KWARGS)
    await mgr.initialize_data_structures()
    yield mgr
    await mgr.close()


@pytestaio.fixture
async def db_session(database_manager: ideps.DatabaseManagerType) -> t.AsyncGenerator[AsyncSession, None]:
    async with database_manager.session() as session:
        yield session


@pytestaio.fixture
async def uow(db_session: AsyncSession) -> t.AsyncIterator[ideps.UnitOfWork]:
    yield ideps.UnitOfWork(db_session)
