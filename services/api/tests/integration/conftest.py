import pytest, httpx
import pytest_asyncio as pytestaio
from fastapi import FastAPI
from joinauth.common.config import AppConfig
from joinauth.presentation.app import create_app, bootstrap_storage
import joinauth.infrastructure.dependencies as ideps
import tests.mocks as m


@pytest.fixture
def mail_sender() -> m.FakeMailSender:
    return m.FakeMailSender()

@pytest.fixture
def hasher() -> m.AsyncHasherAdapter:
    return m.AsyncHasherAdapter(m.FakeHasher())


@pytestaio.fixture
async def app(config: AppConfig, database_manager: ideps.DatabaseManagerType, hasher, mail_sender) -> FastAPI:
    #ASGITransport does not run the lifespan, storage is bootstrapped by hand
    app = create_app(config=config, database_manager=database_manager, password_hasher=hasher, mail_sender=mail_sender)
    await bootstrap_storage(app)
    return app


@pytestaio.fixture
async def async_client(app: FastAPI):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://app:8000") as client:
        yield client
