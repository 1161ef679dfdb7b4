#Fastapi/Asyncio
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

#Project files
from joinauth.common.config import AppConfig
import joinauth.application.interfaces as iapp
import joinauth.domain.services as domsvc
import joinauth.infrastructure.dependencies as ideps
import joinauth.infrastructure.telemetry.logs as logs
import joinauth.infrastructure.telemetry.metrics as metrics
import joinauth.infrastructure.telemetry as telemetry
import joinauth.presentation.routers as routers
from joinauth.presentation.exception_handlers import register_exception_handlers

#Logging
import logging
import loguru # type: ignore

logger = logging.getLogger('joinauth')


async def bootstrap_storage(app: FastAPI):
    '''Waits for the database, creates tables and makes sure the admin account exists'''
    config: AppConfig = app.state.config
    manager: ideps.DatabaseManagerType = app.state.database_manager

    await manager.wait_for_startup(attempts=config.DB_WAIT_MAX_RETRIES, interval_sec=config.DB_WAIT_INTERVAL_SECONDS)
    await manager.initialize_data_structures()

    if not config.DEFAULT_ADMIN_PASSWORD:
        logger.info('[APP: Startup] DEFAULT_ADMIN_PASSWORD is not set, skipping admin bootstrap')
        return

    async with manager.session() as session, ideps.UnitOfWork(session) as uow:
        user_repo = ideps.UserRepository(uow.session)
        await user_repo.ensure_admin_exists(
            admin_id=config.ADMIN_ID,
            username=config.DEFAULT_ADMIN_USERNAME,
            email=config.DEFAULT_ADMIN_EMAIL,
            password=config.DEFAULT_ADMIN_PASSWORD,
            hasher=app.state.password_hasher,
        )
        await uow.commit()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f'[APP: Startup] Startup began...')
    await bootstrap_storage(app)
    logger.info(f'[APP: Startup] Startup finished!')
    yield
    await app.state.database_manager.close()
    logger.info(f'[APP: Shutdown] Storage closed')


def create_app(
        config: AppConfig | None = None,
        database_manager: ideps.DatabaseManagerType | None = None,
        password_hasher: domsvc.IPasswordHasherAsync | None = None,
        mail_sender: iapp.IMailSender | None = None,
    ) -> FastAPI:
    '''Builds the app. Every collaborator may be injected, the rest is derived from config.'''
    config = config or AppConfig.from_env()
    logs.init_loggers(json_logs=bool(config.JSON_LOGS), service=config.APP_NAME, env=config.MODE)

    app = FastAPI(
        title = f'{config.APP_NAME} commit {config.GIT_COMMIT}',
        swagger_ui_parameters={
            "defaultModelsExpandDepth": -1,
            "docExpansion": None,
            "displayRequestDuration":True
        },
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.database_manager = database_manager or ideps.DatabaseManagerType(config.DB_URL, config.DB_KWARGS)
    app.state.password_hasher = password_hasher or ideps.PasswordHasherType(config.BCRYPT_ROUNDS)
    app.state.mail_sender = mail_sender or ideps.build_mail_sender(config)

    app.include_router(routers.AuthRouter)
    app.include_router(routers.UserRouter)
    register_exception_handlers(app)
    metrics.register_middlewares(app)


    @app.get("/health", include_in_schema=False)
    async def read_root():
        """Indicates if the server is alive"""
        return {"status": "ok"}


    #Registered last, so it wraps everything else
    @app.middleware("http")
    async def add_logging_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            loguru.logger.exception(e)
            return JSONResponse(
                status_code=500,
                content={'detail':'Internal server error'}
            )


    if config.OTEL_ENABLED:
        telemetry.setup_opentelemetry(app, config, engine=app.state.database_manager.engine)
        logger.info('[APP] OpenTelemetry enabled')

    return app
