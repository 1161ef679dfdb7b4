from fastapi import Depends, Request
import typing as t

from joinauth.common.config import AppConfig
from joinauth.infrastructure.db import SQLAlchemySessionManager, SQLAlchemyUnitOfWork
import joinauth.infrastructure.repositories as repos
import joinauth.infrastructure.security as security
import joinauth.infrastructure.mail as mail
import joinauth.application.interfaces as iapp
import joinauth.domain.services as domsvc

from sqlalchemy.ext.asyncio import AsyncSession


#Auth infrastructure choices
AuthStrategyType = security.JWTAuthStrategy

_PasswordHasherType = security.BCryptHasher
def PasswordHasherType(rounds: int = 10) -> domsvc.IPasswordHasherAsync:
    return security.AsyncHasher(_PasswordHasherType(rounds=rounds))

MailSenderType = mail.SMTPMailSender

def build_mail_sender(config: AppConfig) -> iapp.IMailSender:
    return MailSenderType(
        host=config.EMAIL_HOST,
        port=config.EMAIL_PORT,
        username=config.EMAIL_USERNAME,
        password=config.EMAIL_PASSWORD,
        verify_certs=config.EMAIL_VERIFY_CERTS,
    )


#####################################
#      Process-wide components      #
#####################################
#Built once in create_app and kept on app.state

def get_config(request: Request) -> AppConfig:
    return request.app.state.config

def get_database_manager(request: Request) -> SQLAlchemySessionManager:
    return request.app.state.database_manager

def get_password_hasher(request: Request) -> domsvc.IPasswordHasherAsync:
    return request.app.state.password_hasher

def get_mail_sender(request: Request) -> iapp.IMailSender:
    return request.app.state.mail_sender

ConfigDependency = t.Annotated[AppConfig, Depends(get_config)]
DatabaseManagerDependency = t.Annotated[SQLAlchemySessionManager, Depends(get_database_manager)]
PasswordHasherDependency = t.Annotated[domsvc.IPasswordHasherAsync, Depends(get_password_hasher)]
MailSenderDependency = t.Annotated[iapp.IMailSender, Depends(get_mail_sender)]


#####################################
#        Per-request storage        #
#####################################

DatabaseManagerType = SQLAlchemySessionManager
DatabaseSessionType = AsyncSession
UnitOfWork = SQLAlchemyUnitOfWork

async def get_db_session(manager: DatabaseManagerDependency):
    async with manager.session() as session:
        yield session

DatabaseDependency = t.Annotated[DatabaseSessionType, Depends(get_db_session)]

async def get_uow(session: DatabaseDependency) -> UnitOfWork:
    #Services commit explicitly. Anything left uncommitted is discarded when the session closes.
    return UnitOfWork(session)

UoWDependency = t.Annotated[UnitOfWork, Depends(get_uow)]



#####################################
#            Repositories           #
#####################################

UserRepository = repos.SQLAUserRepository
JoinCodeRepository = repos.SQLAJoinCodeRepository

async def get_user_repo(uow: UoWDependency):
    return UserRepository(uow.session)

async def get_join_code_repo(uow: UoWDependency):
    return JoinCodeRepository(uow.session)


UserRepoDependency = t.Annotated[UserRepository, Depends(get_user_repo)]
JoinCodeRepoDependency = t.Annotated[JoinCodeRepository, Depends(get_join_code_repo)]
