from fastapi import Depends
from fastapi.security import APIKeyHeader
import typing as t

import joinauth.infrastructure.dependencies as ideps
import joinauth.application.services as services
import joinauth.application.models as mapp


async def get_auth_service(user_repo: ideps.UserRepoDependency, hasher: ideps.PasswordHasherDependency, config: ideps.ConfigDependency):
    strategy = ideps.AuthStrategyType(
        user_repo,
        hasher,
        jwt_secret=config.JWT_SECRET,
        admin_id=config.ADMIN_ID,
        access_expires_mins=config.ACCESS_TOKEN_EXPIRE_MINUTES,
        algorithm=config.ALGORITHM,
    )
    return services.TokenAuthService(strategy)

async def get_join_code_service(join_code_repo: ideps.JoinCodeRepoDependency, mail_sender: ideps.MailSenderDependency, uow: ideps.UoWDependency, config: ideps.ConfigDependency):
    return services.JoinCodeService(join_code_repo, mail_sender, uow, code_length=config.JOIN_CODE_LENGTH)

JoinCodeServiceDependency = t.Annotated[services.JoinCodeService, Depends(get_join_code_service)]

async def get_user_service(user_repo: ideps.UserRepoDependency, join_code_service: JoinCodeServiceDependency, hasher: ideps.PasswordHasherDependency, uow: ideps.UoWDependency):
    return services.UserService(user_repo, join_code_service, hasher, uow)

UserServiceDependency = t.Annotated[services.UserService, Depends(get_user_service)]
AuthServiceDependency = t.Annotated[services.TokenAuthService, Depends(get_auth_service)]

#Raw "Authorization: <scheme> <token>" header. Scheme is not enforced.
AuthorizationHeader = t.Annotated[str | None, Depends(APIKeyHeader(name='Authorization', auto_error=False))]


async def get_current_identity(authorization: AuthorizationHeader, auth_service: AuthServiceDependency) -> mapp.VerifiedIdentity:
    return await auth_service.authenticate({"authorization": authorization})

CurrentIdentityDependency = t.Annotated[mapp.VerifiedIdentity, Depends(get_current_identity)]


async def get_admin_identity(identity: CurrentIdentityDependency, auth_service: AuthServiceDependency) -> mapp.VerifiedIdentity:
    return auth_service.require_admin(identity)

AdminIdentityDependency = t.Annotated[mapp.VerifiedIdentity, Depends(get_admin_identity)]
