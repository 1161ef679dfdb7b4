import joinauth.application.interfaces as iapp
import joinauth.application.exceptions as appexc
import joinauth.application.models as mapp
import typing as t
import logging

logger = logging.getLogger('joinauth')

TLoginReturn = t.TypeVar("TLoginReturn")


class AuthService:
    def __init__(self, auth_strategy: iapp.IAuthStrategy):
        self.auth_strategy = auth_strategy

    async def authenticate(self, credentials: dict) -> mapp.VerifiedIdentity:
        return await self.auth_strategy.authenticate(credentials)

    def require_admin(self, identity: mapp.VerifiedIdentity) -> mapp.VerifiedIdentity:
        '''Admin check on top of an already verified identity'''
        if not self.auth_strategy.is_admin(identity.subject):
            logger.info(f'[AUTH] Subject {identity.subject} tried to reach an admin-only resource')
            raise appexc.NotAdminException("Subject is not the admin principal")
        return identity


class LoginMixin(t.Generic[TLoginReturn]):
    async def login(self, credentials: dict) -> TLoginReturn:
        return await self.auth_strategy.login(credentials)


class TokenAuthService(
    AuthService,
    LoginMixin[mapp.LoginResult],
):
    """Stateless JWT auth: login, verification and the admin predicate."""
