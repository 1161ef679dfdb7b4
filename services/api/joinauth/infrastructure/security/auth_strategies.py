import joinauth.application.interfaces as iapp
import joinauth.application.exceptions as appexc
import joinauth.application.models as mapp
import joinauth.domain.repositories as repos
import joinauth.domain.exceptions as domexc
import joinauth.domain.services as domsvc

from joinauth.infrastructure.telemetry.traces import TracerType

import typing as t
import jwt, datetime as dt, logging

logger = logging.getLogger('joinauth')


def extract_token(authorization: t.Optional[str]) -> tuple[t.Optional[str], t.Optional[mapp.TokenStatus]]:
    '''Splits "<scheme> <token>". Any scheme is accepted, only the token part matters.
    Returns (token, None) on success or (None, failure status).'''
    if not authorization or not authorization.strip():
        return None, mapp.TokenStatus.MISSING
    parts = authorization.split()
    if len(parts) != 2:
        return None, mapp.TokenStatus.MALFORMED
    return parts[1], None


class JWTAuthStrategy(iapp.IAuthStrategy, iapp.ITokenMixin, iapp.IPasswordMixin, iapp.ILoginMixin):
    """Stateless JWT auth. One verification routine serves both the user and the admin gate."""

    def __init__(
        self,
        user_repo: t.Optional[repos.IUserRepository],
        password_hasher: domsvc.IPasswordHasherAsync,
        *,
        jwt_secret: str,
        admin_id: str,
        access_expires_mins: int = 60,
        algorithm: str = "HS256",
    ):
        if not jwt_secret:
            raise ValueError("JWT secret must not be empty")
        self.user_repo = user_repo
        self._hasher = password_hasher
        self.jwt_secret = jwt_secret
        self.admin_id = admin_id
        self.access_expires_mins = access_expires_mins
        self.algorithm = algorithm

    @property
    def hasher(self) -> domsvc.IPasswordHasherAsync:
        return self._hasher

    def is_admin(self, subject: str) -> bool:
        return subject is not None and subject == self.admin_id

    @TracerType.traced
    def issue(self, subject: str, now: t.Optional[dt.datetime] = None) -> tuple[str, float]:
        issued_at = now or dt.datetime.now(dt.timezone.utc)
        expiration_time = issued_at + dt.timedelta(minutes=self.access_expires_mins)
        payload = {"sub": subject, "iat": int(issued_at.timestamp()), "exp": int(expiration_time.timestamp())}
        return jwt.encode(payload, self.jwt_secret, algorithm=self.algorithm), float(payload["exp"])

    def verify(self, token: t.Optional[str]) -> mapp.TokenVerification:
        if not token:
            return mapp.TokenVerification(status=mapp.TokenStatus.MISSING)
        try:
            data = jwt.decode(
                token, self.jwt_secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            return mapp.TokenVerification(status=mapp.TokenStatus.EXPIRED)
        except jwt.InvalidSignatureError:
            return mapp.TokenVerification(status=mapp.TokenStatus.INVALID_SIGNATURE)
        except jwt.InvalidTokenError:
            return mapp.TokenVerification(status=mapp.TokenStatus.MALFORMED)
        return mapp.TokenVerification(status=mapp.TokenStatus.VALID, subject=data["sub"])

    def verify_header(self, authorization: t.Optional[str]) -> mapp.TokenVerification:
        token, failure = extract_token(authorization)
        if failure:
            return mapp.TokenVerification(status=failure)
        return self.verify(token)

    async def authenticate(self, credentials: dict) -> mapp.VerifiedIdentity:
        result = self.verify_header(credentials.get('authorization'))
        match result.status:
            case mapp.TokenStatus.VALID:
                return mapp.VerifiedIdentity(subject=result.subject, is_admin=self.is_admin(result.subject))
            case mapp.TokenStatus.MISSING:
                raise appexc.TokenMissingException("Token is missing")
            case mapp.TokenStatus.EXPIRED:
                raise appexc.TokenExpiredException("Token expired")
            case _:
                raise appexc.CredentialsException(f"Token rejected: {result.status.value}")

    async def login(self, credentials: dict) -> mapp.LoginResult:
        username = credentials.get('username')
        password = credentials.get('password')

        if not (username and password):
            raise appexc.InvalidCredentials("Field missing! Both username and password must be provided.")

        user = await self.user_repo.get_by_username(username)
        if not user:
            raise domexc.UserDoesNotExist("User not found")

        with TracerType.start_span('login_password_verifying'):
            if not await user.check_password(password, self.hasher):
                raise appexc.InvalidCredentials("Invalid credentials")

        token, expires = self.issue(user.id)
        logger.info(f'[AUTH] User id={user.id} logged in')
        return mapp.LoginResult(token=token, expires=expires, is_admin=self.is_admin(user.id))
