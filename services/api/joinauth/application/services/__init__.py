from .auth import AuthService, TokenAuthService, LoginMixin
from .join_codes import JoinCodeService
from .users import UserService
