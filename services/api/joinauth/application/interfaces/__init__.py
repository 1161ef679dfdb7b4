from .auth_strategies import IAuthStrategy, ILoginMixin, IPasswordMixin, ITokenMixin
from .mail import IMailSender
