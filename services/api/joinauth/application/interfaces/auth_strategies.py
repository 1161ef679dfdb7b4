from abc import ABC, abstractmethod
from joinauth.domain.services import IPasswordHasherAsync
import joinauth.application.models as mapp
import typing as t


class IAuthStrategy(ABC):
    @abstractmethod
    async def authenticate(self, credentials: dict) -> mapp.VerifiedIdentity:
        """Takes in credentials, validates them and does not create a session. Returns a verified identity."""

    @abstractmethod
    def is_admin(self, subject: str) -> bool:
        """Tells whether the subject is the configured admin principal"""


class ILoginMixin(ABC):
    @abstractmethod
    async def login(self, credentials: dict) -> t.Any:
        """Validate credentials and grant access"""


class IPasswordMixin(ABC):
    @property
    @abstractmethod
    def hasher(self) -> IPasswordHasherAsync:
        """Hasher that login checks passwords with"""


class ITokenMixin(ABC):
    @abstractmethod
    def issue(self, subject: str) -> tuple[str, float]:
        """Returns a signed token and its expiration timestamp"""

    @abstractmethod
    def verify(self, token: str | None) -> mapp.TokenVerification:
        """Classifies a token. Must not raise."""
