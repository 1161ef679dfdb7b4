from abc import abstractmethod, ABC
import joinauth.domain.models.users as domain
import joinauth.domain.services as domsvc


class IUserRepository(ABC):
    """User storage. Writes are flushed, never committed: the unit of work owns the transaction.
    Lookups return None for a missing user, they do not raise."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> domain.User | None: ...

    @abstractmethod
    async def get_by_username(self, username: str) -> domain.User | None: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> domain.User | None: ...

    @abstractmethod
    async def list(self, exclude_usernames: tuple[str, ...] = ()) -> list[domain.User]:
        '''Every user in store order, minus the given usernames'''

    @abstractmethod
    async def create(self, user: domain.User) -> domain.User:
        '''Returns the stored user with its generated id. Raises UserAlreadyExists on a taken email/username/id.'''

    @abstractmethod
    async def update(self, user: domain.User) -> domain.User:
        '''Raises UserDoesNotExist, UserAlreadyExists or VersionError'''

    @abstractmethod
    async def delete(self, user: domain.User) -> None: ...

    @abstractmethod
    async def ensure_admin_exists(self, admin_id: str, username: str, email: str, password: str, hasher: domsvc.IPasswordHasherAsync) -> None:
        '''Creates the admin account under admin_id unless a user with that id exists'''
