from abc import abstractmethod, ABC
import joinauth.domain.models.join_codes as domain


class IJoinCodeRepository(ABC):

    @abstractmethod
    async def get(self, key: str) -> domain.JoinCode | None: ...

    @abstractmethod
    async def create(self, join_code: domain.JoinCode) -> domain.JoinCode: ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        '''Returns True if a code was removed'''
