from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Blocking one-way password hashing. Every hash carries its own salt."""

    @abstractmethod
    def hash(self, password: str) -> str: ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        '''False for a wrong password and for a hash that can not be parsed'''


class IPasswordHasherAsync(ABC):
    """Same contract as IPasswordHasher, awaited from request handlers"""

    @abstractmethod
    async def hash(self, password: str) -> str: ...

    @abstractmethod
    async def verify(self, password: str, password_hash: str) -> bool: ...
