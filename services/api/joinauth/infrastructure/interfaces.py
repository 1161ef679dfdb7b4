from abc import ABC, abstractmethod
import typing as t

SessionType = t.TypeVar("SessionType")
F = t.TypeVar("F", bound=t.Callable[..., t.Any])


class StorageManagerInterface(t.Generic[SessionType], ABC):
    """Owns the connection pool of a storage backend for the whole process lifetime"""

    @abstractmethod
    def session(self, **kwargs) -> t.AsyncContextManager[SessionType]:
        '''async with manager.session() as session. Rolls back on error, always closes.'''

    @abstractmethod
    async def close(self) -> None: ...

    @abstractmethod
    async def wait_for_startup(self, attempts: int = 5, interval_sec: int = 5) -> None:
        '''Blocks until the backend answers or raises StorageBootError'''

    @abstractmethod
    async def initialize_data_structures(self) -> None:
        '''Creates missing tables. Never drops anything.'''

    @abstractmethod
    async def flush_data(self) -> None: ...


class IUnitOfWork(t.Generic[SessionType], ABC):
    """One transaction per request. Repositories only flush, the unit of work commits."""

    @property
    @abstractmethod
    def session(self) -> SessionType: ...

    @abstractmethod
    async def commit(self) -> None: ...

    @abstractmethod
    async def rollback(self) -> None: ...


class ITracer(ABC):
    @staticmethod
    @abstractmethod
    def start_span(name: str) -> t.ContextManager[t.Any]: ...

    @staticmethod
    @abstractmethod
    def traced(func: F) -> F:
        '''Wraps a sync or async callable in a span named after it'''
