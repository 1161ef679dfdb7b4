from joinauth.domain.services import IPasswordHasher, IPasswordHasherAsync
import asyncio
import bcrypt


class BCryptHasher(IPasswordHasher):
    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, TypeError, AttributeError):
            #Malformed hash or non-string input is a mismatch, not an error
            return False


class AsyncHasher(IPasswordHasherAsync):
    '''bcrypt is CPU bound: every call is pushed to the default thread pool'''
    def __init__(self, sync_hasher: IPasswordHasher):
        self.sync_hasher = sync_hasher

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self.sync_hasher.hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.sync_hasher.verify, password, password_hash)
