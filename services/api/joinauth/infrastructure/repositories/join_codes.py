import joinauth.domain.repositories as repo
import joinauth.domain.models as domain
import joinauth.infrastructure.models as db

from sqlalchemy.ext.asyncio import AsyncSession
import sqlmodel as sqlm


class SQLAJoinCodeRepository(repo.IJoinCodeRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: str) -> domain.JoinCode | None:
        code = await self.session.get(db.JoinCode, key)
        return domain.JoinCode.model_validate(code, from_attributes=True) if code is not None else None

    async def create(self, join_code: domain.JoinCode) -> domain.JoinCode:
        code = db.JoinCode(**join_code.model_dump())
        #Same key issued twice replaces the stored row instead of failing
        code = await self.session.merge(code)
        await self.session.flush()
        return domain.JoinCode.model_validate(code, from_attributes=True)

    async def delete(self, key: str) -> bool:
        result = await self.session.execute(sqlm.delete(db.JoinCode).where(db.JoinCode.key == key))
        await self.session.flush()
        return result.rowcount > 0
