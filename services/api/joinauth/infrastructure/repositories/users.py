import joinauth.domain.repositories as repo
import joinauth.domain.models as domain
import joinauth.domain.exceptions as domexc
import joinauth.domain.services as domsvc
import joinauth.infrastructure.models as db

from sqlalchemy.ext.asyncio import AsyncSession
import sqlalchemy.exc as sqlexc
import sqlmodel as sqlm
import typing as t
import logging

logger = logging.getLogger('joinauth.storage')

#Column names looked up in driver messages, in this order
UNIQUE_COLUMNS = ('email', 'username')


class SQLAUserRepository(repo.IUserRepository):
    """Users table over an AsyncSession.

    Only flushes, so a failed write surfaces immediately while the
    transaction stays open for the unit of work.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _flush_or_raise(self, statement: t.Any = None):
        '''Runs the statement (or a plain flush) and maps integrity violations to domain errors.

        SQLite says "UNIQUE constraint failed: users.email", MySQL says
        "Duplicate entry ... for key 'ix_users_email'", both name the column.
        '''
        try:
            if statement is None:
                await self.session.flush()
                return None
            return await self.session.execute(statement)
        except sqlexc.IntegrityError as e:
            await self.session.rollback()
            msg = str(e.orig).lower()
            taken = next((column for column in UNIQUE_COLUMNS if column in msg), None)
            if taken is None and ('users.id' in msg or 'primary' in msg):
                taken = 'id'
            if taken:
                raise domexc.UserAlreadyExists(f"Another user with this {taken} already exists", orig=e.orig) from e
            raise domexc.UserIntegrityError("Write violates a users table constraint", orig=e.orig) from e

    @staticmethod
    def _to_domain(user: db.User | None) -> domain.User | None:
        return domain.User.model_validate(user, from_attributes=True) if user is not None else None

    async def _select_one(self, column, value) -> db.User | None:
        return (await self.session.scalars(sqlm.select(db.User).where(column == value))).one_or_none()

    async def get_by_id(self, user_id: str) -> domain.User | None:
        return self._to_domain(await self._select_one(db.User.id, user_id))

    async def get_by_username(self, username: str) -> domain.User | None:
        return self._to_domain(await self._select_one(db.User.username, username))

    async def get_by_email(self, email: str) -> domain.User | None:
        return self._to_domain(await self._select_one(db.User.email, email))

    async def list(self, exclude_usernames: tuple[str, ...] = ()) -> list[domain.User]:
        q = sqlm.select(db.User)
        if exclude_usernames:
            q = q.where(db.User.username.not_in(exclude_usernames))
        return [self._to_domain(u) for u in (await self.session.scalars(q)).all()]

    async def create(self, user: domain.User) -> domain.User:
        #id and version come from table defaults unless the user carries them
        row = db.User(**user.model_dump(exclude_none=True))
        self.session.add(row)
        await self._flush_or_raise()
        return self._to_domain(row)

    async def update(self, user: domain.User) -> domain.User:
        """Writes every field of `user`. The row must still have the version it was read with."""
        row = await self.session.get(db.User, user.id)
        if row is None:
            raise domexc.UserDoesNotExist("User not found")

        read_version = row.version
        stmt = (
            sqlm.update(db.User)
            .where(db.User.id == user.id, db.User.version == read_version)
            .values(**user.model_dump(exclude={'id', 'version'}), version=read_version + 1)
        )
        result = await self._flush_or_raise(stmt)
        if result.rowcount == 0:
            raise domexc.VersionError(f"User {user.id} was modified concurrently (version {read_version} is stale)")

        await self.session.refresh(row)
        return self._to_domain(row)

    async def delete(self, user: domain.User) -> None:
        if user.id is None:
            raise ValueError('User has no id. Fetch it from the repository first.')
        await self.session.execute(sqlm.delete(db.User).where(db.User.id == user.id))
        await self.session.flush()

    async def ensure_admin_exists(self, admin_id: str, username: str, email: str, password: str, hasher: domsvc.IPasswordHasherAsync) -> None:
        if await self._select_one(db.User.id, admin_id) is not None:
            return
        holder = await self._select_one(db.User.username, username) or await self._select_one(db.User.email, email)
        if holder is not None:
            logger.warning(f'[USERS] Admin bootstrap skipped: user id={holder.id} already holds username {username} or email {email}')
            return
        logger.info(f'[USERS] Creating default admin account id={admin_id}')
        await self.create(domain.User(
            id=admin_id,
            email=email,
            username=username,
            password_hash=await hasher.hash(password),
            first_name=username,
            last_name=username,
            date_nais='-',
            mobile='-',
        ))
