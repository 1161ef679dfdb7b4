import joinauth.domain.repositories as repos
import joinauth.domain.models as domain
import joinauth.domain.services as services
import joinauth.domain.exceptions as domexc
import joinauth.infrastructure.interfaces as iabc
import joinauth.presentation.schemas as schemas
from joinauth.application.services.join_codes import JoinCodeService

import itertools
import logging

logger = logging.getLogger('joinauth')

#Never listed by list_all
HIDDEN_USERNAMES = ("admin",)


class UserService:

    def __init__(
        self,
        user_repo: repos.IUserRepository,
        join_code_service: JoinCodeService,
        password_hasher: services.IPasswordHasherAsync,
        uow: iabc.IUnitOfWork,
    ) -> None:
        self.user_repo = user_repo
        self.join_codes = join_code_service
        self.hasher = password_hasher
        self.uow = uow

    async def _free_username(self, base: str) -> str:
        '''Derived usernames may collide, the smallest free numeric suffix is appended then'''
        if await self.user_repo.get_by_username(base) is None:
            return base
        for n in itertools.count(2):
            candidate = f'{base}{n}'
            if await self.user_repo.get_by_username(candidate) is None:
                logger.info(f'[USERS] Username {base} is taken, using {candidate}')
                return candidate

    async def register(self, data: schemas.SignUpModel) -> schemas.UserDTO:
        'Used by newcomers holding a join code'
        domain.User.require_fields(**data.model_dump())

        if not await self.join_codes.check_join_code(data.join):
            raise domexc.InvalidJoinCode("Invalid join code")

        if await self.user_repo.get_by_email(data.email):
            raise domexc.UserAlreadyExists("Email already exists")

        username = await self._free_username(
            domain.User.derive_username(data.first_name, data.last_name, data.date_nais)
        )
        user = await domain.User.create(
            email=data.email,
            password=data.password,
            first_name=data.first_name,
            last_name=data.last_name,
            date_nais=data.date_nais,
            mobile=data.mobile,
            hasher=self.hasher,
            username=username,
        )
        saved_user = await self.user_repo.create(user)
        await self.join_codes.consume_join_code(data.join)
        await self.uow.commit()
        logger.info(f'[USERS] Registered user id={saved_user.id}, username={saved_user.username}')
        return schemas.UserDTO.model_validate(saved_user, from_attributes=True)

    async def get_user(self, user_id: str) -> schemas.UserDTO:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise domexc.UserDoesNotExist("User not found")
        return schemas.UserDTO.model_validate(user, from_attributes=True)

    async def update(self, user_id: str, edited_user: schemas.UserUpdateModel) -> schemas.UserDTO:
        target_user = await self.user_repo.get_by_id(user_id)
        if not target_user:
            raise domexc.UserDoesNotExist("User not found")

        await target_user.apply_changes(edited_user.model_dump(), self.hasher)
        updated = await self.user_repo.update(target_user)
        await self.uow.commit()
        return schemas.UserDTO.model_validate(updated, from_attributes=True)

    async def delete(self, user_id: str) -> None:
        target_user = await self.user_repo.get_by_id(user_id)
        if not target_user:
            raise domexc.UserDoesNotExist("User not found")
        await self.user_repo.delete(target_user)
        await self.uow.commit()
        logger.info(f'[USERS] Deleted user id={user_id}')

    async def list_all(self) -> list[schemas.UserDTO]:
        users = await self.user_repo.list(exclude_usernames=HIDDEN_USERNAMES)
        return [schemas.UserDTO.model_validate(user, from_attributes=True) for user in users]
