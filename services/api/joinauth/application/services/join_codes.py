import joinauth.application.interfaces as iapp
import joinauth.domain.repositories as repos
import joinauth.domain.models as domain
import joinauth.domain.exceptions as domexc
import joinauth.infrastructure.interfaces as iabc

import logging

logger = logging.getLogger('joinauth')

JOIN_MAIL_SUBJECT = 'Your Join Code'


class JoinCodeService:
    """Issues join codes by email and acts as the registration gate."""

    def __init__(
        self,
        join_code_repo: repos.IJoinCodeRepository,
        mail_sender: iapp.IMailSender,
        uow: iabc.IUnitOfWork,
        code_length: int = 6,
    ) -> None:
        self.join_code_repo = join_code_repo
        self.mail_sender = mail_sender
        self.uow = uow
        self.code_length = code_length

    async def send_join_code(self, receiver: str) -> str:
        '''Stores a fresh code and mails it. Nothing is committed if the mail fails.'''
        join_code = domain.JoinCode.generate(self.code_length)
        await self.join_code_repo.create(join_code)
        await self.mail_sender.send(
            recipient=receiver,
            subject=JOIN_MAIL_SUBJECT,
            body=f'Your join code is: {join_code.key}',
        )
        await self.uow.commit()
        logger.info(f'[JOIN] Join code sent to {receiver}')
        return join_code.key

    async def check_join_code(self, code: str) -> bool:
        return await self.join_code_repo.get(code) is not None

    async def consume_join_code(self, code: str) -> None:
        '''Removes the code within the current unit of work. Commit is up to the caller.
        Raises InvalidJoinCode if a concurrent signup removed it after check_join_code.'''
        if not await self.join_code_repo.delete(code):
            logger.info('[JOIN] Join code was consumed concurrently, rejecting signup')
            raise domexc.InvalidJoinCode("Invalid join code")
