import abc


class IMailSender(abc.ABC):
    @abc.abstractmethod
    async def send(self, recipient: str, subject: str, body: str) -> None:
        """Delivers a plain-text message. Raises on delivery failure."""
