import datetime as dt
import pydantic as p
from joinauth.domain.services import generate_join_code


class JoinCode(p.BaseModel):
    key: str
    created_at: dt.datetime = p.Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))

    @staticmethod
    def generate(length: int) -> "JoinCode":
        return JoinCode(key=generate_join_code(length))
