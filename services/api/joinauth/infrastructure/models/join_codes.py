import sqlmodel as sqlm
import sqlalchemy as sa
import datetime as dt


class JoinCode(sqlm.SQLModel, table=True):
    __tablename__ = 'join_codes'
    key: str = sqlm.Field(primary_key=True, max_length=64, description='The code mailed to a future user')
    created_at: dt.datetime = sqlm.Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
        sa_type=sa.DateTime(timezone=True),
    )
