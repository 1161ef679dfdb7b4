import sqlmodel as sqlm
import uuid


def new_identity_key() -> str:
    return uuid.uuid4().hex


class User(sqlm.SQLModel, table=True):
    __tablename__ = 'users'
    id: str = sqlm.Field(default_factory=new_identity_key, primary_key=True, max_length=64, description='Opaque identity key, generated on insert')
    email: str = sqlm.Field(unique=True, index=True, max_length=255, description='Unique email address')
    username: str = sqlm.Field(unique=True, index=True, max_length=64, description='Login name derived from name and birth date')
    password_hash: str = sqlm.Field(max_length=255, description='A hashed password')
    first_name: str = sqlm.Field(max_length=128)
    last_name: str = sqlm.Field(max_length=128)
    date_nais: str = sqlm.Field(max_length=32, description='Birth date as entered')
    mobile: str = sqlm.Field(max_length=32)
    #Optimistic locking, bumped by every update
    version: int = sqlm.Field(default=0, nullable=False)
