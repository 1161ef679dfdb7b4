import pydantic as p
from pydantic.alias_generators import to_camel


class CamelModel(p.BaseModel):
    '''Snake case in python, camelCase on the wire. Numbers sent for text fields are kept as text.'''
    model_config = p.ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)


class UserDTO(CamelModel):
    '''Public user representation. Has no password field on purpose.'''
    model_config = p.ConfigDict(from_attributes=True)

    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    date_nais: str
    mobile: str


class SignUpModel(CamelModel):
    '''Every field is optional here so that absent ones end up as a 400 from the service, not a 422'''
    join: str | None = p.Field(default=None, description='Join code received by email')
    email: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    date_nais: str | None = p.Field(default=None, description='Birth date')
    mobile: str | None = None


class UserUpdateModel(CamelModel):
    '''Partial update. Empty values are ignored, a field can not be cleared to "" with it.'''
    password: str | None = None
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    date_nais: str | None = None
    mobile: str | None = None


class UserLoginModel(p.BaseModel):
    model_config = p.ConfigDict(coerce_numbers_to_str=True)

    username: str | None = None
    password: str | None = None


class UserEnvelope(p.BaseModel):
    message: str
    user: UserDTO
