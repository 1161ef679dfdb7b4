import pydantic as p


class JoinRequest(p.BaseModel):
    receiver: p.EmailStr = p.Field(description='Address the join code is mailed to')


class MessageResponse(p.BaseModel):
    message: str
