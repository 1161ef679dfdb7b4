from .users import CamelModel


class LoginResponse(CamelModel):
    message: str = "Logged in successfully"
    token: str
    is_admin: bool
