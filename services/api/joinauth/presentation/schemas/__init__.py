from .users import CamelModel, UserDTO, SignUpModel, UserUpdateModel, UserLoginModel, UserEnvelope
from .token import LoginResponse
from .join import JoinRequest, MessageResponse
