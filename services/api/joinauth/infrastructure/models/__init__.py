from .users import User, new_identity_key
from .join_codes import JoinCode
