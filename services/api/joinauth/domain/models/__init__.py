from .users import User, UPDATABLE_FIELDS
from .join_codes import JoinCode
