from .users import IUserRepository
from .join_codes import IJoinCodeRepository
