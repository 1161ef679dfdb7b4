from .users import SQLAUserRepository
from .join_codes import SQLAJoinCodeRepository
