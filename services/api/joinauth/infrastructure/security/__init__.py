from .passwords import BCryptHasher, AsyncHasher
from .auth_strategies import JWTAuthStrategy, extract_token
