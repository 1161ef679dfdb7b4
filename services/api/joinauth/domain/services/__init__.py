from .hashing import IPasswordHasher, IPasswordHasherAsync
from .join_codes import generate_join_code, JOIN_CODE_ALPHABET
