import random
import string

JOIN_CODE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def generate_join_code(length: int) -> str:
    """Returns `length` characters picked uniformly from A-Z, a-z, 0-9.

    Codes are not checked against live ones, collisions are accepted.
    """
    if length < 0:
        raise ValueError(f"Join code length must be non-negative, got {length}")
    return ''.join(random.choices(JOIN_CODE_ALPHABET, k=length))
