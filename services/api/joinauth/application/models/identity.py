import enum
import pydantic as p


class TokenStatus(str, enum.Enum):
    VALID = "valid"
    MISSING = "missing"
    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"


class TokenVerification(p.BaseModel):
    """Outcome of a token check. Never raised, always returned."""
    status: TokenStatus
    subject: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == TokenStatus.VALID


class VerifiedIdentity(p.BaseModel):
    """What protected handlers get instead of the raw token"""
    subject: str
    is_admin: bool = False


class LoginResult(p.BaseModel):
    token: str
    expires: float
    is_admin: bool
