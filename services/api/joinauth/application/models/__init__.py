from .identity import TokenStatus, TokenVerification, VerifiedIdentity, LoginResult
