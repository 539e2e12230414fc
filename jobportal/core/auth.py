"""
Authentication Utility - Password hashing and session tokens.

Provides:
- PasswordHasher: bcrypt hashing/verification via passlib
- TokenIssuer: JWT session tokens (1 day lifetime)

Both are built once from Settings and injected where needed
(see jobportal.api.deps).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext

# Session lifetime is fixed; the cookie max-age follows it.
SESSION_TTL = timedelta(days=1)
SESSION_COOKIE_NAME = "token"


class PasswordHasher:
    """One-way salted bcrypt hashing."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Hash password with bcrypt."""
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify password against hash."""
        return self._context.verify(plain_password, hashed_password)

    def dummy_verify(self) -> None:
        """Spend a verification's worth of time when there is no hash to check."""
        self._context.dummy_verify()


class TokenIssuer:
    """Signs and decodes session tokens carrying the user id as subject."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl: timedelta = SESSION_TTL):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, subject_id: str) -> str:
        """Create a signed token for subject_id expiring after ttl."""
        expire = datetime.now(timezone.utc) + self.ttl
        claims = {"sub": str(subject_id), "exp": expire}
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Optional[str]:
        """Return the subject of a valid, unexpired token, else None."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None
        return payload.get("sub")
