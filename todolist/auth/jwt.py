"""JWT token generation and validation for todolist."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict

import jwt

from todolist.config import JwtSettings
from todolist.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed token and the instant it stops being valid."""
    token: str
    expires_at: datetime


class TokenIssuer:
    """Mints and validates signed, time-limited identity tokens.

    Tokens are stateless: validity depends only on the signature, the
    expiry, the issuer and the audience. There is no revocation list.
    """

    def __init__(self, settings: JwtSettings):
        self.settings = settings

    def issue(self, user: User, now: Optional[datetime] = None) -> IssuedToken:
        """Create a signed access token for a user.

        Args:
            user: Authenticated user to encode in the token
            now: Issuance time (defaults to current UTC time)

        Returns:
            IssuedToken with the encoded JWT and its expiry (naive UTC)
        """
        issued_at = now or datetime.utcnow()
        expires_at = issued_at + timedelta(minutes=self.settings.expiration_minutes)
        payload = {
            "sub": user.id,  # Subject (user ID)
            "email": user.email,
            "name": user.full_name,
            "jti": str(uuid.uuid4()),  # Unique per token
            "iss": self.settings.issuer,
            "aud": self.settings.audience,
            "iat": issued_at.replace(tzinfo=timezone.utc),
            "exp": expires_at.replace(tzinfo=timezone.utc),
        }
        token = jwt.encode(payload, self.settings.secret_key, algorithm=self.settings.algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def decode(self, token: str) -> Optional[Dict]:
        """Decode and validate an access token.

        Args:
            token: JWT token string to decode

        Returns:
            Decoded payload, or None if the token is malformed, badly signed,
            expired, or issued for another issuer/audience
        """
        try:
            return jwt.decode(
                token,
                self.settings.secret_key,
                algorithms=[self.settings.algorithm],
                audience=self.settings.audience,
                issuer=self.settings.issuer,
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected invalid token: {type(e).__name__}")
            return None
