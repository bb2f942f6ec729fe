"""
Signed access tokens carrying subject id and role.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from marketplace.application.interfaces.security import TokenServiceInterface
from marketplace.config.logging import get_logger
from marketplace.config.settings import settings
from marketplace.domain.exceptions.authorization_error import AuthenticationError
from marketplace.domain.value_objects.actor import Actor, Role

logger = get_logger(__name__)


class TokenService(TokenServiceInterface):
    """JWT token service backed by python-jose."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
    ):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.ALGORITHM
        self.expire_minutes = expire_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_access_token(
        self,
        subject_id: UUID,
        role: Role,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Issue a token carrying subject id and role."""
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))

        to_encode = {
            "sub": str(subject_id),
            "role": Role(role).value,
            "exp": expire,
            "iat": now,
            "type": "access",
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> Actor:
        """Verify a token and return the actor it identifies."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning("Access token rejected", error=str(e))
            raise AuthenticationError("Invalid or expired token") from e

        try:
            return Actor(subject_id=UUID(payload["sub"]), role=Role(payload["role"]))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Access token has malformed claims", error=str(e))
            raise AuthenticationError("Invalid or expired token") from e
