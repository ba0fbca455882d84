"""JWT authentication provider implementation.

Token payload structure:
    {
        "sub": "user-uuid",
        "email": "user@example.com",
        "name": "Jane",
        "exp": 1234567890
    }
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

import structlog
from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()


class JWTAuthProvider:
    """JWT-based authentication provider using a shared secret."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT token and extract user info.

        Returns:
            TokenUser if valid, None if invalid, expired or missing claims
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_aud": False},
            )
        except JWTError as e:
            logger.info("token_rejected", reason=str(e))
            return None

        user_id = payload.get("sub")
        email = payload.get("email")
        if not user_id or not email:
            return None

        try:
            parsed_id = UUID(user_id)
        except ValueError:
            return None

        return TokenUser(id=parsed_id, email=email, name=payload.get("name"))

    def create_token(self, user: TokenUser) -> str:
        """Create a signed JWT for a user."""
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
