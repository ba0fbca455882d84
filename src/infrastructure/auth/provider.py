"""Bearer-token authentication contract."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass(frozen=True)
class TokenUser:
    """Identity carried by a verified access token.

    ``id`` becomes the principal that user-group policies are checked against.
    """

    id: UUID
    email: str
    name: Optional[str] = None


class IAuthProvider(Protocol):
    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """Return the token's user, or None when the token is unusable."""
        ...

    def create_token(self, user: TokenUser) -> str: ...
