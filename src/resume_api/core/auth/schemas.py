"""Authentication schemas for token handling."""

from datetime import datetime

from pydantic import BaseModel


class TokenData(BaseModel):
    """Claims extracted from a verified bearer token.

    Attributes:
        external_user_id: The ``sub`` claim, the identity provider's user ID
        exp: Token expiration time
        permissions: Values of the permissions claim (e.g., "Admin:access")
    """

    external_user_id: str
    exp: datetime
    permissions: list[str] = []
