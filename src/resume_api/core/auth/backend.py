"""JWT verification for bearer tokens issued by the identity provider.

This service never issues tokens. It verifies the signature, expiry
and, when configured, the audience and issuer, then exposes the
subject as the external user ID.
"""

from datetime import UTC, datetime
from typing import Any

from jose import JWTError, jwt

from resume_api.config import settings
from resume_api.core.auth.schemas import TokenData


def decode_token(token: str) -> TokenData | None:
    """Decode and validate a JWT access token.

    Args:
        token: The encoded JWT

    Returns:
        TokenData if valid, None if invalid, expired or missing a subject
    """
    options: dict[str, Any] = {"verify_aud": settings.jwt_audience is not None}

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options=options,
        )
    except JWTError:
        return None

    subject = payload.get("sub")
    exp = payload.get("exp")
    if not subject or not str(subject).strip() or exp is None:
        return None

    return TokenData(
        external_user_id=str(subject),
        exp=datetime.fromtimestamp(exp, tz=UTC),
        permissions=_read_permissions(payload.get(settings.permissions_claim)),
    )


def _read_permissions(claim: Any) -> list[str]:
    # Providers send either a list or a space separated string
    if claim is None:
        return []
    if isinstance(claim, str):
        return claim.split()
    return [str(value) for value in claim]
