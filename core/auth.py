import logging
from typing import Optional

import jwt
from fastapi import Header

from core.config import settings
from core.errors import Unauthenticated

logger = logging.getLogger("community.auth")


def _extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def decode_user_id(token: str) -> str:
    """Verify an identity-provider token and return the user id it names."""
    options = {"verify_aud": settings.IDENTITY_JWT_AUDIENCE is not None}
    try:
        payload = jwt.decode(
            token.strip(),
            settings.IDENTITY_JWT_SECRET,
            algorithms=[settings.IDENTITY_JWT_ALGORITHM],
            audience=settings.IDENTITY_JWT_AUDIENCE,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise Unauthenticated("Token expired")
    except jwt.InvalidTokenError:
        raise Unauthenticated("Invalid token")

    user_id = payload.get("sub") or payload.get("user_id")
    if not user_id or not isinstance(user_id, str):
        raise Unauthenticated("Invalid token payload")
    return user_id


def get_optional_user_id(authorization: Optional[str] = Header(None)) -> Optional[str]:
    token = _extract_bearer_token(authorization)
    if not token:
        return None
    return decode_user_id(token)


def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    user_id = get_optional_user_id(authorization)
    if not user_id:
        logger.warning("Rejected request without credentials")
        raise Unauthenticated()
    return user_id
