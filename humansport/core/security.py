"""Password hashing, bearer tokens and role guards."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from humansport.core.config import settings

logger = logging.getLogger(__name__)

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Raw header so that "Bearer" without a token can be told apart from a bad token.
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    scheme_name="BearerToken",
    description="Bearer <token> as returned by POST /users/login",
)

NO_TOKEN_DETAIL = "Access denied. No token provided."
INVALID_TOKEN_DETAIL = "Access denied. Invalid token."
FORBIDDEN_DETAIL = "Access denied. You do not have permission for this action."


class TokenIdentity(BaseModel):
    """Caller identity decoded from a bearer token."""

    id: int
    email: str
    role: str


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return _pwd_context.verify(password, password_hash)


def create_access_token(
    *,
    user_id: int,
    email: str,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": str(user_id), "email": email, "role": role, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_access_token(token: str) -> TokenIdentity:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except JWTError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise _unauthorized(INVALID_TOKEN_DETAIL) from exc

    subject = payload.get("sub")
    role = payload.get("role")
    if subject is None or role is None:
        raise _unauthorized(INVALID_TOKEN_DETAIL)

    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _unauthorized(INVALID_TOKEN_DETAIL) from exc

    return TokenIdentity(id=user_id, email=payload.get("email") or "", role=role)


def get_current_identity(
    authorization: Optional[str] = Depends(authorization_header),
) -> TokenIdentity:
    """Validate the ``Authorization: Bearer <token>`` header.

    Raises an HTTP 401 when the header or the token segment is missing, or
    when the token does not verify.
    """

    if not authorization:
        raise _unauthorized(NO_TOKEN_DETAIL)

    parts = authorization.split()
    if len(parts) < 2 or not parts[1]:
        raise _unauthorized(NO_TOKEN_DETAIL)

    return decode_access_token(parts[1])


def get_optional_identity(
    authorization: Optional[str] = Depends(authorization_header),
) -> Optional[TokenIdentity]:
    """Identity for routes open to anonymous callers; a bad token is still a 401."""

    if not authorization:
        return None
    return get_current_identity(authorization)


def require_roles(*roles: str) -> Callable[..., TokenIdentity]:
    """Build a dependency that only lets the given roles through.

    With no roles every authenticated caller is accepted.
    """

    allowed = frozenset(roles)

    def guard(identity: TokenIdentity = Depends(get_current_identity)) -> TokenIdentity:
        if allowed and identity.role not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_DETAIL)
        return identity

    return guard


__all__ = [
    "TokenIdentity",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "get_current_identity",
    "get_optional_identity",
    "require_roles",
]
