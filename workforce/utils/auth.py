"""
Authentication utilities: password hashing, bearer token handling and role checks.
"""

import logging
from calendar import timegm
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import AbstractSet, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from workforce.config import settings
from workforce.enums import Role
from workforce.exceptions import Forbidden, InvalidOrExpiredToken, Unauthenticated
from workforce.utils.datetime_utils import ensure_utc, utc_now

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# Missing headers are reported by get_current_claims, not by FastAPI.
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class IdentityClaims:
    """Identity carried by a session token."""

    employee_id: int
    email: str
    role: Role


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def burn_password_check() -> None:
    """Spend the time of a real verification when there is no hash to check."""
    pwd_context.dummy_verify()


def _timestamp(dt: datetime) -> int:
    return timegm(ensure_utc(dt).utctimetuple())


def create_access_token(
    claims: IdentityClaims,
    issued_at: Optional[datetime] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed access token.

    Args:
        claims: Identity to embed in the token
        issued_at: Issuance time (defaults to now)
        expires_delta: Validity window (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT token string
    """
    issued_at = issued_at or utc_now()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(claims.employee_id),
        "email": claims.email,
        "role": claims.role.value,
        "iat": _timestamp(issued_at),
        "exp": _timestamp(issued_at + expires_delta),
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str, now: Optional[datetime] = None) -> IdentityClaims:
    """
    Verify a token and return the identity it carries.

    The employee record is not re-read; claims are trusted until expiry.

    Raises:
        InvalidOrExpiredToken: If the signature does not verify, the claims
            are malformed, or the validity window has elapsed
    """
    try:
        # Expiry is checked below against an injectable clock.
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"verify_exp": False},
        )
    except JWTError:
        raise InvalidOrExpiredToken()

    expires_at = payload.get("exp")
    if not isinstance(expires_at, int):
        raise InvalidOrExpiredToken()
    if expires_at < _timestamp(now or utc_now()):
        raise InvalidOrExpiredToken()

    try:
        return IdentityClaims(
            employee_id=int(payload["sub"]),
            email=str(payload["email"]),
            role=Role(payload["role"]),
        )
    except (KeyError, TypeError, ValueError):
        raise InvalidOrExpiredToken()


def authorize(claims: Optional[IdentityClaims], required_roles: AbstractSet[Role]) -> None:
    """
    Check that the caller holds one of ``required_roles``.

    Raises:
        Unauthenticated: If there is no verified identity
        Forbidden: If the caller's role is not in ``required_roles``
    """
    if claims is None:
        raise Unauthenticated()
    if claims.role not in required_roles:
        logger.warning(f"Employee {claims.employee_id} with role {claims.role.value} denied access")
        raise Forbidden()


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> IdentityClaims:
    """
    Verify the bearer token on the current request.

    Raises:
        Unauthenticated: If no bearer token was presented
        InvalidOrExpiredToken: If the token does not verify
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    return verify_token(credentials.credentials)


def require_roles(*roles: Role):
    """Build a dependency that verifies the token and then authorizes its role."""
    required = frozenset(roles)

    async def dependency(claims: IdentityClaims = Depends(get_current_claims)) -> IdentityClaims:
        authorize(claims, required)
        return claims

    return dependency


get_current_employee = require_roles(Role.EMPLOYEE, Role.ADMIN)
get_current_admin = require_roles(Role.ADMIN)
