"""Bearer tokens carrying the acting identity.

Tokens are HS256 JWTs with ``sub`` (user id), ``role`` and ``exp`` claims.
Everything that goes wrong while reading one surfaces as an
AuthenticationError so the boundaries answer 401 uniformly.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from storefront.domain.exceptions import AuthenticationError, ValidationError
from storefront.domain.model.identity import Identity, Role
from storefront.infrastructure.config import Settings


def issue_token(identity: Identity, settings: Settings, ttl_seconds: int | None = None) -> str:
    now = datetime.now(timezone.utc)
    ttl = settings.token_ttl_seconds if ttl_seconds is None else ttl_seconds
    payload = {
        "sub": identity.user_id,
        "role": identity.role.value,
        "iat": now,
        "exp": now + timedelta(seconds=ttl),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings) -> Identity:
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "role", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired") from None
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token") from None

    try:
        return Identity(user_id=str(claims["sub"]), role=Role.parse(claims["role"]))
    except ValidationError:
        raise AuthenticationError("Invalid token") from None


def parse_authorization_header(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` value."""
    if not authorization:
        raise AuthenticationError("Access token required")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Invalid authorization header")
    return token.strip()
