"""Password hashing and bearer token primitives.

Passwords are hashed with Argon2id through PyNaCl; bearer tokens are HS256
JWTs signed with python-jose. Both are treated as opaque primitives by the
rest of the application.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from nacl import pwhash
from nacl.exceptions import CryptoError

from inkwell.core.settings import Settings

logger = logging.getLogger(__name__)


def hash_password(
    password: str,
    *,
    opslimit: int = pwhash.argon2id.OPSLIMIT_INTERACTIVE,
    memlimit: int = pwhash.argon2id.MEMLIMIT_INTERACTIVE,
) -> str:
    """Return a salted Argon2id hash string for ``password``."""
    hashed = pwhash.argon2id.str(
        password.encode("utf-8"),
        opslimit=opslimit,
        memlimit=memlimit,
    )
    return hashed.decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a plaintext password against a stored Argon2id hash.

    Args:
        password: Plaintext submitted by the client.
        password_hash: Hash string produced by :func:`hash_password`.

    Returns:
        True if the password matches; False on mismatch or a corrupt hash.
    """
    try:
        return pwhash.verify(password_hash.encode("ascii"), password.encode("utf-8"))
    except (CryptoError, UnicodeEncodeError):
        return False


@dataclass(frozen=True)
class TokenConfig:
    """Immutable signing configuration handed to :class:`TokenService`."""

    secret_key: str
    algorithm: str
    ttl: timedelta

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenConfig:
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.access_token_expire_minutes),
        )


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed access token and its expiry."""

    token: str
    expires_at: datetime

    @property
    def expires_in(self) -> int:
        """Seconds until expiry at the moment of issue."""
        return max(0, int((self.expires_at - datetime.now(UTC)).total_seconds()))


class TokenService:
    """Issue and verify bearer identity tokens."""

    def __init__(self, config: TokenConfig) -> None:
        self.config = config

    def issue(self, identity_id: str, *, now: datetime | None = None) -> IssuedToken:
        """Sign a token whose subject is ``identity_id``."""
        issued_at = now or datetime.now(UTC)
        expires_at = issued_at + self.config.ttl
        claims = {
            "sub": identity_id,
            "iat": issued_at,
            "exp": expires_at,
        }
        token: str = jwt.encode(
            claims,
            self.config.secret_key,
            algorithm=self.config.algorithm,
        )
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> str | None:
        """Return the identity id carried by ``token``, or None if it is invalid.

        Expired, tampered and malformed tokens all yield None.
        """
        try:
            payload = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
            )
        except JWTError as err:
            logger.debug("Rejected bearer token: %s", err)
            return None
        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            return None
        return subject
