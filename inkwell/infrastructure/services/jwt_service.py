"""HS256 JSON Web Token issuance and verification with PyJWT."""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Mapping, Optional

from jwt import PyJWTError
from jwt import decode as jwt_decode
from jwt import encode as jwt_encode
from structlog import get_logger

from inkwell.core.exceptions import JwtError
from inkwell.domain.interfaces.services import ITokenService
from inkwell.domain.value_objects.claims import Claims

logger = get_logger(__name__)

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ("user_id", "username", "iat", "exp")
DEFAULT_TTL = timedelta(hours=24)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtService(ITokenService):
    """Service for signing and verifying identity tokens.

    The service is immutable after construction and safe to share between
    concurrent requests and between the HTTP and gRPC frontends.

    Attributes:
        ttl (timedelta): Lifetime of newly issued tokens.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TTL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self.ttl = ttl
        self._clock = clock or _utcnow

    def generate_token(self, user_id: int, username: str) -> str:
        """Create a signed token for ``user_id``/``username``.

        Returns:
            str: Encoded JWT with ``user_id``, ``username``, ``iat`` and ``exp``.

        Raises:
            JwtError: If PyJWT fails to encode the payload.
        """
        now = self._clock()
        payload = {
            "user_id": user_id,
            "username": username,
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        try:
            return jwt_encode(payload, self._secret, algorithm=ALGORITHM)
        except (PyJWTError, TypeError, ValueError) as e:
            logger.error("JWT encode failed", user_id=user_id, error=str(e))
            raise JwtError(f"Failed to sign token: {e}") from e

    def verify_token(self, token: str) -> Claims:
        """Decode ``token`` and validate its signature, shape and expiry.

        Expiry is checked against the service clock rather than by PyJWT, so a
        token is valid up to and including its ``exp`` second.

        Raises:
            JwtError: On a bad signature, malformed input, missing claims or
                expiry.
        """
        if not token:
            raise JwtError("Token is empty")
        try:
            payload: Mapping[str, Any] = jwt_decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": list(REQUIRED_CLAIMS),
                },
            )
        except PyJWTError as e:
            logger.debug("JWT decode failed", error=str(e))
            raise JwtError(f"Invalid token: {e}") from e

        claims = self._to_claims(payload)
        if self._clock() > claims.expires_at:
            logger.debug("JWT expired", user_id=claims.user_id)
            raise JwtError("Token has expired")
        return claims

    @staticmethod
    def _to_claims(payload: Mapping[str, Any]) -> Claims:
        user_id = payload.get("user_id")
        username = payload.get("username")
        iat = payload.get("iat")
        exp = payload.get("exp")
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise JwtError("Invalid token: user_id claim must be an integer")
        if not isinstance(username, str):
            raise JwtError("Invalid token: username claim must be a string")
        if not isinstance(iat, (int, float)) or not isinstance(exp, (int, float)):
            raise JwtError("Invalid token: iat and exp must be numeric")
        return Claims(
            user_id=user_id,
            username=username,
            issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )
