"""Service interfaces the domain layer depends on."""

from abc import ABC, abstractmethod

from inkwell.domain.value_objects.claims import Claims


class ITokenService(ABC):
    """Issues and verifies signed, time-bounded identity tokens.

    Tokens are stateless: there is no server-side record of issued tokens and
    no revocation, so a token stays valid until it expires.
    """

    @abstractmethod
    def generate_token(self, user_id: int, username: str) -> str:
        """Signs a token for the given identity.

        Raises:
            JwtError: If signing fails.
        """
        raise NotImplementedError

    @abstractmethod
    def verify_token(self, token: str) -> Claims:
        """Decodes a token and validates its signature and expiry.

        Raises:
            JwtError: If the token is malformed, signed with another key, or
                expired.
        """
        raise NotImplementedError
