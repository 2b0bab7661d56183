"""Authentication Domain Service.

Registration and login orchestration on top of the password value object, the
token service and the user repository.
"""

from typing import Optional

import structlog

from inkwell.core.exceptions import (
    AuthenticationError,
    InvalidCredentialsError,
    JwtError,
    UserAlreadyExistsError,
)
from inkwell.core.logging import mask_email
from inkwell.domain.commands import LoginCommand, RegisterCommand
from inkwell.domain.entities.user import AuthResult
from inkwell.domain.interfaces.repositories import IUserRepository
from inkwell.domain.interfaces.services import ITokenService
from inkwell.domain.value_objects.claims import Claims
from inkwell.domain.value_objects.password import Password

logger = structlog.get_logger(__name__)

# Plaintext behind the decoy hash verified when a login email is unknown.
_DECOY_PLAINTEXT = "inkwell-decoy-credential"


class AuthService:
    """Domain service for registration, login and token authentication.

    Responsibilities:
    - Register users, relying on the store's unique constraints for duplicates
    - Log users in by email without revealing which credential was wrong
    - Turn bearer tokens into claims for the transport adapters
    """

    def __init__(self, user_repository: IUserRepository, token_service: ITokenService):
        self._user_repository = user_repository
        self._token_service = token_service
        self._decoy_password: Optional[Password] = None

    async def register(self, cmd: RegisterCommand) -> AuthResult:
        """Register a new user and issue a token for them.

        There is no availability pre-check: the insert itself is the only
        source of truth, so two concurrent registrations for the same name
        cannot both pass.

        Raises:
            UserAlreadyExistsError: If the username or the email is taken.
            PasswordHashError: If hashing fails.
            JwtError: If the token cannot be signed.
            DatabaseError: On any other store failure.
        """
        password = await Password.hash_async(cmd.password)
        try:
            user = await self._user_repository.create(
                cmd.username, cmd.email, password.hashed_value
            )
        except UserAlreadyExistsError:
            logger.info(
                "Registration rejected - user already exists",
                username=cmd.username,
                email=mask_email(cmd.email),
            )
            raise

        token = self._token_service.generate_token(user.id, user.username)
        logger.info("User registered", user_id=user.id, username=user.username)
        return AuthResult(token=token, user=user)

    async def login(self, cmd: LoginCommand) -> AuthResult:
        """Authenticate by email and password.

        An unknown email and a wrong password raise the same error. When the
        email is unknown a decoy hash is still verified so both paths cost
        roughly one Argon2 verification.

        Raises:
            InvalidCredentialsError: On any credential mismatch.
        """
        user = await self._user_repository.find_by_email(cmd.email)
        if user is None:
            await self._verify_decoy(cmd.password)
            logger.info("Login failed", email=mask_email(cmd.email))
            raise InvalidCredentialsError()

        if not await user.password_hash.verify_async(cmd.password):
            logger.info("Login failed", email=mask_email(cmd.email))
            raise InvalidCredentialsError()

        token = self._token_service.generate_token(user.id, user.username)
        logger.info("User logged in", user_id=user.id)
        return AuthResult(token=token, user=user)

    def authenticate(self, token: Optional[str]) -> Claims:
        """Resolve a bearer token to its claims.

        Raises:
            AuthenticationError: If the token is missing, malformed, signed with
                another key or expired.
        """
        if not token:
            raise AuthenticationError("Missing authorization token")
        try:
            return self._token_service.verify_token(token)
        except JwtError as e:
            logger.debug("Token rejected", reason=e.message)
            raise AuthenticationError("Invalid or expired token") from e

    async def _verify_decoy(self, plaintext: str) -> None:
        if self._decoy_password is None:
            self._decoy_password = await Password.hash_async(_DECOY_PLAINTEXT)
        await self._decoy_password.verify_async(plaintext)
