"""Authenticate profile use case."""

from dataclasses import dataclass

from marketplace.application.interfaces.repositories import ProfileRepositoryInterface
from marketplace.application.interfaces.security import (
    PasswordHasherInterface,
    TokenServiceInterface,
)
from marketplace.config.logging import get_logger
from marketplace.domain.entities.profile import Profile
from marketplace.domain.exceptions import AuthenticationError
from marketplace.domain.value_objects.actor import Role

logger = get_logger(__name__)


@dataclass
class AuthenticateProfileRequest:
    email: str
    password: str


@dataclass
class AuthenticateProfileResult:
    profile: Profile
    access_token: str


class AuthenticateProfileUseCase:
    """Exchange e-mail and password for an access token."""

    def __init__(
        self,
        profile_repo: ProfileRepositoryInterface,
        password_hasher: PasswordHasherInterface,
        token_service: TokenServiceInterface,
    ):
        self.profile_repo = profile_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(
        self, request: AuthenticateProfileRequest
    ) -> AuthenticateProfileResult:
        profile = await self.profile_repo.get_by_email(request.email)

        if (
            profile is None
            or not profile.password_hash
            or not self.password_hasher.verify(request.password, profile.password_hash)
        ):
            logger.warning("Login failed", email=request.email.strip().lower())
            raise AuthenticationError("Invalid email or password")

        token = self.token_service.create_access_token(
            profile.id, Role(profile.type.value)
        )
        logger.info("Login succeeded", profile_id=str(profile.id))
        return AuthenticateProfileResult(profile=profile, access_token=token)
