"""Create profile use case."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError

from marketplace.application.interfaces.repositories import ProfileRepositoryInterface
from marketplace.application.interfaces.security import (
    PasswordHasherInterface,
    TokenServiceInterface,
)
from marketplace.config.logging import get_logger
from marketplace.config.settings import settings
from marketplace.domain.entities.profile import Profile
from marketplace.domain.exceptions import EmailAlreadyRegisteredError, ValidationError
from marketplace.domain.value_objects.actor import Role
from marketplace.domain.value_objects.profile_type import ProfileType
from marketplace.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class CreateProfileRequest:
    """Request for creating a profile."""

    type: ProfileType
    first_name: str
    last_name: str
    email: str
    password: str
    profession: Optional[str] = None


@dataclass
class CreateProfileResult:
    """Result of profile creation."""

    profile: Profile
    access_token: str


class CreateProfileUseCase:
    """Register a client or contractor and issue its first token."""

    def __init__(
        self,
        profile_repo: ProfileRepositoryInterface,
        password_hasher: PasswordHasherInterface,
        token_service: TokenServiceInterface,
        transaction_service: TransactionService,
        signup_credit: Optional[Decimal] = None,
    ):
        self.profile_repo = profile_repo
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.transaction_service = transaction_service
        self.signup_credit = (
            signup_credit if signup_credit is not None else settings.SIGNUP_CREDIT
        )

    async def execute(self, request: CreateProfileRequest) -> CreateProfileResult:
        email = request.email.strip().lower()

        if await self.profile_repo.get_by_email(email):
            logger.warning("Profile e-mail already registered", email=email)
            raise EmailAlreadyRegisteredError(email)

        try:
            profile = Profile(
                type=request.type,
                first_name=request.first_name,
                last_name=request.last_name,
                email=email,
                profession=request.profession,
                balance=self.signup_credit,
                password_hash=self.password_hasher.hash(request.password),
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        try:
            created = await self.transaction_service.execute_in_transaction(
                lambda: self.profile_repo.create(profile)
            )
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same address
            raise EmailAlreadyRegisteredError(email) from e

        token = self.token_service.create_access_token(
            created.id, Role(created.type.value)
        )

        logger.info(
            "Profile registered", profile_id=str(created.id), type=created.type.value
        )
        return CreateProfileResult(profile=created, access_token=token)
