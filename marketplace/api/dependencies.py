"""
FastAPI dependency injection container.
"""

from dataclasses import dataclass
from typing import Annotated, Callable, Optional

from fastapi import Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.services.escrow_service import EscrowService
from marketplace.application.services.reporting_service import ReportingService
from marketplace.application.use_cases import (
    AuthenticateProfileUseCase,
    CompleteJobUseCase,
    CreateContractUseCase,
    CreateJobUseCase,
    CreateProfileUseCase,
    GetContractUseCase,
    GetJobUseCase,
    GetLedgerUseCase,
    GetProfileUseCase,
    ListContractsUseCase,
    ListJobsUseCase,
    ListProfilesUseCase,
    ModifyJobUseCase,
    ModifyProfileUseCase,
    ReviewJobUseCase,
    TerminateContractUseCase,
)
from marketplace.config.database import get_db_session
from marketplace.config.logging import get_logger
from marketplace.config.settings import settings
from marketplace.domain.exceptions import AuthenticationError, AuthorizationError
from marketplace.domain.value_objects.actor import Actor, Role
from marketplace.infrastructure.database.repositories import (
    ContractRepository,
    JobRepository,
    LedgerRepository,
    ProfileRepository,
    TransactionService,
)
from marketplace.infrastructure.security import BcryptPasswordHasher, TokenService

logger = get_logger(__name__)

# Optional so that the auth cookie can be used instead
bearer_scheme = HTTPBearer(auto_error=False)


# Database Dependencies
async def get_profile_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ProfileRepository:
    """Get profile repository instance."""
    return ProfileRepository(db)


async def get_contract_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ContractRepository:
    """Get contract repository instance."""
    return ContractRepository(db)


async def get_job_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobRepository:
    """Get job repository instance."""
    return JobRepository(db)


async def get_ledger_repository(
    db: AsyncSession = Depends(get_db_session),
) -> LedgerRepository:
    """Get ledger repository instance."""
    return LedgerRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service bound to the request session."""
    return TransactionService(db)


# Identity Dependencies
async def get_token_service() -> TokenService:
    return TokenService()


async def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


async def get_current_actor(
    request: Request,
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> Actor:
    """Resolve the actor from the bearer token, falling back to the cookie."""
    if credentials:
        token = credentials.credentials
    else:
        token = request.cookies.get(settings.AUTH_COOKIE_NAME)

    if not token:
        raise AuthenticationError(
            "Not authenticated - provide Authorization header or auth cookie"
        )

    return token_service.decode_access_token(token)


CurrentActorDep = Annotated[Actor, Depends(get_current_actor)]


def require_roles(*roles: Role) -> Callable:
    """Route-level capability filter on the token's role claim.

    This only decides who may call a route. Ownership of the entity being
    touched is checked by the use cases.
    """

    async def dependency(actor: CurrentActorDep) -> Actor:
        if actor.role not in roles:
            raise AuthorizationError(
                f"This action requires one of the roles: "
                f"{', '.join(role.value for role in roles)}"
            )
        return actor

    return dependency


ClientActorDep = Annotated[Actor, Depends(require_roles(Role.CLIENT))]
ContractorActorDep = Annotated[Actor, Depends(require_roles(Role.CONTRACTOR))]
AdminActorDep = Annotated[Actor, Depends(require_roles(Role.ADMIN))]


@dataclass
class Pagination:
    page: int
    per_page: int


async def get_pagination(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[
        int, Query(ge=1, le=settings.MAX_PAGE_SIZE)
    ] = settings.DEFAULT_PAGE_SIZE,
) -> Pagination:
    return Pagination(page=page, per_page=limit)


ProfileRepositoryDep = Annotated[ProfileRepository, Depends(get_profile_repository)]
ContractRepositoryDep = Annotated[ContractRepository, Depends(get_contract_repository)]
JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
LedgerRepositoryDep = Annotated[LedgerRepository, Depends(get_ledger_repository)]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
PasswordHasherDep = Annotated[BcryptPasswordHasher, Depends(get_password_hasher)]
PaginationDep = Annotated[Pagination, Depends(get_pagination)]


# Service Dependencies
async def get_escrow_service(
    profile_repo: ProfileRepositoryDep,
    job_repo: JobRepositoryDep,
    ledger_repo: LedgerRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> EscrowService:
    """Get escrow service instance."""
    return EscrowService(profile_repo, job_repo, ledger_repo, transaction_service)


async def get_reporting_service(
    job_repo: JobRepositoryDep, profile_repo: ProfileRepositoryDep
) -> ReportingService:
    """Get reporting service instance."""
    return ReportingService(job_repo, profile_repo)


# Use Case Dependencies
async def get_create_profile_use_case(
    profile_repo: ProfileRepositoryDep,
    password_hasher: PasswordHasherDep,
    token_service: TokenServiceDep,
    transaction_service: TransactionServiceDep,
) -> CreateProfileUseCase:
    return CreateProfileUseCase(
        profile_repo, password_hasher, token_service, transaction_service
    )


async def get_authenticate_profile_use_case(
    profile_repo: ProfileRepositoryDep,
    password_hasher: PasswordHasherDep,
    token_service: TokenServiceDep,
) -> AuthenticateProfileUseCase:
    return AuthenticateProfileUseCase(profile_repo, password_hasher, token_service)


async def get_modify_profile_use_case(
    profile_repo: ProfileRepositoryDep, transaction_service: TransactionServiceDep
) -> ModifyProfileUseCase:
    return ModifyProfileUseCase(profile_repo, transaction_service)


async def get_create_contract_use_case(
    contract_repo: ContractRepositoryDep,
    profile_repo: ProfileRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> CreateContractUseCase:
    return CreateContractUseCase(contract_repo, profile_repo, transaction_service)


async def get_terminate_contract_use_case(
    contract_repo: ContractRepositoryDep, transaction_service: TransactionServiceDep
) -> TerminateContractUseCase:
    return TerminateContractUseCase(contract_repo, transaction_service)


async def get_create_job_use_case(
    job_repo: JobRepositoryDep,
    contract_repo: ContractRepositoryDep,
    transaction_service: TransactionServiceDep,
) -> CreateJobUseCase:
    return CreateJobUseCase(job_repo, contract_repo, transaction_service)


async def get_modify_job_use_case(
    job_repo: JobRepositoryDep, transaction_service: TransactionServiceDep
) -> ModifyJobUseCase:
    return ModifyJobUseCase(job_repo, transaction_service)


async def get_complete_job_use_case(
    job_repo: JobRepositoryDep, transaction_service: TransactionServiceDep
) -> CompleteJobUseCase:
    return CompleteJobUseCase(job_repo, transaction_service)


async def get_review_job_use_case(
    job_repo: JobRepositoryDep, transaction_service: TransactionServiceDep
) -> ReviewJobUseCase:
    return ReviewJobUseCase(job_repo, transaction_service)


async def get_ledger_use_case(
    ledger_repo: LedgerRepositoryDep, profile_repo: ProfileRepositoryDep
) -> GetLedgerUseCase:
    return GetLedgerUseCase(ledger_repo, profile_repo)


async def get_profile_use_case(profile_repo: ProfileRepositoryDep) -> GetProfileUseCase:
    return GetProfileUseCase(profile_repo)


async def get_list_profiles_use_case(
    profile_repo: ProfileRepositoryDep,
) -> ListProfilesUseCase:
    return ListProfilesUseCase(profile_repo)


async def get_contract_use_case(
    contract_repo: ContractRepositoryDep,
) -> GetContractUseCase:
    return GetContractUseCase(contract_repo)


async def get_list_contracts_use_case(
    contract_repo: ContractRepositoryDep,
) -> ListContractsUseCase:
    return ListContractsUseCase(contract_repo)


async def get_job_use_case(job_repo: JobRepositoryDep) -> GetJobUseCase:
    return GetJobUseCase(job_repo)


async def get_list_jobs_use_case(job_repo: JobRepositoryDep) -> ListJobsUseCase:
    return ListJobsUseCase(job_repo)


# Type aliases for cleaner dependency injection
EscrowServiceDep = Annotated[EscrowService, Depends(get_escrow_service)]
ReportingServiceDep = Annotated[ReportingService, Depends(get_reporting_service)]
CreateProfileUseCaseDep = Annotated[
    CreateProfileUseCase, Depends(get_create_profile_use_case)
]
AuthenticateProfileUseCaseDep = Annotated[
    AuthenticateProfileUseCase, Depends(get_authenticate_profile_use_case)
]
ModifyProfileUseCaseDep = Annotated[
    ModifyProfileUseCase, Depends(get_modify_profile_use_case)
]
CreateContractUseCaseDep = Annotated[
    CreateContractUseCase, Depends(get_create_contract_use_case)
]
TerminateContractUseCaseDep = Annotated[
    TerminateContractUseCase, Depends(get_terminate_contract_use_case)
]
CreateJobUseCaseDep = Annotated[CreateJobUseCase, Depends(get_create_job_use_case)]
ModifyJobUseCaseDep = Annotated[ModifyJobUseCase, Depends(get_modify_job_use_case)]
CompleteJobUseCaseDep = Annotated[
    CompleteJobUseCase, Depends(get_complete_job_use_case)
]
ReviewJobUseCaseDep = Annotated[ReviewJobUseCase, Depends(get_review_job_use_case)]
GetLedgerUseCaseDep = Annotated[GetLedgerUseCase, Depends(get_ledger_use_case)]
GetProfileUseCaseDep = Annotated[GetProfileUseCase, Depends(get_profile_use_case)]
ListProfilesUseCaseDep = Annotated[
    ListProfilesUseCase, Depends(get_list_profiles_use_case)
]
GetContractUseCaseDep = Annotated[GetContractUseCase, Depends(get_contract_use_case)]
ListContractsUseCaseDep = Annotated[
    ListContractsUseCase, Depends(get_list_contracts_use_case)
]
GetJobUseCaseDep = Annotated[GetJobUseCase, Depends(get_job_use_case)]
ListJobsUseCaseDep = Annotated[ListJobsUseCase, Depends(get_list_jobs_use_case)]
