"""Profile API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from marketplace.api.dependencies import (
    AuthenticateProfileUseCaseDep,
    CreateProfileUseCaseDep,
    CurrentActorDep,
    GetProfileUseCaseDep,
    ListProfilesUseCaseDep,
    ModifyProfileUseCaseDep,
    PaginationDep,
)
from marketplace.api.schemas.common import PaginatedResponse
from marketplace.api.schemas.profile import (
    AuthResponse,
    LoginRequest,
    ProfileCreateRequest,
    ProfileModifyRequest,
    ProfileResponse,
)
from marketplace.application.interfaces.repositories import ProfileFilters
from marketplace.application.use_cases import (
    AuthenticateProfileRequest,
    CreateProfileRequest,
    ModifyProfileRequest,
)
from marketplace.config.settings import settings
from marketplace.domain.value_objects.profile_type import ProfileType

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.ENVIRONMENT == "production",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


@router.post(
    "/create", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def create_profile(
    profile_data: ProfileCreateRequest,
    response: Response,
    use_case: CreateProfileUseCaseDep,
):
    """Register a client or contractor profile."""
    result = await use_case.execute(
        CreateProfileRequest(
            type=profile_data.type,
            first_name=profile_data.first_name,
            last_name=profile_data.last_name,
            email=profile_data.email,
            password=profile_data.password,
            profession=profile_data.profession,
        )
    )

    _set_auth_cookie(response, result.access_token)
    return AuthResponse(
        profile=ProfileResponse.model_validate(result.profile),
        access_token=result.access_token,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: LoginRequest,
    response: Response,
    use_case: AuthenticateProfileUseCaseDep,
):
    result = await use_case.execute(
        AuthenticateProfileRequest(
            email=credentials.email, password=credentials.password
        )
    )

    _set_auth_cookie(response, result.access_token)
    return AuthResponse(
        profile=ProfileResponse.model_validate(result.profile),
        access_token=result.access_token,
    )


@router.get("/me", response_model=ProfileResponse)
async def get_me(actor: CurrentActorDep, use_case: GetProfileUseCaseDep):
    """Profile of the authenticated actor."""
    return ProfileResponse.model_validate(await use_case.execute(actor.subject_id))


@router.put("/modify", response_model=ProfileResponse)
async def modify_profile(
    profile_data: ProfileModifyRequest,
    actor: CurrentActorDep,
    use_case: ModifyProfileUseCaseDep,
):
    """Update the authenticated actor's own profile."""
    profile = await use_case.execute(
        ModifyProfileRequest(
            actor=actor,
            profile_id=actor.subject_id,
            first_name=profile_data.first_name,
            last_name=profile_data.last_name,
            profession=profile_data.profession,
            type=profile_data.type,
        )
    )
    return ProfileResponse.model_validate(profile)


@router.get("", response_model=PaginatedResponse[ProfileResponse])
async def list_profiles(
    actor: CurrentActorDep,
    pagination: PaginationDep,
    use_case: ListProfilesUseCaseDep,
    profile_type: Optional[ProfileType] = Query(None, alias="type"),
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    profession: Optional[str] = None,
):
    page = await use_case.execute(
        ProfileFilters(
            type=profile_type,
            first_name=first_name,
            last_name=last_name,
            profession=profession,
        ),
        pagination.page,
        pagination.per_page,
    )
    return PaginatedResponse[ProfileResponse].from_page(
        page, [ProfileResponse.model_validate(profile) for profile in page.items]
    )


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(
    profile_id: UUID, actor: CurrentActorDep, use_case: GetProfileUseCaseDep
):
    return ProfileResponse.model_validate(await use_case.execute(profile_id))
